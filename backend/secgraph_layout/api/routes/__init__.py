"""API route modules."""

from fastapi import FastAPI

from . import graph


def register_routes(app: FastAPI):
    """Register all API routers."""
    app.include_router(graph.router, prefix="/api/graph", tags=["graph"])
