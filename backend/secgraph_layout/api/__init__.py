"""
API module - routes and schemas.
Routes decode the request, run the graph pipeline and return JSON.
"""

from .routes import register_routes

__all__ = ["register_routes"]
