"""
Security graph layout backend - FastAPI entry point.
Run: uvicorn secgraph_layout.main:app --app-dir backend
"""

from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from loguru import logger

from secgraph_layout.api import register_routes

app = FastAPI(title="Security Graph Layout")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_routes(app)

# Renderer static files (optional)
FRONTEND_DIR = Path(__file__).parents[2] / "frontend"

# Static file serving - MUST come after all API routes
if FRONTEND_DIR.exists():
    app.mount("/", StaticFiles(directory=str(FRONTEND_DIR), html=True), name="static")
    logger.info("Serving renderer from {}", FRONTEND_DIR)


if __name__ == "__main__":
    import os

    import uvicorn

    uvicorn.run(app, host=os.environ.get("GRAPH_HOST", "0.0.0.0"), port=int(os.environ.get("GRAPH_PORT", "8080")))
