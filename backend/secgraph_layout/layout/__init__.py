"""Layout module - computes level-based positions for sanitized graphs."""

from .constants import CONTAINER_HEIGHT, CONTAINER_WIDTH, LEVEL_HEIGHT, TOP_MARGIN
from .level_layout import reorganize_graph_layout


def layout_constants():
    """Constants the renderer needs to size its canvas."""
    return {
        "width": CONTAINER_WIDTH,
        "height": CONTAINER_HEIGHT,
        "topMargin": TOP_MARGIN,
        "levelHeight": LEVEL_HEIGHT,
    }


__all__ = [
    "CONTAINER_HEIGHT",
    "CONTAINER_WIDTH",
    "LEVEL_HEIGHT",
    "TOP_MARGIN",
    "layout_constants",
    "reorganize_graph_layout",
]
