"""
Layout constants for the level-based graph view.
Defaults match the renderer's fixed canvas; each can be overridden via env.
"""

import os


def _int_env(name: str, default: int) -> int:
    v = os.environ.get(name)
    return int(v) if v is not None else default


# Drawing area (the renderer's canvas)
CONTAINER_WIDTH = _int_env("GRAPH_LAYOUT_WIDTH", 1000)
CONTAINER_HEIGHT = _int_env("GRAPH_LAYOUT_HEIGHT", 550)

# Space above level 0
TOP_MARGIN = _int_env("GRAPH_LAYOUT_TOP_MARGIN", 50)

# Vertical distance between consecutive levels
LEVEL_HEIGHT = _int_env("GRAPH_LAYOUT_LEVEL_HEIGHT", 100)
