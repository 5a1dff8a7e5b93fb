"""Graph types, decoding and sanitizing shared by the API, CLI and layout."""

from .decoder import (
    DuplicateNodeError,
    EmptyGraphError,
    GraphDecodeError,
    GraphReadError,
    MalformedGraphError,
    decode_graph,
    load_graph_file,
)
from .models import Edge, Graph, Node
from .sanitizer import remove_isolated_nodes, sanitize_graph, validate_graph

__all__ = [
    "DuplicateNodeError",
    "Edge",
    "EmptyGraphError",
    "Graph",
    "GraphDecodeError",
    "GraphReadError",
    "MalformedGraphError",
    "Node",
    "decode_graph",
    "load_graph_file",
    "remove_isolated_nodes",
    "sanitize_graph",
    "validate_graph",
]
