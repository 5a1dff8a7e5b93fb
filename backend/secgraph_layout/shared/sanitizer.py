"""
Graph sanitizer - two passes, always in this order:
  1. validate_graph: drop edges referencing missing nodes
  2. remove_isolated_nodes: drop nodes touched by no surviving edge
Nothing is raised; invalid parts are silently discarded.
"""

from loguru import logger

from .models import Graph


def validate_graph(graph: Graph) -> Graph:
    """Keep only edges whose both endpoints are node ids."""
    valid_ids = set(graph.node_ids())
    before = len(graph.edges)
    graph.edges = [e for e in graph.edges if e.source in valid_ids and e.target in valid_ids]
    if len(graph.edges) != before:
        logger.debug("Dropped {} dangling edge(s)", before - len(graph.edges))
    return graph


def remove_isolated_nodes(graph: Graph) -> Graph:
    """Keep only nodes that are an endpoint of at least one edge."""
    connected = set()
    for e in graph.edges:
        connected.add(e.source)
        connected.add(e.target)
    before = len(graph.nodes)
    graph.nodes = [n for n in graph.nodes if n.id in connected]
    if len(graph.nodes) != before:
        logger.debug("Dropped {} isolated node(s)", before - len(graph.nodes))
    return graph


def sanitize_graph(graph: Graph) -> Graph:
    return remove_isolated_nodes(validate_graph(graph))
