"""Sanitize then lay out a decoded graph. The only entry point collaborators need."""

from loguru import logger

from secgraph_layout.layout import reorganize_graph_layout

from .models import Graph
from .sanitizer import remove_isolated_nodes, validate_graph


def process_graph(graph: Graph, **layout_options) -> Graph:
    """validate_graph -> remove_isolated_nodes -> reorganize_graph_layout, in place."""
    nodes_in, edges_in = len(graph.nodes), len(graph.edges)
    validate_graph(graph)
    remove_isolated_nodes(graph)
    reorganize_graph_layout(graph, **layout_options)
    logger.info(
        "Processed graph: {}/{} nodes, {}/{} edges kept",
        len(graph.nodes), nodes_in, len(graph.edges), edges_in,
    )
    return graph
