"""
Level-based layout for sanitized security graphs.

Levels come from a multi-source BFS over outgoing edges, seeded with every root
(in-degree 0, or the minimum in-degree when every node sits on a cycle).
Within a level, nodes get fixed slots ordered by id; nodes the BFS never
reaches go on one extra row below the deepest level.

All arithmetic is integer (floor division), so identical ids and edges always
produce identical coordinates regardless of input order.
"""

from collections import Counter, deque
from typing import Dict, List

import networkx as nx
from loguru import logger

from secgraph_layout.shared.models import Graph

from .constants import CONTAINER_WIDTH, LEVEL_HEIGHT, TOP_MARGIN


def _index_nodes(graph: Graph) -> Dict[str, List[int]]:
    """id -> positions in graph.nodes. Rebuilt per call, never kept."""
    index: Dict[str, List[int]] = {}
    for i, node in enumerate(graph.nodes):
        index.setdefault(node.id, []).append(i)
    return index


def build_edge_graph(graph: Graph) -> nx.MultiDiGraph:
    """
    Multigraph over node ids in node order. Parallel edges and self-loops are
    kept so they count toward in-degree; edges to unknown ids are ignored.
    """
    G = nx.MultiDiGraph()
    G.add_nodes_from(n.id for n in graph.nodes)
    G.add_edges_from(
        (e.source, e.target) for e in graph.edges if e.source in G and e.target in G
    )
    return G


def select_roots(G: nx.MultiDiGraph) -> List[str]:
    """Zero in-degree nodes; if none, every node tied at the minimum in-degree."""
    in_degree = dict(G.in_degree())
    if not in_degree:
        return []
    roots = [nid for nid, deg in in_degree.items() if deg == 0]
    if roots:
        return roots
    min_incoming = min(in_degree.values())
    return [nid for nid, deg in in_degree.items() if deg == min_incoming]


def assign_levels(G: nx.MultiDiGraph, roots: List[str]) -> Dict[str, int]:
    """FIFO BFS from all roots at once; first visit wins. Unreached ids are absent."""
    levels: Dict[str, int] = {}
    queue = deque()
    for rid in roots:
        levels[rid] = 0
        queue.append(rid)
    while queue:
        nid = queue.popleft()
        for child in G.successors(nid):
            if child not in levels:
                levels[child] = levels[nid] + 1
                queue.append(child)
    return levels


def reorganize_graph_layout(
    graph: Graph,
    width: int = CONTAINER_WIDTH,
    top_margin: int = TOP_MARGIN,
    level_height: int = LEVEL_HEIGHT,
) -> Graph:
    """
    Fill level/x/y on every node of a sanitized graph, in place.
    No nodes or edges are added or removed; security values are left untouched.
    """
    if not graph.nodes:
        return graph

    index = _index_nodes(graph)
    # Snapshot per position so duplicated ids keep their own values
    security = [node.security for node in graph.nodes]

    G = build_edge_graph(graph)
    roots = select_roots(G)
    levels = assign_levels(G, roots)

    max_level = max(levels.values(), default=0)
    nodes_per_level = Counter(levels.values())

    ids_by_level: Dict[int, List[str]] = {}
    for nid, level in levels.items():
        ids_by_level.setdefault(level, []).append(nid)
    rank: Dict[str, int] = {}
    for level_ids in ids_by_level.values():
        for pos, nid in enumerate(sorted(level_ids), start=1):
            rank[nid] = pos

    for nid, level in levels.items():
        spacing = width // (nodes_per_level[level] + 1)
        for i in index[nid]:
            node = graph.nodes[i]
            node.x = rank[nid] * spacing
            node.y = top_margin + level * level_height
            node.level = level

    unreached = [i for i, node in enumerate(graph.nodes) if node.id not in levels]
    if unreached:
        extra_level = max_level + 1
        extra_y = top_margin + extra_level * level_height
        denominator = len(graph.nodes) - len(levels) + 1
        assert denominator >= 1
        extra_spacing = width // denominator
        for count, i in enumerate(unreached, start=1):
            node = graph.nodes[i]
            node.x = count * extra_spacing
            node.y = extra_y
            node.level = extra_level

    for node, value in zip(graph.nodes, security):
        node.security = value

    logger.debug(
        "Layout: {} roots, {} levels, {} unreached of {} nodes",
        len(roots), max_level + 1 if levels else 0, len(unreached), len(graph.nodes),
    )
    return graph
