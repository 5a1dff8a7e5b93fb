"""Shared pytest fixtures for graph layout tests."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from secgraph_layout.shared.models import Edge, Graph, Node


def _build_graph(nodes: list[Any], edges: list[tuple[str, str]]) -> Graph:
    """Nodes as ids or dicts of Node fields; edges as (from, to) pairs."""
    built = [Node(id=n) if isinstance(n, str) else Node(**n) for n in nodes]
    return Graph(nodes=built, edges=[Edge(source=s, target=t) for s, t in edges])


@pytest.fixture
def make_graph() -> Callable[..., Graph]:
    """Factory for in-memory graphs."""
    return _build_graph


@pytest.fixture
def payload() -> dict[str, Any]:
    """A small decoded-but-unsanitized upload: one dangling edge, one isolated node."""
    return {
        "nodes": [
            {"id": "web", "label": "Web", "desc": "frontend", "security": 1},
            {"id": "api", "label": "API", "desc": "backend", "security": 2},
            {"id": "db", "label": "DB", "desc": "storage", "security": 3},
            {"id": "lonely", "label": "Lonely", "desc": "no edges", "security": 9},
        ],
        "edges": [
            {"from": "web", "to": "api"},
            {"from": "api", "to": "db"},
            {"from": "api", "to": "ghost"},
        ],
    }
