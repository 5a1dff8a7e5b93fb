"""
Graph decoder - raw JSON payload -> Graph.
Boundary between transport (upload, file, request body) and the layout core:
every error a payload can produce is raised here, never inside sanitizer/layout.
Uses orjson for parsing, pydantic for shape/type validation.
"""

from collections import Counter
from pathlib import Path
from typing import Any, Union

import aiofiles
import orjson
from loguru import logger
from pydantic import ValidationError

from .models import Graph


class GraphDecodeError(ValueError):
    """Payload could not be turned into a usable Graph."""


class GraphReadError(GraphDecodeError):
    pass


class MalformedGraphError(GraphDecodeError):
    pass


class EmptyGraphError(GraphDecodeError):
    pass


class DuplicateNodeError(GraphDecodeError):
    def __init__(self, node_ids):
        self.node_ids = sorted(node_ids)
        super().__init__("graph data is invalid: duplicate node id(s): " + ", ".join(self.node_ids))


def _parse(raw: Union[bytes, str, dict]) -> Any:
    if isinstance(raw, dict):
        return raw
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, TypeError) as e:
        raise MalformedGraphError(f"failed to parse JSON: {e}") from e


def decode_graph(raw: Union[bytes, str, dict]) -> Graph:
    """
    Decode a serialized graph. Unknown fields are ignored, missing fields default.
    Raises MalformedGraphError, EmptyGraphError or DuplicateNodeError.
    """
    data = _parse(raw)
    if not isinstance(data, dict):
        raise MalformedGraphError("failed to parse JSON: top-level value must be an object")
    try:
        graph = Graph.model_validate(data)
    except ValidationError as e:
        raise MalformedGraphError(f"failed to parse JSON: {e.errors()[0].get('msg', e)}") from e

    logger.info("Parsed graph with {} nodes and {} edges", len(graph.nodes), len(graph.edges))

    if not graph.nodes:
        raise EmptyGraphError("graph data is incomplete: no nodes found")

    dupes = [nid for nid, n in Counter(graph.node_ids()).items() if n > 1]
    if dupes:
        raise DuplicateNodeError(dupes)
    return graph


async def load_graph_file(path: Union[str, Path]) -> Graph:
    """Read a graph JSON file and decode it. Unreadable file -> GraphReadError."""
    try:
        async with aiofiles.open(path, "rb") as f:
            data = await f.read()
    except OSError as e:
        raise GraphReadError(f"failed to open file: {e}") from e
    return decode_graph(data)
