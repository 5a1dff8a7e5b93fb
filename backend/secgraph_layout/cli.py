#!/usr/bin/env python3
"""
Lay out a graph JSON file from the command line.
Run: python -m secgraph_layout.cli graph.json [--width 1000] [--top-margin 50] [--level-height 100] [--indent]
Outputs JSON: the sanitized graph with level/x/y, or {"error": "..."} with exit status 1.
"""

import argparse
import asyncio
import sys

import orjson

from secgraph_layout.layout import CONTAINER_WIDTH, LEVEL_HEIGHT, TOP_MARGIN
from secgraph_layout.shared import GraphDecodeError, load_graph_file
from secgraph_layout.shared.pipeline import process_graph


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sanitize a graph and compute its level layout.")
    parser.add_argument("path", help="Graph JSON file ({nodes: [...], edges: [...]})")
    parser.add_argument("--width", type=int, default=CONTAINER_WIDTH, help="Drawing area width")
    parser.add_argument("--top-margin", type=int, default=TOP_MARGIN, help="Space above level 0")
    parser.add_argument("--level-height", type=int, default=LEVEL_HEIGHT, help="Vertical spacing per level")
    parser.add_argument("--indent", action="store_true", help="Pretty-print output")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    option = orjson.OPT_INDENT_2 if args.indent else 0
    try:
        graph = asyncio.run(load_graph_file(args.path))
    except GraphDecodeError as e:
        sys.stdout.write(orjson.dumps({"error": str(e)}, option=option).decode() + "\n")
        return 1
    process_graph(graph, width=args.width, top_margin=args.top_margin, level_height=args.level_height)
    sys.stdout.write(orjson.dumps(graph.to_payload(), option=option).decode() + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
