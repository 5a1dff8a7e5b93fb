"""Tests for the command-line entry point."""

from __future__ import annotations

from pathlib import Path

import orjson

from secgraph_layout.cli import main


def test_cli_layout(tmp_path: Path, payload, capsys) -> None:
    path = tmp_path / "graph.json"
    path.write_bytes(orjson.dumps(payload))
    assert main([str(path)]) == 0
    data = orjson.loads(capsys.readouterr().out)
    assert [n["id"] for n in data["nodes"]] == ["web", "api", "db"]
    assert [(n["level"], n["x"], n["y"]) for n in data["nodes"]] == [(0, 500, 50), (1, 500, 150), (2, 500, 250)]


def test_cli_layout_options(tmp_path: Path, payload, capsys) -> None:
    path = tmp_path / "graph.json"
    path.write_bytes(orjson.dumps(payload))
    assert main([str(path), "--width", "400", "--top-margin", "0", "--level-height", "20", "--indent"]) == 0
    data = orjson.loads(capsys.readouterr().out)
    assert [(n["x"], n["y"]) for n in data["nodes"]] == [(200, 0), (200, 20), (200, 40)]


def test_cli_missing_file(tmp_path: Path, capsys) -> None:
    assert main([str(tmp_path / "missing.json")]) == 1
    data = orjson.loads(capsys.readouterr().out)
    assert data["error"].startswith("failed to open file")
