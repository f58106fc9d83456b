"""Tests for the layout export script."""

from __future__ import annotations

import json
import sys

import pytest

from layout_export import export_layout, load_layout, main


def _write_layout(tmp_path, payload) -> str:
    path = tmp_path / "layout.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_export_writes_files(tmp_path, star_layout):
    req = load_layout(_write_layout(tmp_path, star_layout))
    out = tmp_path / "out"
    export_layout(req, output_dir=str(out), include_graph=True)

    csv_lines = (out / "mandala_centrality_analysis.csv").read_text(encoding="utf-8").splitlines()
    assert csv_lines[1] == "center,0,4,1.0000,6.0000,0.4472"

    conn = json.loads((out / "mandala_connectivity.json").read_text(encoding="utf-8"))
    assert conn["node_count"] == 5

    graph = json.loads((out / "mandala_graph.json").read_text(encoding="utf-8"))
    assert len(graph["nodes"]) == 5


def test_export_to_stdout(tmp_path, capsys, star_layout):
    req = load_layout(_write_layout(tmp_path, star_layout))
    export_layout(req)
    assert capsys.readouterr().out.startswith("Node ID,Layer")


def test_flags_disable_edges(tmp_path, lotus_layout):
    req = load_layout(_write_layout(tmp_path, lotus_layout))
    result = export_layout(req, output_dir=str(tmp_path / "out"), ring=False)
    assert all(e.kind.value == "radial" for e in result.graph.edges)


def test_invalid_layout(tmp_path):
    with pytest.raises(ValueError, match="Invalid layout"):
        load_layout(_write_layout(tmp_path, {"motifs": [{"radius": 0.5}]}))


def test_unreadable_layout(tmp_path):
    with pytest.raises(ValueError, match="Cannot read"):
        load_layout(str(tmp_path / "missing.json"))


def _run_main(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["layout_export.py", *argv])
    main()


def test_main_invalid_layout_exits_1(tmp_path, monkeypatch, capsys):
    path = _write_layout(tmp_path, {"motifs": [{"radius": 0.5}]})
    with pytest.raises(SystemExit) as exc:
        _run_main(monkeypatch, path)
    assert exc.value.code == 1
    assert capsys.readouterr().err.startswith("Error: Invalid layout")


def test_main_unreadable_layout_exits_1(tmp_path, monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        _run_main(monkeypatch, str(tmp_path / "missing.json"))
    assert exc.value.code == 1
    assert "Error: Cannot read" in capsys.readouterr().err


def test_main_no_radial_keeps_ring_edges(tmp_path, monkeypatch, lotus_layout):
    out = tmp_path / "out"
    _run_main(monkeypatch, _write_layout(tmp_path, lotus_layout), "-o", str(out), "-g", "--no-radial")

    graph = json.loads((out / "mandala_graph.json").read_text(encoding="utf-8"))
    assert graph["edges"]
    assert {e["kind"] for e in graph["edges"]} == {"ring"}

    conn = json.loads((out / "mandala_connectivity.json").read_text(encoding="utf-8"))
    assert conn["topology_settings"] == {"radial": False, "ring": True}


def test_main_verbose_prints_csv(tmp_path, monkeypatch, capsys, star_layout):
    _run_main(monkeypatch, _write_layout(tmp_path, star_layout), "-v")
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Node ID,Layer,Degree,Closeness,Betweenness,Eigenvector"
    assert lines[1] == "center,0,4,1.0000,6.0000,0.4472"
