import json
import os

import pytest

from nx_mst import cli

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SAMPLE_INPUT = os.path.join(ROOT, "data", "input.json")


@pytest.mark.unit
def test_main_writes_results(tmp_path, capsys):
    out = tmp_path / "output.json"
    assert cli.main([SAMPLE_INPUT, str(out)]) == 0

    doc = json.loads(out.read_text(encoding="utf-8"))
    costs = {r["graph_id"]: (r["prim"]["total_cost"], r["kruskal"]["total_cost"]) for r in doc["results"]}
    assert costs == {1: (16, 16), 2: (6, 6), 3: (8, 8)}
    assert doc["results"][2]["input_stats"] == {"vertices": 5, "edges": 4}

    stdout = capsys.readouterr().out
    assert "Loaded 3 graph(s)" in stdout
    assert "Processing Graph #1: 5 vertices, 7 edges" in stdout
    assert "MST costs match: 16" in stdout
    assert "1. B - C (2)" in stdout
    assert f"Results written to '{out}'" in stdout


@pytest.mark.unit
def test_quiet_hides_edge_list(tmp_path, capsys):
    out = tmp_path / "output.json"
    assert cli.main([SAMPLE_INPUT, str(out), "--quiet"]) == 0
    stdout = capsys.readouterr().out
    assert "MST Edges (4):" in stdout
    assert "1. B - C (2)" not in stdout


@pytest.mark.unit
def test_missing_input(tmp_path, capsys):
    code = cli.main([str(tmp_path / "missing.json"), str(tmp_path / "out.json")])
    assert code == 1
    err = capsys.readouterr().err
    assert err.startswith("Error:")
    assert "Usage: nx-mst [input_file] [output_file]" in err
    assert cli.DEFAULT_INPUT_FILE in err
    assert not (tmp_path / "out.json").exists()


@pytest.mark.unit
def test_invalid_json(tmp_path, capsys):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    assert cli.main([str(bad), str(tmp_path / "out.json")]) == 1
    assert "Usage" in capsys.readouterr().err


@pytest.mark.unit
def test_input_not_utf8(tmp_path, capsys):
    bad = tmp_path / "latin1.json"
    bad.write_bytes(b'{"graphs": [{"id": 1, "nodes": ["\xff"], "edges": []}]}')
    assert cli.main([str(bad), str(tmp_path / "out.json")]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error:")
    assert "UTF-8" in err
    assert "Usage" in err
    assert not (tmp_path / "out.json").exists()


@pytest.mark.unit
def test_malformed_document(tmp_path, capsys):
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"graphs": [{"id": 1, "nodes": ["A"], "edges": [
        {"from": "A", "to": "B", "weight": 2}]}]}), encoding="utf-8")
    assert cli.main([str(bad), str(tmp_path / "out.json")]) == 1
    assert "'B'" in capsys.readouterr().err


@pytest.mark.unit
def test_unwritable_output(tmp_path, capsys):
    out = tmp_path / "no" / "such" / "dir" / "out.json"
    assert cli.main([SAMPLE_INPUT, str(out)]) == 1
    assert "Error:" in capsys.readouterr().err


@pytest.mark.unit
def test_default_paths():
    args = cli.build_parser().parse_args([])
    assert args.input == cli.DEFAULT_INPUT_FILE
    assert args.output == cli.DEFAULT_OUTPUT_FILE
