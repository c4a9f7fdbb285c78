from pathlib import Path

import pytest

import main
from graph import Graph
from shortest_path import compute


CONFIG = """\
graph:
  edges:
    - [A, B, 6]
    - [A, D, 1]
    - [D, B, 2]
  vertices: [Z]
start: D
"""


def write_config(tmp_path: Path, text: str = CONFIG) -> Path:
    path = tmp_path / "graph.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def rows(output: str):
    return [line.split() for line in output.splitlines()[2:]]


def test_format_table_marks_unreachable_and_start():
    table = compute(Graph([("A", "B", 3)], vertices=["Z"]), "A")

    text = main.format_table(table)

    assert text.splitlines()[0] == "Shortest paths from A:"
    assert rows(text) == [["A", "0", "-"], ["B", "3", "A"], ["Z", "inf", "-"]]


def test_main_uses_sample_graph(capsys):
    assert main.main([]) == 0

    output = capsys.readouterr().out
    assert rows(output) == [
        ["A", "0", "-"],
        ["B", "3", "D"],
        ["D", "1", "A"],
        ["E", "2", "D"],
        ["C", "7", "E"],
    ]


def test_main_start_override(capsys):
    assert main.main(["--start", "C"]) == 0

    output = capsys.readouterr().out
    assert output.splitlines()[0] == "Shortest paths from C:"


def test_main_reads_config(tmp_path, capsys):
    assert main.main(["--config", str(write_config(tmp_path))]) == 0

    output = capsys.readouterr().out
    assert output.splitlines()[0] == "Shortest paths from D:"
    assert rows(output) == [
        ["A", "1", "D"],
        ["B", "2", "D"],
        ["D", "0", "-"],
        ["Z", "inf", "-"],
    ]


def test_main_rejects_unknown_start(capsys):
    assert main.main(["--start", "Q"]) == 2

    assert "not part of the graph" in capsys.readouterr().err


def test_main_rejects_missing_config(tmp_path, capsys):
    assert main.main(["--config", str(tmp_path / "missing.yaml")]) == 2

    assert capsys.readouterr().err.startswith("Error:")


def test_main_rejects_config_without_graph(tmp_path):
    path = write_config(tmp_path, "start: A\n")

    assert main.main(["--config", str(path)]) == 2


def test_main_rejects_negative_weight(tmp_path):
    path = write_config(tmp_path, "graph:\n  edges:\n    - [A, B, -3]\n")

    assert main.main(["--config", str(path)]) == 2


def test_shipped_sample_config(capsys):
    path = Path(__file__).resolve().parent.parent / "sample_graph.yaml"

    assert main.main(["--config", str(path)]) == 0
    assert ["F", "inf", "-"] in rows(capsys.readouterr().out)


@pytest.mark.parametrize(
    "text",
    [
        "graph: null\n",
        "graph:\n  edges:\n    - [A, B, null]\n",
        "graph:\n  edges:\n    - null\n",
        "- [A, B, 1]\n",
        "graph:\n  edges:\n    - [A, B, 1.5]\n",
        "graph:\n  edges: A-B\n",
    ],
)
def test_main_reports_malformed_config(tmp_path, capsys, text):
    path = write_config(tmp_path, text)

    assert main.main(["--config", str(path)]) == 2
    assert capsys.readouterr().err.startswith("Error:")


def test_main_start_matches_integer_vertices(tmp_path, capsys):
    path = write_config(tmp_path, "graph:\n  edges:\n    - [1, 2, 3]\n    - [2, 3, 4]\n")

    assert main.main(["--config", str(path), "--start", "2"]) == 0

    output = capsys.readouterr().out
    assert output.splitlines()[0] == "Shortest paths from 2:"
    assert rows(output) == [["1", "3", "2"], ["2", "0", "-"], ["3", "4", "2"]]


def test_resolve_start_prefers_exact_label():
    graph = Graph([("1", "2", 1), (1, "2", 5)])

    assert main.resolve_start(graph, "1") == "1"
    assert main.resolve_start(Graph([(1, 2, 1)]), "1") == 1
    assert main.resolve_start(Graph([(1, 2, 1)]), "9") == "9"
