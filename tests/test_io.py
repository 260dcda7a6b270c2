"""Tests for loading graph files and exporting reports."""

import json
import tomllib
from pathlib import Path

import pytest

from arrowgraph import CycleDetectedError, InvalidArgumentError, export_report, graph_from_data, load_graph
from arrowgraph._io import report_to_dict


class TestGraphFromData:
    def test_plain_table(self) -> None:
        graph = graph_from_data({"a": ["b"], "c": []})
        assert graph.to_dict() == {"a": ["b"], "c": []}

    def test_arrows_table(self) -> None:
        graph = graph_from_data({"arrows": {"a": ["b"]}})
        assert graph.to_dict() == {"a": ["b"]}

    def test_tail_named_arrows(self) -> None:
        graph = graph_from_data({"arrows": ["b"]})
        assert graph.to_dict() == {"arrows": ["b"]}

    def test_rows(self) -> None:
        graph = graph_from_data([["a", "b", "c"], ["d"]])
        assert graph.to_dict() == {"a": ["b", "c"], "d": []}

    def test_invalid_heads(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Invalid adjacency table"):
            graph_from_data({"a": "b"})

    def test_invalid_rows(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Invalid adjacency rows"):
            graph_from_data([["a", {"b": 1}]])

    def test_empty_row(self) -> None:
        with pytest.raises(InvalidArgumentError, match="empty"):
            graph_from_data([[]])


class TestLoadGraph:
    def test_load_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "graph.toml"
        path.write_text('V = []\nX = ["Y", "Z"]\nW = ["X", "Y"]\n')

        graph = load_graph(path)

        assert graph.levels() == {"V": 0, "X": 1, "Y": 2, "Z": 2, "W": 0}

    def test_load_toml_arrows_table(self, tmp_path: Path) -> None:
        path = tmp_path / "graph.toml"
        path.write_text('[arrows]\na = ["b", "b"]\n')

        graph = load_graph(path)

        assert graph["a"] == ("b", "b")

    def test_load_json_object(self, tmp_path: Path) -> None:
        path = tmp_path / "graph.json"
        path.write_text(json.dumps({"a": ["b"]}))

        assert load_graph(path).to_dict() == {"a": ["b"]}

    def test_load_json_rows(self, tmp_path: Path) -> None:
        path = tmp_path / "graph.json"
        path.write_text(json.dumps([["a", "b"], ["c"]]))

        assert load_graph(path).to_dict() == {"a": ["b"], "c": []}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "graph.toml"
        path.write_text("a = [\n")

        with pytest.raises(InvalidArgumentError, match="Invalid TOML"):
            load_graph(path)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "graph.json"
        path.write_text("{")

        with pytest.raises(InvalidArgumentError, match="Invalid JSON"):
            load_graph(path)

    def test_non_utf8_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "graph.toml"
        path.write_bytes(b'\xff a = ["b"]\n')

        with pytest.raises(InvalidArgumentError, match="Invalid TOML"):
            load_graph(path)

    def test_non_utf8_json(self, tmp_path: Path) -> None:
        path = tmp_path / "graph.json"
        path.write_bytes(b'{"a": ["\xff"]}')

        with pytest.raises(InvalidArgumentError, match="Invalid JSON"):
            load_graph(path)

    def test_unsupported_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "graph.yaml"
        path.write_text("a: [b]\n")

        with pytest.raises(InvalidArgumentError, match="Unsupported graph file type"):
            load_graph(path)


class TestExportReport:
    def test_writes_tables(self, tmp_path: Path) -> None:
        output = tmp_path / "report.toml"

        export_report({"V": [], "X": ["Y", "Z"], "W": ["X", "Y"]}, output)

        with output.open("rb") as f:
            report = tomllib.load(f)
        assert report["vertices"] == ["V", "W", "X", "Y", "Z"]
        assert report["indegree"] == {"V": 0, "X": 1, "Y": 2, "Z": 1, "W": 0}
        assert report["levels"] == {"V": 0, "X": 1, "Y": 2, "Z": 2, "W": 0}

    def test_non_string_vertices(self, tmp_path: Path) -> None:
        output = tmp_path / "report.toml"

        export_report({1: [2]}, output)

        with output.open("rb") as f:
            report = tomllib.load(f)
        assert report["levels"] == {"1": 0, "2": 1}

    def test_cycle_writes_nothing(self, tmp_path: Path) -> None:
        output = tmp_path / "report.toml"

        with pytest.raises(CycleDetectedError):
            export_report({"a": ["a"]}, output)

        assert not output.exists()

    def test_colliding_display_strings_rejected(self, tmp_path: Path) -> None:
        output = tmp_path / "report.toml"

        with pytest.raises(InvalidArgumentError, match="both render as '1'"):
            export_report({1: ["x"], "1": []}, output)

        assert not output.exists()

    def test_report_covers_every_vertex(self) -> None:
        graph = {1: ["x"], (1, 2): ["x"]}

        report = report_to_dict(graph)

        assert len(report["levels"]) == len(report["indegree"]) == 3
        assert report["levels"] == {"1": 0, "(1, 2)": 0, "x": 1}
