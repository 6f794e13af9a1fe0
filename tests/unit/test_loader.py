"""Tests for loader: input documents into Graph and Grid."""

from __future__ import annotations

from pathlib import Path

import pytest

from breadthwise.loader import InputError, load_document, load_graph, load_grid, read_mapping
from breadthwise.model import coerce_vertex


class TestLoadGraph:
    def test_square(self, fixtures_dir: Path) -> None:
        g = load_graph(fixtures_dir / "square.yml")
        assert not g.directed
        assert g.neighbors(1) == [2, 4]
        assert g.edge_count() == 4

    def test_isolated_vertices_first(self, fixtures_dir: Path) -> None:
        g = load_graph(fixtures_dir / "split.yml")
        assert g.all_vertices() == [5, 1, 2, 3, 4]

    def test_string_vertices_directed(self, fixtures_dir: Path) -> None:
        g = load_graph(fixtures_dir / "words.yml")
        assert g.directed
        assert g.neighbors("a") == ["b"]
        assert g.neighbors("c") == []

    def test_missing_graph_section(self, tmp_path: Path) -> None:
        doc = tmp_path / "grid-only.yml"
        doc.write_text("grid:\n  - [0]\n")
        with pytest.raises(InputError):
            load_graph(doc)


class TestLoadGrid:
    def test_square(self, fixtures_dir: Path) -> None:
        grid = load_grid(fixtures_dir / "square.yml")
        assert (grid.rows, grid.cols) == (3, 3)
        assert not grid.is_passable((1, 0))

    def test_missing_grid_section(self, fixtures_dir: Path) -> None:
        with pytest.raises(InputError):
            load_grid(fixtures_dir / "split.yml")

    def test_ragged_grid_rejected(self, tmp_path: Path) -> None:
        doc = tmp_path / "ragged.yml"
        doc.write_text("grid:\n  - [0, 0]\n  - [0]\n")
        with pytest.raises(InputError, match="same length"):
            load_grid(doc)


class TestBadDocuments:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(InputError):
            load_document(tmp_path / "nope.yml")

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.yml"
        bad.write_text("{{{{not yaml!!!!")
        with pytest.raises(InputError):
            load_document(bad)

    def test_non_mapping(self, tmp_path: Path) -> None:
        bad = tmp_path / "list.yml"
        bad.write_text("- 1\n- 2\n")
        with pytest.raises(InputError):
            load_document(bad)

    def test_bad_edge(self, tmp_path: Path) -> None:
        bad = tmp_path / "edge.yml"
        bad.write_text("graph:\n  edges:\n    - [1, 2, 3]\n")
        with pytest.raises(InputError):
            load_document(bad)

    def test_empty_file(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty.yml"
        empty.write_text("")
        with pytest.raises(InputError, match="empty"):
            load_document(empty)


class TestReadMapping:
    def test_empty_is_none(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty.yml"
        empty.write_text("")
        assert read_mapping(empty) is None

    def test_mapping(self, tmp_path: Path) -> None:
        doc = tmp_path / "doc.yml"
        doc.write_text("a: 1\n")
        assert read_mapping(doc) == {"a": 1}


class TestVertexIds:
    def test_quoted_numbers_become_ints(self, tmp_path: Path) -> None:
        doc = tmp_path / "quoted.yml"
        doc.write_text("graph:\n  vertices: ['7']\n  edges:\n    - ['1', 2]\n    - [-3, 'x']\n")
        g = load_graph(doc)
        assert g.all_vertices() == [7, 1, 2, -3, "x"]
        assert g.neighbors(1) == [2]

    def test_coerce_vertex(self) -> None:
        assert coerce_vertex("12") == 12
        assert coerce_vertex("-4") == -4
        assert coerce_vertex("a1") == "a1"
        assert coerce_vertex("1.5") == "1.5"
        assert coerce_vertex(3) == 3
