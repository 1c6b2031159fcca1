"""
Unit tests for text map loading.
"""

import pytest

from gridpath.config import list_maps
from gridpath.errors import MapStructureError
from gridpath.graph import GridGraph, Terrain
from gridpath.maps import load_map, parse_map
from gridpath.search import SearchEngine


class TestParseMap:
    """Test parsing map text."""

    def test_last_line_is_row_zero(self):
        """Lines are read bottom-up."""
        rows = parse_map("100\n000\n")
        assert rows == [[0, 0, 0], [1, 0, 0]]

    def test_short_rows_padded(self):
        """Rows shorter than the widest line are padded with open cells."""
        rows = parse_map("0000\n22\n")
        assert rows == [[2, 2, 0, 0], [0, 0, 0, 0]]

    def test_windows_line_endings(self):
        """CRLF line endings are accepted."""
        assert parse_map("01\r\n20\r\n") == [[2, 0], [0, 1]]

    def test_trailing_blank_lines_ignored(self):
        """Blank lines at the end of the file are not rows."""
        assert parse_map("00\n\n\n") == [[0, 0]]

    def test_empty_text(self):
        """Text without rows is rejected."""
        with pytest.raises(MapStructureError, match="no rows"):
            parse_map("\n\n")

    def test_invalid_character(self):
        """Non-digit cells are rejected with their position."""
        with pytest.raises(MapStructureError, match=r"\(1, 0\)"):
            parse_map("000\n0#0\n")

    def test_unicode_digit_rejected(self):
        """Only ASCII digits are map cells."""
        with pytest.raises(MapStructureError, match=r"\(1, 0\)"):
            parse_map("00\n0²\n")


class TestLoadMap:
    """Test loading map files."""

    def test_load_file(self, tmp_path):
        """A map file on disk loads and builds."""
        path = tmp_path / "tiny.txt"
        path.write_text("010\n000\n", encoding="utf-8")
        graph = GridGraph.build(load_map(path))
        assert graph.node(1, 1).terrain is Terrain.BLOCKED

    def test_load_by_name(self):
        """Maps in the maps directory can be loaded by bare name."""
        rows = load_map("demo")
        assert len(rows) == 10
        assert len(rows[0]) == 16

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_map(tmp_path / "nope.txt")

    def test_invalid_utf8(self, tmp_path):
        """Undecodable bytes are reported as a map error."""
        path = tmp_path / "binary.txt"
        path.write_bytes(b"0\xff\n00\n")
        with pytest.raises(MapStructureError, match="UTF-8"):
            load_map(path)

    def test_sample_maps_build(self):
        """Every shipped map builds into a graph."""
        maps = list_maps()
        assert maps
        for path in maps:
            GridGraph.build(load_map(path))

    def test_demo_map_is_solvable(self):
        """The demo map has a path between opposite corners."""
        graph = GridGraph.build(load_map("demo.txt"))
        engine = SearchEngine(mode="astar")
        engine.init(graph, (0, 0), (15, 9))
        assert engine.run().found

    def test_walled_map_is_not_solvable(self):
        """The walled map separates its left and right halves."""
        graph = GridGraph.build(load_map("walled.txt"))
        engine = SearchEngine(mode="dijkstra")
        engine.init(graph, (0, 0), (9, 4))
        assert not engine.run().found
