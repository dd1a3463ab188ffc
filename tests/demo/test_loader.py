"""Tests for reading matrices from files."""
from __future__ import annotations

from pathlib import Path

import pytest

from kahncycle.demo.loader import load_matrix, parse_matrix
from kahncycle.demo.report import format_matrix
from kahncycle.demo.samples import ACYCLIC, CYCLIC
from kahncycle.graph.matrix import AdjacencyMatrix, InvalidGraphError


class TestParseMatrix:
    def test_text_whitespace_and_commas(self) -> None:
        g = parse_matrix("0, 1\n\n1  0  # back edge\n")
        assert g.rows() == [[0, 1], [1, 0]]

    def test_text_empty(self) -> None:
        assert parse_matrix("# nothing here\n\n").vertex_count == 0

    def test_text_bad_token(self) -> None:
        with pytest.raises(InvalidGraphError, match="Line 2"):
            parse_matrix("0 1\n0 x\n")

    def test_text_bad_value(self) -> None:
        with pytest.raises(InvalidGraphError, match="expected 0 or 1"):
            parse_matrix("0 2\n0 0\n")

    def test_json(self) -> None:
        g = parse_matrix("[[0, true], [false, 0]]", "json")
        assert g.rows() == [[0, 1], [0, 0]]

    def test_json_not_an_array(self) -> None:
        with pytest.raises(InvalidGraphError, match="JSON array"):
            parse_matrix('{"rows": []}', "json")

    def test_json_syntax_error(self) -> None:
        with pytest.raises(InvalidGraphError, match="Invalid JSON"):
            parse_matrix("[[0, 1]", "json")

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="Unknown matrix format"):
            parse_matrix("", "yaml")

    def test_format_matrix_body_loads_back(self) -> None:
        g = AdjacencyMatrix(CYCLIC)
        body = "\n".join(format_matrix(g).splitlines()[1:-1])
        assert parse_matrix(body) == g


class TestLoadMatrix:
    def test_json_file(self, cyclic_json: Path) -> None:
        assert load_matrix(cyclic_json) == AdjacencyMatrix(CYCLIC)

    def test_text_file(self, acyclic_txt: Path) -> None:
        assert load_matrix(str(acyclic_txt)) == AdjacencyMatrix(ACYCLIC)

    def test_ragged_file(self, ragged_txt: Path) -> None:
        with pytest.raises(InvalidGraphError, match="not square"):
            load_matrix(ragged_txt)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_matrix(tmp_path / "absent.txt")


class TestMalformedInput:
    @pytest.mark.parametrize("token", ["+1", "01", "-0", "１", "1.0"])
    def test_non_plain_cell_tokens(self, token: str) -> None:
        with pytest.raises(InvalidGraphError, match="not an integer cell"):
            parse_matrix(f"0 {token}\n0 0\n")

    def test_deeply_nested_json(self) -> None:
        depth = 100_000
        with pytest.raises(InvalidGraphError, match="Invalid JSON"):
            parse_matrix("[" * depth + "]" * depth, "json")

    def test_non_utf8_file(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.txt"
        path.write_bytes(b"\xff\xfe0 1\n0 0\n")
        with pytest.raises(InvalidGraphError, match="Not UTF-8"):
            load_matrix(path)
