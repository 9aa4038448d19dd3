"""Tests for the tabular row tokenizer and column spec helpers."""

import pytest

from texpreview.parsing import conform_row, count_columns, parse_table_row
from texpreview.parsing.table import extract_braced


class TestParseTableRow:
    """Row splitting on unescaped ampersands at brace depth 0."""

    def test_simple_row(self) -> None:
        assert parse_table_row(r"A & B \\") == ["A", "B"]

    def test_row_without_terminator(self) -> None:
        assert parse_table_row("A & B") == ["A", "B"]

    def test_single_cell_row(self) -> None:
        assert parse_table_row(r"Total \\") == ["Total"]

    def test_empty_cells_kept(self) -> None:
        assert parse_table_row(r"A & & C \\") == ["A", "", "C"]

    def test_escaped_ampersand_stays_in_cell(self) -> None:
        assert parse_table_row(r"A \& B & C \\") == ["A &amp; B", "C"]

    def test_ampersand_inside_braces_stays_in_cell(self) -> None:
        assert parse_table_row(r"{x & y} & z \\") == ["{x & y}", "z"]

    def test_text_after_terminator_ignored(self) -> None:
        assert parse_table_row(r"A & B \\ \hline") == ["A", "B"]

    def test_cells_are_inline_processed(self) -> None:
        assert parse_table_row(r"\textbf{A} & $x$ \\") == [
            "<strong>A</strong>",
            '<span class="math-inline">x</span>',
        ]

    def test_escaped_dollar_in_cell(self) -> None:
        assert parse_table_row(r"GPU & \$5000 \\") == ["GPU", "$5000"]

    @pytest.mark.parametrize(
        "line",
        [r"\hline", r"\toprule", r"\midrule", r"\bottomrule", r"\centering", r"\\"],
    )
    def test_control_lines_rejected(self, line: str) -> None:
        assert parse_table_row(line) is None

    def test_plain_text_rejected(self) -> None:
        assert parse_table_row("just some text") is None


class TestCountColumns:
    @pytest.mark.parametrize(
        ("spec", "expected"),
        [
            ("lc", 2),
            ("lcr", 3),
            ("@{}lr@{}", 2),
            ("|l|c|r|", 3),
            ("p{3cm}l", 2),
            ("|l|p{3cm}|", 2),
            (r"@{\hspace{2pt}}ll", 2),
            ("*{3}{c}", 3),
            ("l*{2}{rc}", 5),
            ("*{2}{p{2cm}}", 2),
            ("*{2}{*{2}{c}}", 4),
            ("*{3}{|c}|", 3),
            (r">{\bfseries}lc", 2),
            ("", 0),
        ],
    )
    def test_count(self, spec: str, expected: int) -> None:
        assert count_columns(spec) == expected


class TestExtractBraced:
    def test_nested(self) -> None:
        assert extract_braced("{a{b}c}d", 0) == "a{b}c"

    def test_not_a_brace(self) -> None:
        assert extract_braced("x", 0) is None

    def test_unbalanced(self) -> None:
        assert extract_braced("{abc", 0) is None


class TestConformRow:
    def test_pads_short_row(self) -> None:
        assert conform_row(["a"], 3) == ["a", "", ""]

    def test_truncates_long_row(self) -> None:
        assert conform_row(["a", "b", "c"], 2) == ["a", "b"]

    def test_unknown_count_leaves_row(self) -> None:
        assert conform_row(["a"], 0) == ["a"]
