"""Tests for the inline substitution pipeline."""

import pytest

from texpreview.parsing import INLINE_STEPS, process_inline, run_step


class TestPipelineOrder:
    """The step list is fixed and ends with escaping."""

    def test_step_names(self) -> None:
        assert [name for name, _ in INLINE_STEPS] == [
            "formatting",
            "citations",
            "links",
            "math",
            "symbols",
            "fractions",
            "rules",
            "color",
            "colspec",
            "specials",
            "commands",
            "escape",
        ]

    def test_unknown_step_lists_available(self) -> None:
        with pytest.raises(KeyError, match="Available: formatting"):
            run_step("bogus", "text")

    def test_citation_survives_command_stripping(self) -> None:
        assert process_inline(r"see \citep{k}") == (
            'see <a href="#k" style="color: #0000FF;">[k]</a>'
        )

    def test_symbols_inside_math_span(self) -> None:
        assert process_inline(r"\(\alpha + \beta\)") == (
            '<span class="math-inline">α + β</span>'
        )

    def test_result_is_trimmed(self) -> None:
        assert process_inline(r"\noindent Text") == "Text"


class TestFormatting:
    """Text formatting commands."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            (r"\textbf{bold}", "<strong>bold</strong>"),
            (r"\textit{it}", "<em>it</em>"),
            (r"\emph{em}", "<em>em</em>"),
            (r"\underline{u}", "<u>u</u>"),
            (r"\texttt{code}", '<code style="font-family: monospace;">code</code>'),
            (r"x\textsuperscript{2}", "x<sup>2</sup>"),
            (r"H\textsubscript{2}O", "H<sub>2</sub>O"),
        ],
    )
    def test_single_command(self, source: str, expected: str) -> None:
        assert run_step("formatting", source) == expected

    def test_nested_commands(self) -> None:
        assert process_inline(r"\textbf{\emph{x}}") == "<strong><em>x</em></strong>"

    def test_several_on_one_line(self) -> None:
        assert process_inline(r"\textbf{a} and \textit{b}") == (
            "<strong>a</strong> and <em>b</em>"
        )


class TestCitationsAndLinks:
    def test_cite_variants(self) -> None:
        for command in ("cite", "citep", "citet"):
            assert run_step("citations", rf"\{command}{{smith2020}}") == (
                '<a href="#smith2020" style="color: #0000FF;">[smith2020]</a>'
            )

    def test_url(self) -> None:
        assert process_inline(r"\url{https://example.org}") == (
            '<a href="https://example.org" style="color: #000099;">https://example.org</a>'
        )

    def test_href(self) -> None:
        assert process_inline(r"\href{https://a.b}{site}") == (
            '<a href="https://a.b" style="color: #000099;">site</a>'
        )


class TestMath:
    def test_dollar_math(self) -> None:
        assert process_inline("$x^2$") == '<span class="math-inline">x^2</span>'

    def test_single_character(self) -> None:
        assert process_inline("$x$") == '<span class="math-inline">x</span>'

    def test_paren_math(self) -> None:
        assert process_inline(r"\(a+b\)") == '<span class="math-inline">a+b</span>'

    def test_escaped_dollar_is_not_math(self) -> None:
        assert process_inline(r"costs \$5 and \$6") == "costs $5 and $6"


class TestSymbols:
    def test_greek(self) -> None:
        assert run_step("symbols", r"\alpha\beta") == "αβ"

    def test_operators(self) -> None:
        assert run_step("symbols", r"a \leq b \to \infty") == "a ≤ b → ∞"

    def test_longer_command_is_not_a_symbol(self) -> None:
        assert run_step("symbols", r"\integral") == r"\integral"

    def test_fraction(self) -> None:
        assert run_step("fractions", r"\frac{a}{b}") == "(a)/(b)"


class TestLayoutAndColor:
    def test_booktabs_rules_removed(self) -> None:
        assert run_step("rules", r"\toprule") == ""
        assert run_step("rules", r"\onehalfspacing") == ""

    def test_color(self) -> None:
        assert process_inline(r"\color{red}{warn}") == '<span style="color: red;">warn</span>'

    def test_textcolor(self) -> None:
        assert process_inline(r"\textcolor{blue}{x}") == '<span style="color: blue;">x</span>'

    def test_color_value_is_attribute_escaped(self) -> None:
        result = process_inline(r'\color{red" onclick="x}{t}')
        assert 'onclick="' not in result
        assert "&quot;" in result

    def test_column_spec_removed(self) -> None:
        assert process_inline("x {@{}lr@{}} y") == "x  y"


class TestSpecialsAndStripping:
    def test_escaped_ampersand(self) -> None:
        assert process_inline(r"A \& B") == "A &amp; B"

    def test_escaped_percent(self) -> None:
        assert process_inline(r"50\%") == "50%"

    def test_unknown_command_with_argument_removed(self) -> None:
        assert process_inline(r"Hello \foo{bar} world") == "Hello  world"

    def test_unknown_command_without_argument_removed(self) -> None:
        assert process_inline(r"\newline text") == "text"


class TestEscaping:
    def test_angle_brackets_in_text(self) -> None:
        assert process_inline("a < b > c") == "a &lt; b &gt; c"

    def test_generated_markup_kept(self) -> None:
        assert process_inline(r"\textbf{a < b}") == "<strong>a &lt; b</strong>"

    def test_escape_step_alone(self) -> None:
        assert run_step("escape", "<b>") == "&lt;b&gt;"


class TestSingleSteps:
    """Each step applied on its own."""

    def test_links(self) -> None:
        assert run_step("links", r"\url{https://a.b}") == (
            '<a href="https://a.b" style="color: #000099;">https://a.b</a>'
        )
        assert run_step("links", r"\href{https://a.b}{site}") == (
            '<a href="https://a.b" style="color: #000099;">site</a>'
        )

    def test_math(self) -> None:
        assert run_step("math", "$x$ and \\(y\\)") == (
            '<span class="math-inline">x</span> and <span class="math-inline">y</span>'
        )

    def test_math_leaves_symbols_alone(self) -> None:
        assert run_step("math", r"$\alpha$") == r'<span class="math-inline">\alpha</span>'

    def test_color(self) -> None:
        assert run_step("color", r"\color{red}{w}") == '<span style="color: red;">w</span>'

    def test_colspec(self) -> None:
        assert run_step("colspec", "a{@{}lr@{}}b") == "ab"

    def test_specials(self) -> None:
        assert run_step("specials", r"\& \% \# \_") == "&amp; % # _"

    def test_commands(self) -> None:
        assert run_step("commands", r"a \foo{b} c \bar d") == "a  c  d"

    def test_commands_keep_escaped_specials_for_later(self) -> None:
        assert run_step("commands", r"50\%") == r"50\%"


class TestEscapedCharactersInArguments:
    """Escaped characters inside a command argument keep the command intact."""

    def test_escaped_braces_in_bold(self) -> None:
        assert process_inline(r"\textbf{\{x\}} tail") == "<strong>{x}</strong> tail"

    def test_escaped_ampersand_in_italic(self) -> None:
        assert process_inline(r"\textit{R\&D}") == "<em>R&amp;D</em>"

    def test_escaped_braces_in_color(self) -> None:
        assert process_inline(r"\color{red}{\{y\}}") == '<span style="color: red;">{y}</span>'

    def test_escaped_percent_in_href_text(self) -> None:
        assert process_inline(r"\href{https://a.b}{50\% off}") == (
            '<a href="https://a.b" style="color: #000099;">50% off</a>'
        )


class TestPlaceholderCharacters:
    """Private Use Area delimiters in the source cannot forge stored markup."""

    def test_forged_placeholder_removed(self) -> None:
        assert process_inline("\\textbf{x} \ue0000\ue001") == "<strong>x</strong> 0"

    def test_out_of_range_placeholder(self) -> None:
        assert process_inline("see \ue0009\ue001 here") == "see 9 here"

    def test_single_step_strips_delimiters(self) -> None:
        assert run_step("escape", "\ue000<\ue001") == "&lt;"
