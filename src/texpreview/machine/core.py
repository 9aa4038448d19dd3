"""Line-oriented environment state machine.

Consumes a document one trimmed line at a time. Each line is classified
exactly once against an ordered rule list (first match wins), and the
matching handler either mutates ParserState, appends HTML, or buffers the
line into the open environment.

Rule priority matters because several patterns overlap:

 1. \\title / \\author / \\date           title page fragment
 2. \\maketitle                          emit title block
 3. \\begin / \\end {abstract}
 4. \\section, \\section*                 flush table, references, list first
 5. \\subsection                         heading only
 6. table / tabular begin and end
 7. itemize / enumerate begin and end
 8. equation begin and end
 9. figure begin and end
10. \\bibitem     (references open)      one <li> per line, unbuffered
11. \\item        (list open)            buffered
12. any line     (table open)           table row tokenizer
13. any line     (equation open)        math content span
14. \\caption     (figure open)          <figcaption>
15. any line                            paragraph inside abstract/section,
                                        otherwise preamble noise

Tables and lists buffer until their closer; references render as they go.

Thread Safety:
EnvironmentMachine instances are single-use. Create one per document.

"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from texpreview.machine import modes
from texpreview.machine.modes import FINAL_FLUSH_ORDER, LIST_TAGS, SECTION_FLUSH_ORDER, Env
from texpreview.machine.state import ParserState
from texpreview.parsing.inline import process_inline
from texpreview.parsing.table import conform_row, count_columns, extract_braced, parse_table_row
from texpreview.renderers import html
from texpreview.utils.logger import get_logger

logger = get_logger(__name__)

Handler = Callable[["EnvironmentMachine", str, re.Match[str]], None]

_TITLE_BUILDERS: dict[str, Callable[[str], str]] = {
    "title": html.title_fragment,
    "author": html.author_fragment,
    "date": html.date_fragment,
}


@dataclass(frozen=True, slots=True)
class LineRule:
    """One classification rule: a pattern, an optional guard, a handler.

    Attributes:
        name: Rule identifier, used in debug logging
        pattern: Must match at the start of the line
        handler: Called with the machine, the line and the match
        requires: Environment that must be open for the rule to apply

    """

    name: str
    pattern: re.Pattern[str]
    handler: Handler
    requires: Env | None = None

    def match(self, line: str, state: ParserState) -> re.Match[str] | None:
        if self.requires is not None and not self.requires_open(state):
            return None
        return self.pattern.match(line)

    def requires_open(self, state: ParserState) -> bool:
        if self.requires in modes.LIST_ENVS:
            return state.open_list is not None
        return state.is_open(self.requires)


def _argument(line: str, match: re.Match[str], group: int) -> str:
    """Full brace-balanced argument of a matched command.

    Falls back to the pattern's own (shortest) capture when the braces
    never balance.
    """
    balanced = extract_braced(line, match.start(group) - 1)
    return balanced if balanced else match.group(group)


class EnvironmentMachine:
    """Single-pass LaTeX-to-HTML state machine.

    Usage:
        >>> machine = EnvironmentMachine()
        >>> machine.run(["\\\\section{Intro}", "Hello \\\\textbf{world}."])
        '<h2 ...>Intro</h2><div><p ...>Hello <strong>world</strong>.</p></div>'

    """

    __slots__ = ("_state", "_lineno", "_text_transformer")

    def __init__(self, *, text_transformer: Callable[[str], str] | None = None) -> None:
        """Initialize machine.

        Args:
            text_transformer: Optional callback applied to paragraph lines
                before inline processing
        """
        self._state = ParserState()
        self._lineno = 0
        self._text_transformer = text_transformer

    @property
    def state(self) -> ParserState:
        return self._state

    @property
    def lineno(self) -> int:
        """1-based number of the line being (or last) processed, 0 before any."""
        return self._lineno

    def run(self, lines: Iterable[str]) -> str:
        """Feed every line, flush open environments, return the HTML."""
        for line in lines:
            self.feed(line)
        return self.finish()

    def feed(self, line: str) -> None:
        """Classify one trimmed, non-empty line and apply its handler."""
        self._lineno += 1
        for rule in RULES:
            match = rule.match(line, self._state)
            if match is not None:
                rule.handler(self, line, match)
                return

    def finish(self) -> str:
        """Close every environment still open and return the final HTML."""
        for env in FINAL_FLUSH_ORDER:
            if self._flush(env):
                logger.debug("Closed unterminated %s at end of input", env.name.lower())
        return self._state.html.build()

    # =========================================================================
    # Closing environments
    # =========================================================================

    def _flush(self, env: Env) -> bool:
        """Render env's close-time output and remove it from the stack.

        ITEMIZE stands for whichever list is open. Returns False if env was
        not open.
        """
        state = self._state
        if env in modes.LIST_ENVS:
            open_list = state.open_list
            if open_list is None:
                return False
            self._close_list(LIST_TAGS[open_list])
            return True
        if not state.close(env):
            return False
        match env:
            case Env.TABLE:
                self._emit_table()
            case Env.REFERENCES:
                state.html.append(html.references_close())
            case Env.SECTION:
                state.html.append(html.section_close())
            case Env.ABSTRACT | Env.EQUATION | Env.FIGURE:
                state.html.append(html.container_close())
            case Env.TITLE_PAGE:
                pass  # title block is emitted closed by \maketitle
        return True

    def _emit_table(self) -> None:
        state = self._state
        rows = [conform_row(row, state.table_column_count) for row in state.table_rows]
        state.html.append(html.render_table(rows))
        state.reset_table()

    def _close_list(self, tag: str) -> None:
        state = self._state
        state.html.append(html.render_list(state.list_items, tag))
        state.reset_list()
        open_list = state.open_list
        if open_list is not None:
            state.close(open_list)

    def _open_container(self, env: Env, markup: str) -> None:
        """Open a div-based environment, closing a previous one of the same kind."""
        state = self._state
        if state.close(env):
            state.html.append(html.container_close())
        state.open(env)
        state.html.append(markup)

    def _close_container(self, env: Env) -> None:
        if self._state.close(env):
            self._state.html.append(html.container_close())
        else:
            logger.debug("Ignoring unmatched end of %s on line %d", env.name.lower(), self._lineno)

    # =========================================================================
    # Handlers (one per rule, in rule order)
    # =========================================================================

    def _on_title_part(self, line: str, match: re.Match[str]) -> None:
        build = _TITLE_BUILDERS[match.group(1)]
        text = process_inline(_argument(line, match, 2))
        self._state.title_page_content.append(build(text))

    def _on_maketitle(self, line: str, match: re.Match[str]) -> None:
        state = self._state
        state.html.append(html.title_block(state.title_page_content))
        state.title_page_content = []
        state.open(Env.TITLE_PAGE)

    def _on_begin_abstract(self, line: str, match: re.Match[str]) -> None:
        self._open_container(Env.ABSTRACT, html.abstract_open())

    def _on_end_abstract(self, line: str, match: re.Match[str]) -> None:
        self._close_container(Env.ABSTRACT)

    def _on_section(self, line: str, match: re.Match[str]) -> None:
        state = self._state
        for env in SECTION_FLUSH_ORDER:
            self._flush(env)
        self._flush(Env.SECTION)

        title = _argument(line, match, 2)
        state.current_section_title = title
        if match.group(1) and title.lower() == "references":
            state.open(Env.REFERENCES)
            state.html.append(html.references_open())
        else:
            state.open(Env.SECTION)
            state.html.append(html.section_open(process_inline(title)))

    def _on_subsection(self, line: str, match: re.Match[str]) -> None:
        title = process_inline(_argument(line, match, 1))
        self._state.html.append(html.subsection_heading(title))

    def _on_begin_table(self, line: str, match: re.Match[str]) -> None:
        self._state.open(Env.TABLE)
        self._state.reset_table()

    def _on_begin_tabular(self, line: str, match: re.Match[str]) -> None:
        spec = extract_braced(line, match.end())
        self._state.open(Env.TABLE)
        self._state.reset_table(count_columns(spec) if spec else 0)

    def _on_end_table(self, line: str, match: re.Match[str]) -> None:
        self._flush(Env.TABLE)

    def _on_begin_list(self, line: str, match: re.Match[str]) -> None:
        self._state.open(modes.LIST_BY_NAME[match.group(1)])
        self._state.reset_list()

    def _on_end_list(self, line: str, match: re.Match[str]) -> None:
        if self._state.open_list is None:
            logger.debug("Ignoring unmatched end of %s on line %d", match.group(1), self._lineno)
            return
        self._close_list(LIST_TAGS[modes.LIST_BY_NAME[match.group(1)]])

    def _on_begin_equation(self, line: str, match: re.Match[str]) -> None:
        self._open_container(Env.EQUATION, html.equation_open())

    def _on_end_equation(self, line: str, match: re.Match[str]) -> None:
        self._close_container(Env.EQUATION)

    def _on_begin_figure(self, line: str, match: re.Match[str]) -> None:
        self._open_container(Env.FIGURE, html.figure_open())

    def _on_end_figure(self, line: str, match: re.Match[str]) -> None:
        self._close_container(Env.FIGURE)

    def _on_bibitem(self, line: str, match: re.Match[str]) -> None:
        text = process_inline(modes.BIBITEM_PREFIX.sub("", line).strip())
        self._state.html.append(html.reference_item(text))

    def _on_item(self, line: str, match: re.Match[str]) -> None:
        text = process_inline(modes.ITEM_PREFIX.sub("", line).strip())
        if text:
            self._state.list_items.append(text)

    def _on_table_line(self, line: str, match: re.Match[str]) -> None:
        state = self._state
        row = parse_table_row(line)
        if row is None:
            logger.debug("Skipping non-row table line %d: %r", self._lineno, line)
            return
        state.table_rows.append(conform_row(row, state.table_column_count))

    def _on_equation_line(self, line: str, match: re.Match[str]) -> None:
        text = process_inline(line)
        if text:
            self._state.html.append(html.math_content(text))

    def _on_caption(self, line: str, match: re.Match[str]) -> None:
        caption = process_inline(_argument(line, match, 1))
        self._state.html.append(html.figcaption(caption))

    def _on_text(self, line: str, match: re.Match[str]) -> None:
        if modes.NO_OUTPUT_DIRECTIVE.match(line):
            return
        if not self._state.in_text_block:
            logger.debug("Discarding preamble line %d: %r", self._lineno, line)
            return
        if self._text_transformer is not None:
            line = self._text_transformer(line)
        text = process_inline(line)
        if text:
            self._state.html.append(html.paragraph(text))


RULES: tuple[LineRule, ...] = (
    LineRule("title", modes.TITLE_PART, EnvironmentMachine._on_title_part),
    LineRule("maketitle", modes.MAKETITLE, EnvironmentMachine._on_maketitle),
    LineRule("begin-abstract", modes.BEGIN_ABSTRACT, EnvironmentMachine._on_begin_abstract),
    LineRule("end-abstract", modes.END_ABSTRACT, EnvironmentMachine._on_end_abstract),
    LineRule("section", modes.SECTION, EnvironmentMachine._on_section),
    LineRule("subsection", modes.SUBSECTION, EnvironmentMachine._on_subsection),
    LineRule("begin-table", modes.BEGIN_TABLE, EnvironmentMachine._on_begin_table),
    LineRule("begin-tabular", modes.BEGIN_TABULAR, EnvironmentMachine._on_begin_tabular),
    LineRule("end-table", modes.END_TABLE, EnvironmentMachine._on_end_table),
    LineRule("begin-list", modes.BEGIN_LIST, EnvironmentMachine._on_begin_list),
    LineRule("end-list", modes.END_LIST, EnvironmentMachine._on_end_list),
    LineRule("begin-equation", modes.BEGIN_EQUATION, EnvironmentMachine._on_begin_equation),
    LineRule("end-equation", modes.END_EQUATION, EnvironmentMachine._on_end_equation),
    LineRule("begin-figure", modes.BEGIN_FIGURE, EnvironmentMachine._on_begin_figure),
    LineRule("end-figure", modes.END_FIGURE, EnvironmentMachine._on_end_figure),
    LineRule("bibitem", modes.BIBITEM, EnvironmentMachine._on_bibitem, Env.REFERENCES),
    LineRule("item", modes.ITEM, EnvironmentMachine._on_item, Env.ITEMIZE),
    LineRule("table-row", modes.ANY_LINE, EnvironmentMachine._on_table_line, Env.TABLE),
    LineRule("equation-content", modes.ANY_LINE, EnvironmentMachine._on_equation_line, Env.EQUATION),
    LineRule("caption", modes.CAPTION, EnvironmentMachine._on_caption, Env.FIGURE),
    LineRule("text", modes.ANY_LINE, EnvironmentMachine._on_text),
)
