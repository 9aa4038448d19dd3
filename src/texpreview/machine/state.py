"""Per-conversion parser state.

ParserState tracks open environments as a small stack instead of one flag
per environment. Slot rules keep impossible combinations out:

- itemize and enumerate share the list slot
- section and references share the section slot
- an environment is never on the stack twice

Thread Safety:
One ParserState per conversion call, discarded afterwards.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from texpreview.machine.modes import LIST_ENVS, SECTION_ENVS, TEXT_ENVS, Env
from texpreview.stringbuilder import StringBuilder

_SLOTS: dict[Env, frozenset[Env]] = {env: LIST_ENVS for env in LIST_ENVS} | {
    env: SECTION_ENVS for env in SECTION_ENVS
}


@dataclass(slots=True)
class ParserState:
    """Everything the state machine knows while walking one document.

    Attributes:
        stack: Open environments, outermost first
        current_section_title: Raw title of the latest section
        table_rows: Buffered rows of the open table
        table_column_count: Columns declared by \\begin{tabular}, 0 if none
        list_items: Buffered items of the open list
        title_page_content: Title/author/date fragments awaiting \\maketitle
        html: Output accumulated so far

    """

    stack: list[Env] = field(default_factory=list)
    current_section_title: str = ""
    table_rows: list[list[str]] = field(default_factory=list)
    table_column_count: int = 0
    list_items: list[str] = field(default_factory=list)
    title_page_content: list[str] = field(default_factory=list)
    html: StringBuilder = field(default_factory=StringBuilder)

    def is_open(self, env: Env) -> bool:
        return env in self.stack

    def open(self, env: Env) -> None:
        """Mark env as open.

        An environment sharing a slot with env is replaced in place. Opening
        an environment that is already open leaves the stack unchanged.
        """
        if env in self.stack:
            return
        for index, other in enumerate(self.stack):
            if other in _SLOTS.get(env, ()):
                self.stack[index] = env
                return
        self.stack.append(env)

    def close(self, env: Env) -> bool:
        """Remove env from the stack.

        Returns:
            True if env was open.
        """
        if env not in self.stack:
            return False
        self.stack.remove(env)
        return True

    @property
    def open_list(self) -> Env | None:
        """The open list environment, if any."""
        for env in self.stack:
            if env in LIST_ENVS:
                return env
        return None

    @property
    def in_text_block(self) -> bool:
        """Whether plain text lines currently become paragraphs."""
        return any(env in TEXT_ENVS for env in self.stack)

    def reset_table(self, column_count: int = 0) -> None:
        self.table_rows = []
        self.table_column_count = column_count

    def reset_list(self) -> None:
        self.list_items = []
