"""Environment kinds and line patterns for the state machine.

Env is the closed set of environments the machine can have open. Some
environments share a slot: only one list (itemize or enumerate) and only
one section-like container (plain section or references) can be open at a
time.
"""

from __future__ import annotations

import re
from enum import Enum, auto


class Env(Enum):
    """Environments tracked by ParserState."""

    ABSTRACT = auto()
    SECTION = auto()
    REFERENCES = auto()  # starred "References" section
    TABLE = auto()  # table and tabular
    ITEMIZE = auto()
    ENUMERATE = auto()
    EQUATION = auto()
    FIGURE = auto()
    TITLE_PAGE = auto()  # after \maketitle


LIST_ENVS = frozenset({Env.ITEMIZE, Env.ENUMERATE})
SECTION_ENVS = frozenset({Env.SECTION, Env.REFERENCES})

# Environments in which a plain text line becomes a paragraph
TEXT_ENVS = frozenset({Env.ABSTRACT, Env.SECTION, Env.REFERENCES})

LIST_TAGS: dict[Env, str] = {Env.ITEMIZE: "ul", Env.ENUMERATE: "ol"}
LIST_BY_NAME: dict[str, Env] = {"itemize": Env.ITEMIZE, "enumerate": Env.ENUMERATE}

# Flushed before a new section opens, in this order. The list entry stands
# for whichever list kind is open.
SECTION_FLUSH_ORDER: tuple[Env, ...] = (Env.TABLE, Env.REFERENCES, Env.ITEMIZE)

# Flushed at end of input, in this order.
FINAL_FLUSH_ORDER: tuple[Env, ...] = (
    Env.TABLE,
    Env.REFERENCES,
    Env.SECTION,
    Env.ITEMIZE,
    Env.EQUATION,
    Env.FIGURE,
    Env.TITLE_PAGE,
    Env.ABSTRACT,
)

# Lines that never produce output on their own
NO_OUTPUT_DIRECTIVE = re.compile(
    r"^\\(documentclass|usepackage|begin\{document\}|end\{document\}|maketitle"
    r"|titlepage|begin\{titlepage\}|end\{titlepage\}|nocite|bibliographystyle"
    r"|bibliography|toprule|midrule|bottomrule|onehalfspacing|centering)"
)

TITLE_PART = re.compile(r"^\\(title|author|date)\{(.+?)\}")
MAKETITLE = re.compile(r"^\\maketitle")
BEGIN_ABSTRACT = re.compile(r"^\\begin\{abstract\}")
END_ABSTRACT = re.compile(r"^\\end\{abstract\}")
SECTION = re.compile(r"^\\section(\*)?\{(.+?)\}")
SUBSECTION = re.compile(r"^\\subsection\*?\{(.+?)\}")
BEGIN_TABLE = re.compile(r"^\\begin\{table\*?\}")
BEGIN_TABULAR = re.compile(r"^\\begin\{tabular\}")
END_TABLE = re.compile(r"^\\end\{(?:table\*?|tabular)\}")
BEGIN_LIST = re.compile(r"^\\begin\{(itemize|enumerate)\}")
END_LIST = re.compile(r"^\\end\{(itemize|enumerate)\}")
BEGIN_EQUATION = re.compile(r"^\\begin\{equation\*?\}")
END_EQUATION = re.compile(r"^\\end\{equation\*?\}")
BEGIN_FIGURE = re.compile(r"^\\begin\{figure\*?\}")
END_FIGURE = re.compile(r"^\\end\{figure\*?\}")
BIBITEM = re.compile(r"^\\bibitem")
BIBITEM_PREFIX = re.compile(r"^\\bibitem\[?.*?\]?\{[^}]*\}")
ITEM = re.compile(r"^\\item")
ITEM_PREFIX = re.compile(r"^\\item\s*")
CAPTION = re.compile(r"^\\caption\{(.+?)\}")
ANY_LINE = re.compile(r"^")
