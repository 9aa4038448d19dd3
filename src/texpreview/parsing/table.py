"""Table row tokenizing for tabular environments.

Splits one raw line from inside a table environment into cells:

    A & \\textbf{B \\& C} & {x & y} \\\\

gives three cells, because the escaped ``\\&`` and the ``&`` inside braces
are not separators. Each cell goes through the inline pipeline as soon as
it is cut.

Also provides column counting for ``\\begin{tabular}{spec}`` and the
pad/truncate rule that makes every row match that count.
"""

from __future__ import annotations

import re

from texpreview.parsing.inline import process_inline

_CONTROL_LINE = re.compile(r"^\\(hline|toprule|midrule|bottomrule|centering|\\)")
_ROW_END = "\\\\"

_SPEC_REPEAT = re.compile(r"\*\{(\d+)\}\{([^{}]*)\}")
# Column spec pieces that do not produce a column. The repeat count and
# body of *{n}{..} are left for _SPEC_REPEAT.
_SPEC_INSERTIONS = re.compile(r"[@!<>]\{[^{}]*\}")
_SPEC_ARGUMENT = re.compile(r"(?<![*}])\{[^{}]*\}")
_SPEC_IGNORED = frozenset("|{}@! \t")


def parse_table_row(line: str) -> list[str] | None:
    """Parse a table line into processed cells.

    Returns None for table control lines (rules, ``\\centering``, a bare
    ``\\\\``), for lines with neither ``&`` nor a trailing ``\\\\``, and for
    lines that yield no cells.

    Args:
        line: One trimmed line from inside a table environment

    Returns:
        List of cell strings, or None if the line is not a data row.
    """
    if _CONTROL_LINE.match(line):
        return None
    if "&" not in line and not line.endswith(_ROW_END):
        return None

    cells: list[str] = []
    current: list[str] = []
    depth = 0
    i = 0
    n = len(line)
    while i < n:
        char = line[i]
        escaped = i > 0 and line[i - 1] == "\\"
        if char == "{" and not escaped:
            depth += 1
            current.append(char)
        elif char == "}" and not escaped:
            depth -= 1
            current.append(char)
        elif char == "&" and depth == 0 and not escaped:
            cells.append(process_inline("".join(current).strip()))
            current = []
        elif depth == 0 and line.startswith(_ROW_END, i):
            cells.append(process_inline("".join(current).strip()))
            return cells
        else:
            current.append(char)
        i += 1

    # Final row of a table may omit the terminator
    trailing = "".join(current).strip()
    if trailing and depth == 0:
        cells.append(process_inline(trailing))
    return cells or None


def count_columns(spec: str) -> int:
    """Count the columns declared by a tabular column spec.

    ``*{n}{cols}`` is expanded to n copies of cols. ``@{..}``, ``!{..}``,
    ``>{..}`` and ``<{..}`` insertions, width arguments such as the
    ``{3cm}`` of ``p{3cm}``, rule bars and whitespace do not count.

    Examples:
        >>> count_columns("lcr")
        3
        >>> count_columns("@{}lr@{}")
        2
        >>> count_columns("|l|p{3cm}|")
        2
        >>> count_columns("l*{3}{c}")
        4
    """
    while True:
        stripped = _SPEC_REPEAT.sub(lambda m: m.group(2) * int(m.group(1)), spec)
        stripped = _SPEC_ARGUMENT.sub("", _SPEC_INSERTIONS.sub("", stripped))
        if stripped == spec:
            break
        spec = stripped
    return sum(1 for char in spec if char not in _SPEC_IGNORED)


def extract_braced(text: str, start: int) -> str | None:
    """Return the contents of the brace group opening at ``text[start]``.

    Nested groups are kept intact. Returns None when ``text[start]`` is not
    ``{`` or the group never closes.
    """
    if start >= len(text) or text[start] != "{":
        return None
    depth = 0
    for i in range(start, len(text)):
        if text[i] == "{":
            depth += 1
        elif text[i] == "}":
            depth -= 1
            if depth == 0:
                return text[start + 1 : i]
    return None


def conform_row(cells: list[str], column_count: int) -> list[str]:
    """Pad with empty cells or truncate so the row has ``column_count`` cells.

    A count of 0 means unconstrained; the row is returned unchanged.
    """
    if column_count <= 0:
        return cells
    if len(cells) < column_count:
        return cells + [""] * (column_count - len(cells))
    return cells[:column_count]
