"""StringBuilder for O(n) HTML accumulation.

The state machine appends many small fragments (headings, paragraphs,
list items, closing tags) while it walks the document. Appending to a list
and joining once keeps that linear instead of quadratic.

Thread Safety:
StringBuilder instances belong to one ParserState, which belongs to one
conversion call.

"""

from __future__ import annotations


class StringBuilder:
    """Append-only string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<h2>").append("Intro").append("</h2>")
            >>> sb.build()
            '<h2>Intro</h2>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a fragment; empty strings are skipped.

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def extend(self, strings: list[str]) -> StringBuilder:
        """Append several fragments at once, skipping empty ones."""
        self._parts.extend(s for s in strings if s)
        return self

    def build(self) -> str:
        """Join all fragments into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of fragments (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True once any non-empty fragment has been appended."""
        return bool(self._parts)
