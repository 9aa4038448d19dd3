"""Placeholder stash for generated markup.

The inline pipeline escapes ``<`` and ``>`` as its final step. Tags produced
by earlier steps must survive that step untouched, so each generated tag is
replaced by an opaque placeholder and restored once escaping is done.

Placeholders use two Private Use Area code points as delimiters. They
contain no backslash, brace or angle bracket, so later pattern steps pass
over them as ordinary text. strip_marks() removes the delimiters from
incoming source so user text can never forge or break a placeholder.

Thread Safety:
One MarkupStash per process_inline() call. No shared state.

"""

from __future__ import annotations

import re

_OPEN = "\ue000"
_CLOSE = "\ue001"
_PLACEHOLDER = re.compile(f"{_OPEN}(\\d+){_CLOSE}")
_MARKS = {ord(_OPEN): None, ord(_CLOSE): None}


def strip_marks(text: str) -> str:
    """Remove placeholder delimiter characters from source text."""
    return text.translate(_MARKS)


class MarkupStash:
    """Holds generated HTML fragments behind numbered placeholders.

    Usage:
        >>> stash = MarkupStash()
        >>> text = stash.put("<strong>") + "a < b" + stash.put("</strong>")
        >>> stash.restore(text.replace("<", "&lt;"))
        '<strong>a &lt; b</strong>'

    """

    __slots__ = ("_fragments",)

    def __init__(self) -> None:
        self._fragments: list[str] = []

    def put(self, fragment: str) -> str:
        """Store a fragment and return the placeholder standing in for it."""
        self._fragments.append(fragment)
        return f"{_OPEN}{len(self._fragments) - 1}{_CLOSE}"

    def wrap(self, open_tag: str, content: str, close_tag: str) -> str:
        """Shield both tags, leaving content as literal text."""
        return self.put(open_tag) + content + self.put(close_tag)

    def restore(self, text: str) -> str:
        """Replace every placeholder with its stored fragment."""
        if not self._fragments:
            return text
        return _PLACEHOLDER.sub(lambda m: self._fragments[int(m.group(1))], text)

    def __len__(self) -> int:
        return len(self._fragments)
