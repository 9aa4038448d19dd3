"""Inline command processing.

Turns one fragment of LaTeX text (a paragraph line, a heading argument, a
table cell) into HTML-safe text by running an ordered pipeline of
substitution steps.

Step order is part of the contract:

a. formatting   \\textbf, \\textit, \\emph, \\underline, \\texttt,
                \\textsuperscript, \\textsubscript
b. citations    \\cite, \\citep, \\citet
c. links        \\url, \\href
d. math         \\( .. \\) and $ .. $
e. symbols      Greek letters and operators (see symbols.py)
f. fractions    \\frac{a}{b}
g. rules        booktabs rules and setspace switches (removed)
h. color        \\color, \\textcolor
i. colspec      leftover column-grouping artifacts like {@{}lr@{}}
j. specials     \\& \\% \\$ \\# \\_ \\{ \\}
k. commands     any remaining \\command{arg} (removed)
l. escape       < and > escaped

Citations and math must run before the generic command stripper or their
syntax would be destroyed; escaping must run last. Tags produced by steps
a-j are parked in a MarkupStash, so escaping only ever touches characters
that came from the source text.

Thread Safety:
All steps are pure functions of their arguments. Each process_inline() call
creates its own MarkupStash.

"""

from __future__ import annotations

import re
from collections.abc import Callable
from html import escape as html_escape

from texpreview.parsing.placeholders import MarkupStash, strip_marks
from texpreview.parsing.symbols import replace_symbols

InlineStep = Callable[[str, MarkupStash], str]

# Text argument without nested groups; escaped characters such as \{ are allowed.
_TEXT_ARG = r"((?:[^{}\\]|\\.)+)"

_FORMATTING: tuple[tuple[re.Pattern[str], str, str], ...] = tuple(
    (re.compile(r"\\" + name + r"\{" + _TEXT_ARG + r"\}"), open_tag, close_tag)
    for name, open_tag, close_tag in (
        ("textbf", "<strong>", "</strong>"),
        ("textit", "<em>", "</em>"),
        ("emph", "<em>", "</em>"),
        ("underline", "<u>", "</u>"),
        ("texttt", '<code style="font-family: monospace;">', "</code>"),
        ("textsuperscript", "<sup>", "</sup>"),
        ("textsubscript", "<sub>", "</sub>"),
    )
)

_CITE = re.compile(r"\\cite[pt]?\{([^}]+)\}")
_URL = re.compile(r"\\url\{([^}]+)\}")
_HREF = re.compile(r"\\href\{([^}]+)\}\{" + _TEXT_ARG + r"\}")
_MATH_PAREN = re.compile(r"\\\((.*?[^\\])\\\)")
_MATH_DOLLAR = re.compile(r"(?<!\\)\$(.*?[^\\])\$")
_FRAC = re.compile(r"\\frac\{([^}]+)\}\{([^}]+)\}")
_BOOKTABS = re.compile(r"\\(?:toprule|midrule|bottomrule)")
_SPACING = re.compile(r"\\(?:onehalfspacing|doublespacing|singlespacing)")
_COLOR = re.compile(r"\\(?:text)?color\{([^}]+)\}\{" + _TEXT_ARG + r"\}")
_COLSPEC = re.compile(r"\{@\{\}[^}]*@\{\}\}")
_SPECIAL = re.compile(r"\\([&%$#_{}])")
_COMMAND = re.compile(r"\\[a-zA-Z]+(\{[^}]*\})?")

_LINK_STYLE = "color: #000099;"
_CITE_STYLE = "color: #0000FF;"


def _attr(value: str) -> str:
    return html_escape(value, quote=True)


def format_commands(text: str, stash: MarkupStash) -> str:
    """Replace paired formatting commands with inline tags.

    Runs to a fixed point, innermost argument first, so nested commands
    like \\textbf{\\emph{x}} produce properly nested tags.
    """
    while True:
        before = text
        for pattern, open_tag, close_tag in _FORMATTING:
            text = pattern.sub(lambda m: stash.wrap(open_tag, m.group(1), close_tag), text)
        if text == before:
            return text


def citations(text: str, stash: MarkupStash) -> str:
    r"""\cite{key} -> <a href="#key">[key]</a>."""
    return _CITE.sub(
        lambda m: stash.wrap(
            f'<a href="#{_attr(m.group(1))}" style="{_CITE_STYLE}">',
            f"[{m.group(1)}]",
            "</a>",
        ),
        text,
    )


def links(text: str, stash: MarkupStash) -> str:
    text = _URL.sub(
        lambda m: stash.wrap(
            f'<a href="{_attr(m.group(1))}" style="{_LINK_STYLE}">', m.group(1), "</a>"
        ),
        text,
    )
    return _HREF.sub(
        lambda m: stash.wrap(
            f'<a href="{_attr(m.group(1))}" style="{_LINK_STYLE}">', m.group(2), "</a>"
        ),
        text,
    )


def inline_math(text: str, stash: MarkupStash) -> str:
    """Wrap \\( .. \\) and $ .. $ in a math-inline span.

    The math text stays literal; later steps still substitute symbols and
    strip unknown commands inside it.
    """

    def wrap(m: re.Match[str]) -> str:
        return stash.wrap('<span class="math-inline">', m.group(1), "</span>")

    text = _MATH_PAREN.sub(wrap, text)
    return _MATH_DOLLAR.sub(wrap, text)


def symbols(text: str, stash: MarkupStash) -> str:
    return replace_symbols(text)


def fractions(text: str, stash: MarkupStash) -> str:
    return _FRAC.sub(r"(\1)/(\2)", text)


def layout_rules(text: str, stash: MarkupStash) -> str:
    """Drop booktabs rules and setspace switches; they have no HTML form."""
    text = _BOOKTABS.sub("", text)
    return _SPACING.sub("", text)


def color(text: str, stash: MarkupStash) -> str:
    return _COLOR.sub(
        lambda m: stash.wrap(
            f'<span style="color: {_attr(m.group(1))};">', m.group(2), "</span>"
        ),
        text,
    )


def column_specs(text: str, stash: MarkupStash) -> str:
    return _COLSPEC.sub("", text)


def special_characters(text: str, stash: MarkupStash) -> str:
    """Unescape \\& \\% \\$ \\# \\_ \\{ \\} into their literal characters."""
    return _SPECIAL.sub(
        lambda m: stash.put("&amp;" if m.group(1) == "&" else m.group(1)), text
    )


def strip_commands(text: str, stash: MarkupStash) -> str:
    """Remove any remaining command together with one braced argument."""
    return _COMMAND.sub("", text)


def escape_angle_brackets(text: str, stash: MarkupStash) -> str:
    return text.replace("<", "&lt;").replace(">", "&gt;")


INLINE_STEPS: tuple[tuple[str, InlineStep], ...] = (
    ("formatting", format_commands),
    ("citations", citations),
    ("links", links),
    ("math", inline_math),
    ("symbols", symbols),
    ("fractions", fractions),
    ("rules", layout_rules),
    ("color", color),
    ("colspec", column_specs),
    ("specials", special_characters),
    ("commands", strip_commands),
    ("escape", escape_angle_brackets),
)

_STEPS_BY_NAME: dict[str, InlineStep] = dict(INLINE_STEPS)


def process_inline(text: str) -> str:
    """Convert one LaTeX text fragment to HTML.

    Args:
        text: Raw fragment, e.g. ``r"Hello \\textbf{world}."``

    Returns:
        HTML text with leading/trailing whitespace trimmed.

    Example:
        >>> process_inline(r"Hello \\textbf{world} \\cite{knuth84}.")
        'Hello <strong>world</strong> <a href="#knuth84" style="color: #0000FF;">[knuth84]</a>.'
    """
    stash = MarkupStash()
    text = strip_marks(text)
    for _name, step in INLINE_STEPS:
        text = step(text, stash)
    return stash.restore(text).strip()


def run_step(name: str, text: str) -> str:
    """Apply a single named pipeline step and restore its markup.

    Useful for inspecting one stage in isolation; no escaping happens unless
    the step itself is ``"escape"``.

    Raises:
        KeyError: If no step has that name.
    """
    try:
        step = _STEPS_BY_NAME[name]
    except KeyError:
        available = ", ".join(_STEPS_BY_NAME)
        raise KeyError(f"Unknown inline step {name!r}. Available: {available}") from None
    stash = MarkupStash()
    return stash.restore(step(strip_marks(text), stash))
