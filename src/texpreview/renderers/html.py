"""HTML fragment renderers.

Two kinds of functions live here:

- Block renderers (render_table, render_list) turn a buffered environment
  into one HTML fragment when the environment closes.
- Fragment builders produce the opening/closing markup the state machine
  emits directly (headings, paragraphs, containers, reference items).

Every function is pure. Text arguments are expected to have gone through
process_inline() already; nothing here escapes them again.

Thread Safety:
Stateless module. Safe for concurrent use.
"""

from __future__ import annotations

from collections.abc import Sequence

from texpreview.errors import RenderError
from texpreview.renderers import styles
from texpreview.stringbuilder import StringBuilder

LIST_KINDS = frozenset({"ul", "ol"})


def render_table(rows: Sequence[Sequence[str]]) -> str:
    """Render table rows; the first row is always the header row.

    Empty cells are rendered as ``&nbsp;`` so borders stay visible.

    Args:
        rows: Row sequence, each row a sequence of processed cells

    Returns:
        HTML table, or '' when there are no rows.
    """
    if not rows:
        return ""
    sb = StringBuilder()
    sb.append(f'<table style="{styles.TABLE}"><tbody>')
    for index, row in enumerate(rows):
        tag, style = ("th", styles.HEADER_CELL) if index == 0 else ("td", styles.DATA_CELL)
        sb.append("<tr>")
        for cell in row:
            sb.append(f'<{tag} style="{style}">{cell or "&nbsp;"}</{tag}>')
        sb.append("</tr>")
    sb.append("</tbody></table>")
    return sb.build()


def render_list(items: Sequence[str], kind: str) -> str:
    """Render list items as an unordered ("ul") or ordered ("ol") list.

    Returns:
        HTML list, or '' when there are no items.

    Raises:
        RenderError: If kind is not "ul" or "ol".
    """
    if kind not in LIST_KINDS:
        raise RenderError(f"Unknown list kind {kind!r}; expected 'ul' or 'ol'")
    if not items:
        return ""
    sb = StringBuilder()
    sb.append(f'<{kind} style="{styles.LIST}">')
    sb.extend([f"<li>{item}</li>" for item in items])
    sb.append(f"</{kind}>")
    return sb.build()


# =========================================================================
# Title page
# =========================================================================


def title_fragment(text: str) -> str:
    return f'<h1 style="{styles.TITLE}">{text}</h1>'


def author_fragment(text: str) -> str:
    return f'<p style="{styles.AUTHOR}">{text}</p>'


def date_fragment(text: str) -> str:
    return f'<p style="{styles.DATE}">{text}</p>'


def title_block(fragments: Sequence[str]) -> str:
    """Wrap the collected title/author/date fragments in a centered block."""
    return f'<div style="{styles.TITLE_BLOCK}">{"".join(fragments)}</div>'


# =========================================================================
# Sections and text
# =========================================================================


def section_open(title: str) -> str:
    return f'<h2 style="{styles.SECTION_HEADING}">{title}</h2><div>'


def section_close() -> str:
    return "</div>"


def references_open() -> str:
    return (
        f'<h2 style="{styles.SECTION_HEADING}">References</h2>'
        f'<div class="references"><ul style="{styles.REFERENCES_LIST}">'
    )


def references_close() -> str:
    return "</ul></div>"


def reference_item(text: str) -> str:
    return f'<li style="{styles.REFERENCE_ITEM}">{text}</li>'


def subsection_heading(title: str) -> str:
    return f'<h3 style="{styles.SUBSECTION_HEADING}">{title}</h3>'


def abstract_open() -> str:
    return f'<div class="abstract" style="{styles.ABSTRACT}"><strong>Abstract:</strong> '


def paragraph(text: str) -> str:
    return f'<p style="{styles.PARAGRAPH}">{text}</p>'


# =========================================================================
# Equations and figures
# =========================================================================


def equation_open() -> str:
    return f'<div class="math-display" style="{styles.EQUATION}">'


def math_content(text: str) -> str:
    return f'<span class="math-display-content">{text}</span>'


def figure_open() -> str:
    return f'<div class="figure" style="{styles.FIGURE}">'


def figcaption(text: str) -> str:
    return f'<figcaption style="{styles.FIGCAPTION}">{text}</figcaption>'


def container_close() -> str:
    """Closing tag shared by the abstract, equation and figure containers."""
    return "</div>"
