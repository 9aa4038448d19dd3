"""Preview wrapper and fixed messages.

apply_preview_styles() wraps converted HTML in the paper-like container the
preview pane shows. fallback_message() and error_message() produce the two
fixed fragments returned instead of converted content; both link to an
external LaTeX compiler taken from PreviewConfig.
"""

from __future__ import annotations

from html import escape as html_escape

from texpreview.config import PreviewConfig, get_preview_config
from texpreview.renderers import styles


def _compiler_hint(config: PreviewConfig) -> str:
    return (
        "Please copy the LaTeX code and compile it in "
        f'<a href="{html_escape(config.compiler_url, quote=True)}" target="_blank" '
        f'class="{styles.COMPILER_LINK_CLASS}">{html_escape(config.compiler_name)}</a>.'
    )


def fallback_message(config: PreviewConfig | None = None) -> str:
    """Message shown when a document produced no previewable content.

    Example:
        >>> fallback_message()
        '<p>No previewable content found. Please copy the LaTeX code and compile it in <a href="https://www.overleaf.com" target="_blank" class="text-blue-600 hover:underline">Overleaf</a>.</p>'
    """
    config = config or get_preview_config()
    return f"<p>No previewable content found. {_compiler_hint(config)}</p>"


def error_message(description: str, config: PreviewConfig | None = None) -> str:
    """Styled message shown when conversion raised.

    Args:
        description: Exception text; HTML-escaped before interpolation
        config: Config supplying the compiler link (current context if None)
    """
    config = config or get_preview_config()
    return (
        f'<p style="{styles.ERROR_MESSAGE}">Error parsing LaTeX: {html_escape(description, quote=False)}. '
        f"{_compiler_hint(config)}</p>"
    )


def apply_preview_styles(html: str) -> str:
    """Wrap HTML in the fixed-style preview container.

    The content is inserted unchanged.
    """
    return f'<div style="{styles.PREVIEW_CONTAINER}">\n{html}\n</div>'
