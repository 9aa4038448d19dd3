"""
texpreview: approximate HTML previews of LaTeX research proposals

Converts a practical subset of LaTeX (title page, abstract, sections,
lists, tables, equations, figures, references and common inline commands
from geometry, amsmath, amssymb, natbib, hyperref, xcolor, booktabs and
setspace) into HTML, without a LaTeX installation. Zero runtime dependencies.

Quick Start:
    >>> from texpreview import convert, apply_preview_styles
    >>> html = convert("\\\\section{Intro}\\nHello \\\\textbf{world}.")
    >>> page = apply_preview_styles(html)

    >>> # Or use the high-level LatexPreview class
    >>> from texpreview import LatexPreview
    >>> preview = LatexPreview(compiler_name="TeXLive", compiler_url="https://tug.org")
    >>> html = preview(source)

Conversion never raises: documents with nothing to show produce a fixed
fallback message and failures produce a styled error message. Pass
strict=True to get a ParseError instead.
"""

from collections.abc import Callable, Iterable

from texpreview.config import (
    DEFAULT_COMPILER_NAME,
    DEFAULT_COMPILER_URL,
    PreviewConfig,
    get_preview_config,
    preview_config_context,
    reset_preview_config,
    set_preview_config,
)
from texpreview.converter import convert as _convert
from texpreview.converter import split_lines
from texpreview.errors import ParseError, RenderError, TexPreviewError
from texpreview.machine import Env, EnvironmentMachine, ParserState
from texpreview.parsing import parse_table_row, process_inline
from texpreview.preview import apply_preview_styles, error_message, fallback_message
from texpreview.renderers import render_list, render_table

__version__ = "0.1.0"


def convert(source: str, *, config: PreviewConfig | None = None) -> str:
    """Convert LaTeX source to preview HTML.

    Args:
        source: LaTeX document text
        config: Optional config for this call (current context config if None)

    Returns:
        HTML string, fallback message, or error message

    Example:
        >>> convert("\\\\section{Intro}\\nText")
        '<h2 ...>Intro</h2><div><p ...>Text</p></div>'
    """
    if config is None:
        return _convert(source)
    with preview_config_context(config):
        return _convert(source)


class LatexPreview:
    """High-level converter bundling a PreviewConfig.

    Usage:
        >>> preview = LatexPreview()
        >>> html = preview("\\\\section{Intro}\\nText")

        >>> # Batch conversion
        >>> pages = preview.convert_many([doc_a, doc_b])

        >>> # Converted and wrapped in the preview container
        >>> page = preview.styled(doc_a)

    Thread Safety:
        The config is immutable and installed via ContextVar for the duration
        of each call. Safe to share one instance across threads.

    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        compiler_url: str = DEFAULT_COMPILER_URL,
        compiler_name: str = DEFAULT_COMPILER_NAME,
        strict: bool = False,
        text_transformer: Callable[[str], str] | None = None,
        source_file: str | None = None,
    ) -> None:
        self._config = PreviewConfig(
            compiler_url=compiler_url,
            compiler_name=compiler_name,
            strict=strict,
            text_transformer=text_transformer,
            source_file=source_file,
        )

    @property
    def config(self) -> PreviewConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Convert one document."""
        with preview_config_context(self._config):
            return _convert(source)

    def convert_many(self, sources: Iterable[str]) -> list[str]:
        """Convert several documents, installing the config once."""
        with preview_config_context(self._config):
            return [_convert(source) for source in sources]

    def styled(self, source: str) -> str:
        """Convert one document and wrap it in the preview container."""
        return apply_preview_styles(self(source))


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "convert",
    "apply_preview_styles",
    "LatexPreview",
    # Messages
    "fallback_message",
    "error_message",
    # Components
    "EnvironmentMachine",
    "Env",
    "ParserState",
    "process_inline",
    "parse_table_row",
    "render_list",
    "render_table",
    "split_lines",
    # Configuration (ContextVar-based)
    "PreviewConfig",
    "get_preview_config",
    "set_preview_config",
    "reset_preview_config",
    "preview_config_context",
    # Errors
    "TexPreviewError",
    "ParseError",
    "RenderError",
]
