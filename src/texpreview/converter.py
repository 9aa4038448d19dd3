"""Top-level conversion entry point.

convert() splits the document into trimmed, non-empty lines, drives one
EnvironmentMachine over them and returns the HTML. It has no error channel
of its own: an empty result becomes the fallback message, and any exception
becomes the styled error message. In strict mode the exception is re-raised
as ParseError instead.
"""

from __future__ import annotations

from texpreview.config import get_preview_config
from texpreview.errors import ParseError
from texpreview.machine import EnvironmentMachine
from texpreview.preview import error_message, fallback_message
from texpreview.utils.logger import get_logger

logger = get_logger(__name__)


def split_lines(source: str) -> list[str]:
    """Split source into trimmed lines, dropping empty ones."""
    return [stripped for line in source.split("\n") if (stripped := line.strip())]


def convert(source: str) -> str:
    """Convert LaTeX source to preview HTML.

    Args:
        source: LaTeX document (or fragment)

    Returns:
        HTML string, the fallback message if nothing was recognized, or the
        error message if conversion failed.

    Raises:
        ParseError: Only in strict mode, wrapping the original exception.

    Example:
        >>> convert("")
        '<p>No previewable content found. ...</p>'
    """
    config = get_preview_config()
    machine = EnvironmentMachine(text_transformer=config.text_transformer)
    try:
        result = machine.run(split_lines(source))
    except Exception as exc:
        if config.strict:
            raise ParseError(
                str(exc),
                lineno=machine.lineno or None,
                source_file=config.source_file,
            ) from exc
        logger.debug("LaTeX conversion failed on line %d", machine.lineno, exc_info=True)
        return error_message(str(exc), config)
    return result or fallback_message(config)
