"""Exception classes for texpreview.

In the default mode no exception ever escapes convert(): failures become the
styled error fragment. These classes surface in strict mode and from direct
use of the lower-level components.
"""

from __future__ import annotations


class TexPreviewError(Exception):
    """Base exception for all texpreview errors."""

    pass


class ParseError(TexPreviewError):
    """Error while converting a LaTeX document.

    Raised in strict mode when a line handler fails. Carries the 1-based
    line number (counted over the trimmed, non-empty lines) of the line
    being processed.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where the error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class RenderError(TexPreviewError):
    """Error raised by a block renderer given input it cannot render.

    For example a list kind other than "ul" or "ol".
    """

    pass
