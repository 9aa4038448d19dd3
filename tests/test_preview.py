"""Tests for the preview container and fixed messages."""

from texpreview import PreviewConfig, apply_preview_styles, error_message, fallback_message
from texpreview.renderers import styles
from texpreview.utils import get_logger


class TestApplyPreviewStyles:
    def test_wraps_content_unchanged(self) -> None:
        assert apply_preview_styles("<p>x</p>") == (
            f'<div style="{styles.PREVIEW_CONTAINER}">\n<p>x</p>\n</div>'
        )

    def test_paper_like_style(self) -> None:
        result = apply_preview_styles("")
        assert "font-family: 'Times New Roman', Times, serif;" in result
        assert "max-width: 800px;" in result
        assert "overflow-y: auto;" in result


class TestMessages:
    def test_fallback_uses_config(self) -> None:
        config = PreviewConfig(compiler_url="https://tug.org", compiler_name="TeXLive")
        assert fallback_message(config) == (
            "<p>No previewable content found. Please copy the LaTeX code and compile it in "
            '<a href="https://tug.org" target="_blank" class="text-blue-600 hover:underline">'
            "TeXLive</a>.</p>"
        )

    def test_error_message(self) -> None:
        assert error_message("bad input") == (
            f'<p style="{styles.ERROR_MESSAGE}">Error parsing LaTeX: bad input. '
            "Please copy the LaTeX code and compile it in "
            '<a href="https://www.overleaf.com" target="_blank" class="text-blue-600 hover:underline">'
            "Overleaf</a>.</p>"
        )

    def test_link_attributes_escaped(self) -> None:
        config = PreviewConfig(compiler_url='https://x.org/"onload', compiler_name="<X>")
        result = fallback_message(config)
        assert '"onload' not in result
        assert "&lt;X&gt;</a>" in result


class TestLogger:
    def test_namespaced(self) -> None:
        assert get_logger("tables").name == "texpreview.tables"
        assert get_logger("texpreview.machine.core").name == "texpreview.machine.core"
