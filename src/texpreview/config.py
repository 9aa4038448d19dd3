"""ContextVar-based preview configuration for texpreview.

Configuration is set once per LatexPreview instance (or per convert() call)
and read by the converter and the state machine in the same context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so concurrent conversions never see each other's configuration.

Usage:
    # Through the high-level object
    preview = LatexPreview(strict=True)
    html = preview(r"\\section{Intro}")

    # Direct use
    from texpreview.config import preview_config_context, PreviewConfig

    with preview_config_context(PreviewConfig(compiler_name="TeXLive")):
        html = convert(source)

"""

from collections.abc import Callable
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

DEFAULT_COMPILER_URL = "https://www.overleaf.com"
DEFAULT_COMPILER_NAME = "Overleaf"


@dataclass(frozen=True, slots=True)
class PreviewConfig:
    """Immutable preview configuration.

    Attributes:
        compiler_url: Link target used by the fallback and error messages
        compiler_name: Link text used by the fallback and error messages
        strict: Raise ParseError instead of returning the error fragment
        text_transformer: Optional callback applied to each paragraph line
            before inline processing
        source_file: Optional source path, only used in strict-mode errors

    """

    compiler_url: str = DEFAULT_COMPILER_URL
    compiler_name: str = DEFAULT_COMPILER_NAME
    strict: bool = False
    text_transformer: Callable[[str], str] | None = None
    source_file: str | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "PreviewConfig":
        """Create PreviewConfig from dictionary.

        Only keys that are PreviewConfig fields are used; unknown keys
        are silently ignored.

        Example:
            >>> config = PreviewConfig.from_dict({"strict": True, "theme": "dark"})
            >>> config.strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: PreviewConfig = PreviewConfig()

_preview_config: ContextVar[PreviewConfig] = ContextVar(
    "preview_config",
    default=_DEFAULT_CONFIG,
)


def get_preview_config() -> PreviewConfig:
    """Get the preview configuration active in this context."""
    return _preview_config.get()


def set_preview_config(config: PreviewConfig) -> None:
    """Set the preview configuration for the current context.

    Args:
        config: PreviewConfig instance to use for this context.
    """
    _preview_config.set(config)


def reset_preview_config() -> None:
    """Reset the current context to the module-level default configuration."""
    _preview_config.set(_DEFAULT_CONFIG)


@contextmanager
def preview_config_context(config: PreviewConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Example:
        >>> with preview_config_context(PreviewConfig(strict=True)):
        ...     get_preview_config().strict
        True
        >>> get_preview_config().strict
        False

    """
    previous = _preview_config.get()
    _preview_config.set(config)
    try:
        yield
    finally:
        _preview_config.set(previous)


__all__ = [
    "DEFAULT_COMPILER_NAME",
    "DEFAULT_COMPILER_URL",
    "PreviewConfig",
    "get_preview_config",
    "set_preview_config",
    "reset_preview_config",
    "preview_config_context",
]
