"""Logging helpers for texpreview.

Every module asks for its logger through get_logger so that all records land
under the "texpreview" namespace. The library never installs handlers; the
caller decides where records go.

Example:
    >>> from texpreview.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("discarding preamble line %r", line)
"""

from __future__ import annotations

import logging

_ROOT = "texpreview"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``texpreview``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("tables").name
        'texpreview.tables'
        >>> get_logger("texpreview.machine.core").name
        'texpreview.machine.core'
    """
    if not (name == _ROOT or name.startswith(_ROOT + ".")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
