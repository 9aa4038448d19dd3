"""Utility modules for texpreview.

Provides:
- logger: get_logger for namespaced logging
"""

from texpreview.utils.logger import get_logger

__all__ = ["get_logger"]
