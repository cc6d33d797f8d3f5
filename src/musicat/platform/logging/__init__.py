"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export configured logger, setup helpers, and the Rich handler.
Why: Provide a single canonical import path.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, LOGGER_NAME, logger, setup_logger
from .handlers import CatalogRichHandler

__all__ = [
    "CatalogRichHandler",
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "logger",
    "setup_logger",
]
