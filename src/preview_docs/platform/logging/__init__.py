"""
Summary: Re-export the configured logger, setup helper and custom Rich handler.
Why: Provide a single canonical import path for every layer.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import PreviewRichHandler

__all__ = [
    "LOGGER_NAME",
    "PreviewRichHandler",
    "logger",
    "setup_logger",
]
