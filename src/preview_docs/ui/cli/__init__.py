"""Command line interface package."""

from preview_docs.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
