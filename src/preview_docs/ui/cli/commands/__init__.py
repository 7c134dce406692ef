"""Command implementations for the CLI."""

from .publish import PublishCommand

__all__ = ["PublishCommand"]
