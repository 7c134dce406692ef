"""Display components for the CLI."""

from .result import PublishResultDisplay

__all__ = ["PublishResultDisplay"]
