"""Git subprocess helpers."""

from .runner import GitResult, GitRunner

__all__ = ["GitResult", "GitRunner"]
