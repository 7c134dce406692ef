"""Ports for the publish feature."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class GitGateway(Protocol):
    """Git plumbing needed to build and push a preview commit."""

    def remote_push_url(self, name: str) -> str | None:
        """Return the push URL of remote ``name``, or None when it is not configured."""

        ...

    def show_prefix(self) -> str:
        """Return the working directory's path relative to the repository root."""

        ...

    def add(self, files: Sequence[str], *, index_file: Path) -> None:
        """Stage ``files`` into the index stored at ``index_file``."""

        ...

    def write_tree(self, *, index_file: Path) -> str:
        """Write a tree object from ``index_file`` and return its id."""

        ...

    def commit_tree(self, tree: str, message: str) -> str:
        """Create a parentless commit for ``tree`` and return its id."""

        ...

    def push(self, url: str, commit: str, ref: str) -> None:
        """Force-push ``commit`` to ``ref`` on ``url`` without running hooks."""

        ...


class FileSystemGateway(Protocol):
    """Filesystem queries relative to the working directory."""

    def exists(self, path: str) -> bool:
        """Return True if ``path`` exists."""

        ...


class IdentityProvider(Protocol):
    """Resolve the user on whose behalf the preview is pushed."""

    def current_user(self) -> str | None:
        """Return the login name, or None when it cannot be determined."""

        ...


class BrowserLauncher(Protocol):
    """Open URLs for the user."""

    def open(self, url: str) -> bool:
        """Try to open ``url``; return whether a browser accepted it."""

        ...


__all__ = ["BrowserLauncher", "FileSystemGateway", "GitGateway", "IdentityProvider"]
