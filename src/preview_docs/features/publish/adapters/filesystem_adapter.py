"""
Summary: Adapter implementing FileSystemGateway on the local filesystem.
Why: Keep filesystem I/O in adapters while use cases target abstractions.
"""

from __future__ import annotations

from pathlib import Path

from ..usecases.ports import FileSystemGateway


class LocalFileSystemGateway(FileSystemGateway):
    """Resolve paths against the process working directory."""

    def exists(self, path: str) -> bool:
        return Path(path).exists()


__all__ = ["LocalFileSystemGateway"]
