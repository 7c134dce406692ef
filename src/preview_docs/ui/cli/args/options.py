"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import final


@final
@dataclass(slots=True)
class PublishArgs:
    """Command line arguments for a preview run."""

    files: list[str]
    verbose: bool = False
    quiet: bool = False
    no_browser: bool = False
    remotes: tuple[str, ...] = field(default_factory=tuple)
    config_path: Path | None = None


__all__ = ["PublishArgs"]
