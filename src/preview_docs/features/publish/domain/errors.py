"""
Summary: Exception hierarchy for preview publishing failures.
Why: Let the CLI map every fatal condition to one logged message and exit code.
"""

from __future__ import annotations

from collections.abc import Sequence


class PreviewError(Exception):
    """Base class for every fatal preview_docs failure."""


class PreconditionError(PreviewError):
    """The invocation cannot start (bad input or identity)."""


class EmptyFileListError(PreconditionError):
    """No files were supplied."""

    def __init__(self) -> None:
        super().__init__("At least one file must be given")


class UserIdentityError(PreconditionError):
    """The invoking user is unknown or is the superuser."""


class RemoteNotFoundError(PreviewError):
    """None of the candidate remotes points at a recognized host."""

    def __init__(self, candidates: Sequence[str], fragments: Sequence[str]) -> None:
        self.candidates = tuple(candidates)
        self.fragments = tuple(fragments)
        super().__init__(
            "Unable to find a remote among ({}) whose URL contains one of ({})".format(
                ", ".join(self.candidates),
                ", ".join(self.fragments),
            )
        )


class GitCommandError(PreviewError):
    """A git subcommand exited with a non-zero status."""

    def __init__(self, argv: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.argv = tuple(argv)
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed (exit {returncode}): {' '.join(self.argv)}"
        detail = stderr.strip()
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message)


class ConfigError(PreviewError):
    """The configuration file could not be parsed or holds unknown keys."""


__all__ = [
    "ConfigError",
    "EmptyFileListError",
    "GitCommandError",
    "PreconditionError",
    "PreviewError",
    "RemoteNotFoundError",
    "UserIdentityError",
]
