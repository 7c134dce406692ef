"""
Summary: Thin subprocess wrapper that runs git and raises on failure.
Why: Give adapters one place that logs argv and maps exit codes to errors.
"""

from __future__ import annotations

import os
import shutil
import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from preview_docs.features.publish.domain.errors import GitCommandError
from preview_docs.platform.logging import logger


@dataclass(slots=True, frozen=True)
class GitResult:
    """Captured outcome of one git invocation."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class GitRunner:
    """Run ``git`` subcommands from a fixed working directory."""

    _git: str
    _cwd: Path | None

    def __init__(self, *, git: str | None = None, cwd: Path | None = None) -> None:
        self._git = git or shutil.which("git") or "git"
        self._cwd = cwd

    def run(
        self,
        args: Sequence[str],
        *,
        env: Mapping[str, str] | None = None,
        check: bool = True,
    ) -> GitResult:
        """Run ``git <args>`` and return its captured output.

        Args:
            args: Arguments following ``git``.
            env: Extra environment variables layered over ``os.environ``.
            check: Raise ``GitCommandError`` when the exit status is non-zero.

        Raises:
            GitCommandError: If ``check`` is set and git fails, or git is missing.
        """

        argv = [self._git, *args]
        full_env: dict[str, str] | None = None
        if env:
            full_env = {**os.environ, **env}

        logger.debug("Running: %s", " ".join(argv))
        try:
            completed = subprocess.run(
                argv,
                cwd=self._cwd,
                env=full_env,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            raise GitCommandError(argv, 127, str(exc)) from exc

        result = GitResult(
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
        if result.stdout.strip():
            logger.debug("git stdout: %s", result.stdout.strip())
        if result.stderr.strip():
            logger.debug("git stderr: %s", result.stderr.strip())

        if check and not result.ok:
            raise GitCommandError(argv, result.returncode, result.stderr)
        return result

    def output(self, args: Sequence[str], *, env: Mapping[str, str] | None = None) -> str:
        """Run ``git <args>`` and return stripped stdout."""

        return self.run(args, env=env).stdout.strip()


__all__ = ["GitResult", "GitRunner"]
