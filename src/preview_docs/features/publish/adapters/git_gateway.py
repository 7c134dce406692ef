"""Subprocess-backed git adapter for the publish use case."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from preview_docs.platform.git import GitRunner

from ..usecases.ports import GitGateway

INDEX_ENV_VAR = "GIT_INDEX_FILE"


class SubprocessGitGateway(GitGateway):
    """Run git plumbing commands through ``GitRunner``."""

    _runner: GitRunner

    def __init__(self, runner: GitRunner | None = None) -> None:
        self._runner = runner or GitRunner()

    def remote_push_url(self, name: str) -> str | None:
        result = self._runner.run(["remote", "get-url", "--push", name], check=False)
        if not result.ok:
            return None
        url = result.stdout.strip()
        return url or None

    def show_prefix(self) -> str:
        return self._runner.output(["rev-parse", "--show-prefix"])

    def add(self, files: Sequence[str], *, index_file: Path) -> None:
        _ = self._runner.run(["add", "--", *files], env={INDEX_ENV_VAR: str(index_file)})

    def write_tree(self, *, index_file: Path) -> str:
        return self._runner.output(["write-tree"], env={INDEX_ENV_VAR: str(index_file)})

    def commit_tree(self, tree: str, message: str) -> str:
        return self._runner.output(["commit-tree", "-m", message, tree])

    def push(self, url: str, commit: str, ref: str) -> None:
        _ = self._runner.run(["push", "--no-verify", "--force", url, f"{commit}:{ref}"])


__all__ = ["INDEX_ENV_VAR", "SubprocessGitGateway"]
