"""Tests for the subprocess git gateway command lines."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from preview_docs.features.publish.adapters import SubprocessGitGateway
from preview_docs.platform.git import GitResult, GitRunner


@pytest.fixture
def runner(mocker: MockerFixture) -> MagicMock:
    """Create a mock ``GitRunner``.

    Args:
        mocker: Pytest mocker fixture.

    Returns:
        MagicMock: Mock runner instance.
    """
    return mocker.create_autospec(GitRunner, instance=True)


def test_remote_push_url_returns_url(runner: MagicMock) -> None:
    runner.run.return_value = GitResult(0, "https://x-review.googlesource.com/r\n", "")

    url = SubprocessGitGateway(runner).remote_push_url("origin")

    assert url == "https://x-review.googlesource.com/r"
    runner.run.assert_called_once_with(["remote", "get-url", "--push", "origin"], check=False)


def test_remote_push_url_missing_remote_is_none(runner: MagicMock) -> None:
    runner.run.return_value = GitResult(2, "", "error: No such remote 'cros'")

    assert SubprocessGitGateway(runner).remote_push_url("cros") is None


def test_add_and_write_tree_use_scratch_index(runner: MagicMock, tmp_path: Path) -> None:
    index_file = tmp_path / "index"
    runner.run.return_value = GitResult(0, "", "")
    runner.output.return_value = "deadbeef"
    gateway = SubprocessGitGateway(runner)

    gateway.add(["a.md", "../navbar.md"], index_file=index_file)
    tree = gateway.write_tree(index_file=index_file)

    runner.run.assert_called_once_with(
        ["add", "--", "a.md", "../navbar.md"],
        env={"GIT_INDEX_FILE": str(index_file)},
    )
    runner.output.assert_called_once_with(["write-tree"], env={"GIT_INDEX_FILE": str(index_file)})
    assert tree == "deadbeef"


def test_commit_tree_has_no_parent(runner: MagicMock) -> None:
    runner.output.return_value = "c0ffee"

    commit = SubprocessGitGateway(runner).commit_tree("deadbeef", "Preview docs")

    assert commit == "c0ffee"
    runner.output.assert_called_once_with(["commit-tree", "-m", "Preview docs", "deadbeef"])


def test_push_is_forced_and_unverified(runner: MagicMock) -> None:
    runner.run.return_value = GitResult(0, "", "")

    SubprocessGitGateway(runner).push(
        "https://x-review.googlesource.com/r",
        "c0ffee",
        "refs/sandbox/alice/preview_docs",
    )

    runner.run.assert_called_once_with(
        [
            "push",
            "--no-verify",
            "--force",
            "https://x-review.googlesource.com/r",
            "c0ffee:refs/sandbox/alice/preview_docs",
        ]
    )


def test_show_prefix(runner: MagicMock) -> None:
    runner.output.return_value = "docs/"

    assert SubprocessGitGateway(runner).show_prefix() == "docs/"
    runner.output.assert_called_once_with(["rev-parse", "--show-prefix"])
