"""Fixtures for publish feature tests."""

from __future__ import annotations

import pytest

from preview_docs.features.publish import PublishOptions

from publish_fakes import FakeBrowser, FakeFileSystem, FakeGit, FakeIdentity


@pytest.fixture
def options() -> PublishOptions:
    return PublishOptions(
        remotes=("cros", "origin"),
        review_host_fragment="-review.googlesource.com",
        hosting_host_fragment=".googlesource.com",
        navbar_file="navbar.md",
        commit_message="Preview docs",
        tool_name="preview_docs",
    )


@pytest.fixture
def fake_git() -> FakeGit:
    return FakeGit(remotes={"origin": "https://example-review.googlesource.com/repo"})


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    return FakeFileSystem()


@pytest.fixture
def fake_identity() -> FakeIdentity:
    return FakeIdentity()


@pytest.fixture
def fake_browser() -> FakeBrowser:
    return FakeBrowser()
