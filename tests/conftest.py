"""Shared fixtures isolating tests from the user's configuration."""

from collections.abc import Generator
from pathlib import Path

import pytest

from preview_docs.config.config import Config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Point the config lookup at an empty temporary location."""

    config_path = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("PREVIEW_DOCS_CONFIG", str(config_path))
    Config.reset()
    yield config_path
    Config.reset()
