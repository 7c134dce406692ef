"""Test configuration management."""

from pathlib import Path

import pytest

from preview_docs.config.config import REMOTES_DEFAULT, Config
from preview_docs.features.publish import PreviewError
from preview_docs.features.publish.domain.errors import ConfigError


def test_missing_file_yields_defaults(isolated_config: Path) -> None:
    """No configuration file means defaults and nothing written."""
    config = Config.load()

    assert config.remotes == REMOTES_DEFAULT
    assert config.navbar_file == "navbar.md"
    assert config.open_browser is True
    assert config.log_file is None
    assert not isolated_config.exists()


def test_load_every_key(isolated_config: Path) -> None:
    """Every documented key is read from the TOML file."""
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text(
        "\n".join(
            [
                'remotes = ["upstream"]',
                'review_host_fragment = "-review.example.com"',
                'hosting_host_fragment = ".example.com"',
                'navbar_file = "_navbar.md"',
                'commit_message = "Docs preview"',
                "open_browser = false",
                'log_file = "/tmp/logs/preview_docs.log"',
            ]
        ),
        encoding="utf-8",
    )

    assert Config.load() == Config(
        remotes=("upstream",),
        review_host_fragment="-review.example.com",
        hosting_host_fragment=".example.com",
        navbar_file="_navbar.md",
        commit_message="Docs preview",
        open_browser=False,
        log_file=Path("/tmp/logs/preview_docs.log"),
    )


def test_load_is_cached_per_path(isolated_config: Path) -> None:
    first = Config.load()
    second = Config.load()

    assert first is second


def test_explicit_path(tmp_path: Path) -> None:
    config_file = tmp_path / "custom.toml"
    _ = config_file.write_text('remotes = ["gerrit"]\nopen_browser = false\n', encoding="utf-8")

    config = Config.load(config_file)

    assert config.remotes == ("gerrit",)
    assert config.open_browser is False


def test_empty_log_file_is_none(isolated_config: Path) -> None:
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text('log_file = ""\n', encoding="utf-8")

    assert Config.load().log_file is None


def test_unknown_keys_are_rejected(isolated_config: Path) -> None:
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text('remote = "cros"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="remote"):
        _ = Config.load()


def test_invalid_toml_is_a_preview_error(isolated_config: Path) -> None:
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text("remotes = [\n", encoding="utf-8")

    with pytest.raises(PreviewError):
        _ = Config.load()


def test_remotes_must_be_a_list(isolated_config: Path) -> None:
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text('remotes = "cros"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="list"):
        _ = Config.load()


def test_remote_names_must_be_strings(isolated_config: Path) -> None:
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text("remotes = [1, 2]\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="remotes"):
        _ = Config.load()


def test_quoted_boolean_is_rejected(isolated_config: Path) -> None:
    """A string ``"false"`` must not silently enable the browser."""
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text('open_browser = "false"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="open_browser"):
        _ = Config.load()


@pytest.mark.parametrize(
    "line",
    [
        "navbar_file = 5",
        "review_host_fragment = true",
        "hosting_host_fragment = []",
        "commit_message = 1.5",
        "log_file = 0",
    ],
)
def test_wrongly_typed_values_are_rejected(isolated_config: Path, line: str) -> None:
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text(line + "\n", encoding="utf-8")
    key = line.split(" = ")[0]

    with pytest.raises(ConfigError, match=key):
        _ = Config.load()
