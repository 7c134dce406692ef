"""Configuration management for preview_docs."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from preview_docs.config.paths import default_config_path
from preview_docs.features.publish.domain.errors import ConfigError
from preview_docs.platform.logging import logger

REMOTES_DEFAULT: tuple[str, ...] = ("cros", "origin")
REVIEW_HOST_FRAGMENT_DEFAULT = "-review.googlesource.com"
HOSTING_HOST_FRAGMENT_DEFAULT = ".googlesource.com"
NAVBAR_FILE_DEFAULT = "navbar.md"
COMMIT_MESSAGE_DEFAULT = "Preview docs"

# TOML value type accepted for each scalar key
_VALUE_TYPES: dict[str, tuple[type, str]] = {
    "review_host_fragment": (str, "a string"),
    "hosting_host_fragment": (str, "a string"),
    "navbar_file": (str, "a string"),
    "commit_message": (str, "a string"),
    "open_browser": (bool, "true or false"),
    "log_file": (str, "a path string"),
}


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


def _validate_values(config_dict: dict[str, Any], config_file: Path) -> None:
    """Raise ``ConfigError`` when a value does not match its key's type."""
    remotes = config_dict.get("remotes", [])
    if not isinstance(remotes, list) or not all(isinstance(name, str) for name in remotes):
        raise ConfigError(f"'remotes' in {config_file} must be a list of remote names")

    for key, (expected, description) in _VALUE_TYPES.items():
        if key in config_dict and not isinstance(config_dict[key], expected):
            raise ConfigError(
                f"'{key}' in {config_file} must be {description}, got {config_dict[key]!r}"
            )


@dataclass
class Config:
    """Application configuration."""

    # Remote names probed in order
    remotes: tuple[str, ...] = REMOTES_DEFAULT

    # Host fragments a remote URL must contain; the review one is rewritten
    review_host_fragment: str = REVIEW_HOST_FRAGMENT_DEFAULT
    hosting_host_fragment: str = HOSTING_HOST_FRAGMENT_DEFAULT

    # Root navigation file bundled with every preview
    navbar_file: str = NAVBAR_FILE_DEFAULT

    commit_message: str = COMMIT_MESSAGE_DEFAULT
    open_browser: bool = True

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Normalize list values and convert string paths using field metadata."""
        self.remotes = tuple(self.remotes)

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file, falling back to defaults when absent.

        Args:
            path: Explicit configuration file. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file is not valid TOML, contains unknown keys,
                or holds a value of the wrong type.
        """
        config_file = path or default_config_path()
        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if not config_file.exists():
            logger.debug("No configuration at %s; using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid configuration file {config_file}: {e}") from e

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                raise ConfigError(
                    f"Unknown configuration keys in {config_file}: {', '.join(unknown)}"
                )
            _validate_values(config_dict, config_file)

            logger.debug("Configuration loaded from %s", config_file)
            instance = cls(**config_dict)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance."""
        cls._instance = None
        cls._loaded_from = None


__all__ = [
    "COMMIT_MESSAGE_DEFAULT",
    "Config",
    "HOSTING_HOST_FRAGMENT_DEFAULT",
    "NAVBAR_FILE_DEFAULT",
    "REMOTES_DEFAULT",
    "REVIEW_HOST_FRAGMENT_DEFAULT",
]
