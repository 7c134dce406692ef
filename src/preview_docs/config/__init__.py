"""Configuration loading for preview_docs."""

from .config import Config
from .paths import default_config_path
from .settings import TOOL_NAME, publish_options

__all__ = ["Config", "TOOL_NAME", "default_config_path", "publish_options"]
