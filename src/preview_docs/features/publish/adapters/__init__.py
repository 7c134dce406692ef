"""Adapters wiring the publish use case to git, the filesystem and the desktop."""

from .browser_adapter import WebBrowserLauncher
from .filesystem_adapter import LocalFileSystemGateway
from .git_gateway import SubprocessGitGateway
from .identity_adapter import EnvironmentIdentityProvider

__all__ = [
    "EnvironmentIdentityProvider",
    "LocalFileSystemGateway",
    "SubprocessGitGateway",
    "WebBrowserLauncher",
]
