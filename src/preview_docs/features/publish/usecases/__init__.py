"""Use cases for the publish feature."""

from .ports import BrowserLauncher, FileSystemGateway, GitGateway, IdentityProvider
from .publish_preview import PreviewPublisher
from .remote_resolver import RemoteResolver

__all__ = [
    "BrowserLauncher",
    "FileSystemGateway",
    "GitGateway",
    "IdentityProvider",
    "PreviewPublisher",
    "RemoteResolver",
]
