"""Public surface for the publish feature."""

from .domain.errors import (
    EmptyFileListError,
    GitCommandError,
    PreviewError,
    RemoteNotFoundError,
    UserIdentityError,
)
from .domain.models import PublishOptions, PublishRequest, PublishResult, RemoteDescriptor
from .usecases.publish_preview import PreviewPublisher
from .usecases.remote_resolver import RemoteResolver

__all__ = [
    "EmptyFileListError",
    "GitCommandError",
    "PreviewError",
    "PreviewPublisher",
    "PublishOptions",
    "PublishRequest",
    "PublishResult",
    "RemoteDescriptor",
    "RemoteNotFoundError",
    "RemoteResolver",
    "UserIdentityError",
]
