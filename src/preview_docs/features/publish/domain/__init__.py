"""Domain types for the publish feature."""

from .errors import (
    ConfigError,
    EmptyFileListError,
    GitCommandError,
    PreconditionError,
    PreviewError,
    RemoteNotFoundError,
    UserIdentityError,
)
from .models import PublishOptions, PublishRequest, PublishResult, RemoteDescriptor

__all__ = [
    "ConfigError",
    "EmptyFileListError",
    "GitCommandError",
    "PreconditionError",
    "PreviewError",
    "PublishOptions",
    "PublishRequest",
    "PublishResult",
    "RemoteDescriptor",
    "RemoteNotFoundError",
    "UserIdentityError",
]
