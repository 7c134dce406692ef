"""
Summary: Derive validated publish options from the persisted configuration.
Why: Feature layers get plain values without file I/O; blank settings mean the default.
"""

from __future__ import annotations

from preview_docs.config.config import (
    COMMIT_MESSAGE_DEFAULT,
    HOSTING_HOST_FRAGMENT_DEFAULT,
    NAVBAR_FILE_DEFAULT,
    REMOTES_DEFAULT,
    REVIEW_HOST_FRAGMENT_DEFAULT,
    Config,
)
from preview_docs.features.publish.domain.models import PublishOptions

# Name used for the sandbox ref and the temporary directory prefix.
TOOL_NAME: str = "preview_docs"


def publish_options(
    config: Config,
    *,
    remotes: tuple[str, ...] | None = None,
) -> PublishOptions:
    """Build ``PublishOptions`` from ``config``; ``remotes`` overrides the configured list."""

    candidates = remotes or tuple(name for name in config.remotes if name.strip())
    return PublishOptions(
        remotes=candidates or REMOTES_DEFAULT,
        review_host_fragment=config.review_host_fragment or REVIEW_HOST_FRAGMENT_DEFAULT,
        hosting_host_fragment=config.hosting_host_fragment or HOSTING_HOST_FRAGMENT_DEFAULT,
        navbar_file=config.navbar_file or NAVBAR_FILE_DEFAULT,
        commit_message=config.commit_message or COMMIT_MESSAGE_DEFAULT,
        tool_name=TOOL_NAME,
    )


__all__ = ["TOOL_NAME", "publish_options"]
