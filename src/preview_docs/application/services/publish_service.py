"""Application service publishing local docs as a sandbox preview."""

from __future__ import annotations

from logging import Logger, getLogger
from typing import final

from preview_docs.features.publish import (
    PreviewPublisher,
    PublishOptions,
    PublishRequest,
    PublishResult,
)
from preview_docs.features.publish.adapters import (
    EnvironmentIdentityProvider,
    LocalFileSystemGateway,
    SubprocessGitGateway,
    WebBrowserLauncher,
)
from preview_docs.features.publish.usecases.ports import (
    BrowserLauncher,
    FileSystemGateway,
    GitGateway,
    IdentityProvider,
)


@final
class PublishPreviewService:
    """Application façade wiring adapters into the publish use case."""

    _publisher: PreviewPublisher

    def __init__(
        self,
        *,
        options: PublishOptions,
        git: GitGateway | None = None,
        filesystem: FileSystemGateway | None = None,
        identity: IdentityProvider | None = None,
        browser: BrowserLauncher | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._publisher = PreviewPublisher(
            git=git or SubprocessGitGateway(),
            filesystem=filesystem or LocalFileSystemGateway(),
            identity=identity or EnvironmentIdentityProvider(),
            browser=browser or WebBrowserLauncher(),
            options=options,
            logger=logger or getLogger(__name__),
        )

    def publish(self, request: PublishRequest) -> PublishResult:
        """Build and push the preview commit."""

        return self._publisher.publish(request)

    def open_preview(self, result: PublishResult) -> bool:
        """Open the preview URL in a browser, ignoring failures."""

        return self._publisher.open_preview(result)


__all__ = ["PublishPreviewService"]
