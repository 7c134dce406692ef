"""Publish command implementation for the CLI."""

from __future__ import annotations

from typing import final

from preview_docs.application.services.publish_service import PublishPreviewService
from preview_docs.config.config import Config
from preview_docs.config.settings import publish_options
from preview_docs.features.publish import PublishRequest, PublishResult
from preview_docs.ui.cli.args.options import PublishArgs
from preview_docs.ui.cli.display.result import PublishResultDisplay


@final
class PublishCommand:
    """Command that pushes the preview and reports its URL."""

    def __init__(self, args: PublishArgs) -> None:
        self.args = args
        self.config = Config.load(args.config_path)
        self.service = PublishPreviewService(
            options=publish_options(self.config, remotes=args.remotes or None),
        )
        self.display = PublishResultDisplay()

    def execute(self) -> PublishResult:
        """Execute the publish command."""

        request = PublishRequest(
            files=list(self.args.files),
            verbose=self.args.verbose,
            open_browser=self.config.open_browser and not self.args.no_browser,
        )
        result = self.service.publish(request)
        self.display.show_result(result)
        if request.open_browser:
            _ = self.service.open_preview(result)
        return result
