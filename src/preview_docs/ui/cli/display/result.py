"""Display utilities for publish results."""

from __future__ import annotations

from typing import final

from rich.console import Console

from preview_docs.features.publish import PublishResult


@final
class PublishResultDisplay:
    """Print the preview URL on stdout."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_result(self, result: PublishResult) -> None:
        """Print ``result.url`` unwrapped so it can be piped or copied."""

        self.console.print(result.url, soft_wrap=True, markup=False, highlight=False)
