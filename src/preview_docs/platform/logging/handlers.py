"""Rich console handler with dedicated rendering for publish events."""

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PreviewRichHandler(RichHandler):
    """Custom Rich handler that renders ``publish_event`` records compactly."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "publish.remote.resolved": ("🔗", "cyan"),
        "publish.navbar.included": ("🧭", "blue"),
        "publish.commit.created": ("📦", "magenta"),
        "publish.push.complete": ("🚀", "green"),
        "publish.browser.failed": ("⚠️", "yellow"),
    }
    _SHORT_ID_LENGTH: ClassVar[int] = 12

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @classmethod
    def _short_id(cls, object_id: object) -> str:
        """Abbreviate a git object id for display."""

        return str(object_id)[: cls._SHORT_ID_LENGTH]

    @staticmethod
    def _style_path_string(path_string: str) -> Text:
        """Render a path in white with magenta separators."""

        text = Text()
        for char in path_string:
            if char == "/":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_publish_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured publish events with dedicated styling."""

        event = getattr(record, "publish_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        if event == "publish.remote.resolved":
            _ = body.append(f"Using remote {getattr(record, 'remote_name', '?')}")
            remote_url = getattr(record, "remote_url", None)
            if remote_url:
                _ = body.append(f" ({remote_url})")
        elif event == "publish.navbar.included":
            _ = body.append("Including navigation file ")
            _ = body.append_text(self._style_path_string(str(getattr(record, "path", ""))))
        elif event == "publish.commit.created":
            _ = body.append(f"Created preview commit {self._short_id(getattr(record, 'commit', ''))}")
            tree = getattr(record, "tree", None)
            if tree:
                _ = body.append(f" (tree {self._short_id(tree)})")
        elif event == "publish.push.complete":
            _ = body.append(f"Pushed {self._short_id(getattr(record, 'commit', ''))} → ")
            _ = body.append(str(getattr(record, "ref", "")), style=Style(color="white"))
            remote_name = getattr(record, "remote_name", None)
            if remote_name:
                _ = body.append(f" on {remote_name}")
        elif event == "publish.browser.failed":
            _ = body.append("Could not open a browser; use the printed URL")
        else:
            _ = body.append(record.getMessage())

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for publish events."""

        publish_text = self._render_publish_message(record)
        if publish_text is not None:
            return publish_text

        return super().render_message(record, message)


__all__ = ["PreviewRichHandler"]
