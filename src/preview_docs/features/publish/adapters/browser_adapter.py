"""Browser launcher backed by the standard ``webbrowser`` module."""

from __future__ import annotations

import webbrowser

from ..usecases.ports import BrowserLauncher


class WebBrowserLauncher(BrowserLauncher):
    """Open URLs with the user's default browser."""

    def open(self, url: str) -> bool:
        try:
            return bool(webbrowser.open(url))
        except (webbrowser.Error, OSError):
            return False


__all__ = ["WebBrowserLauncher"]
