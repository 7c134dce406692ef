"""Command line argument handling package."""

from preview_docs.ui.cli.args.parser import ArgumentParser
from preview_docs.ui.cli.args.options import PublishArgs

__all__ = ["ArgumentParser", "PublishArgs"]
