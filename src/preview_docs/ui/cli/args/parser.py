"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from preview_docs import __version__
from preview_docs.config.config import Config
from preview_docs.platform.logging import setup_logger
from preview_docs.ui.cli.args.options import PublishArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="preview_docs",
            description=(
                "Push local documentation files to a sandbox ref on the review "
                "remote and open the rendered preview."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "files",
            nargs="+",
            help="Documentation files to preview",
            metavar="FILE",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show git commands and their output",
        )
        _ = verbosity.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Suppress all output except errors and the preview URL",
        )
        _ = parser.add_argument(
            "--no-browser",
            action="store_true",
            help="Print the preview URL without opening a browser",
        )
        _ = parser.add_argument(
            "--remote",
            action="append",
            dest="remotes",
            default=[],
            metavar="NAME",
            help="Remote to publish to; repeat to give several in preference order",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            metavar="CONFIG_PATH",
            help="Configuration file to use instead of the default location",
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> PublishArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            PublishArgs: Processed command line arguments.

        Raises:
            SystemExit: If argparse rejects the arguments.
            ConfigError: If the configuration file is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        config_path = Path(parsed_args.config).expanduser() if parsed_args.config else None
        configuration = Config.load(config_path)
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        return PublishArgs(
            files=list(parsed_args.files),
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            no_browser=parsed_args.no_browser,
            remotes=tuple(parsed_args.remotes),
            config_path=config_path,
        )
