"""Command line interface for preview_docs."""

import sys
from typing import final

from preview_docs.features.publish import PreviewError
from preview_docs.platform.logging import logger
from preview_docs.ui.cli.args import ArgumentParser
from preview_docs.ui.cli.commands import PublishCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            _ = PublishCommand(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except PreviewError as e:
            logger.error("%s", str(e))
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures call ``sys.exit``
        from ``CommandProcessor`` so this is only reached on success.
    """
    CommandProcessor.process_command()
    return 0
