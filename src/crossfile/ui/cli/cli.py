"""Command line interface for crossfile."""

import sys
from typing import final

from crossfile.platform.logging import logger
from crossfile.ui.cli.args import ArgumentParser
from crossfile.ui.cli.args.options import CLIArgs, SearchArgs
from crossfile.ui.cli.commands import ReplaceCommand, SearchCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Exit code; 1 when a search found nothing or a file failed.
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, SearchArgs):
                search = SearchCommand(args)
                reports = search.execute()
                return 0 if reports and not search.errors else 1

            replace = ReplaceCommand(args)
            _ = replace.execute()
            return 1 if replace.errors else 0

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code.
    """
    return CommandProcessor.process_command()
