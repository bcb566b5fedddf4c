"""Command line argument parser."""

import argparse
import logging
import re
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from crossfile.config.config import Config
from crossfile.config.settings import REVERT_MODE
from crossfile.features.fileloop import CaseFold, RevertMode
from crossfile.platform.logging import logger, setup_logger
from crossfile.ui.cli.args.options import CLIArgs, ReplaceArgs, SearchArgs


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
            description="crossfile - search and query-replace across many files.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        search_parser = subparsers.add_parser(
            "search",
            help="Report every match of a regular expression across files",
        )
        _ = search_parser.add_argument(
            "pattern",
            type=str,
            help="Regular expression to search for",
            metavar="PATTERN",
        )
        ArgumentParser._configure_common(search_parser)

        replace_parser = subparsers.add_parser(
            "replace",
            help="Query-replace a regular expression across files",
        )
        _ = replace_parser.add_argument(
            "source",
            type=str,
            help="Regular expression to replace",
            metavar="FROM",
        )
        _ = replace_parser.add_argument(
            "replacement",
            type=str,
            help="Replacement text (\\1 and \\g<name> refer to groups)",
            metavar="TO",
        )
        ArgumentParser._configure_common(replace_parser)
        _ = replace_parser.add_argument(
            "--delimited",
            action="store_true",
            help="Only replace matches surrounded by word boundaries",
        )
        _ = replace_parser.add_argument(
            "-y",
            "--yes",
            dest="assume_yes",
            action="store_true",
            help="Replace every match without asking",
        )

        return parser

    @staticmethod
    def _configure_common(parser: argparse.ArgumentParser) -> None:
        """Apply options shared by every subcommand."""

        _ = parser.add_argument(
            "files",
            nargs="*",
            type=Path,
            help="Files to process, in order",
            metavar="FILE",
        )
        _ = parser.add_argument(
            "--files-from",
            type=str,
            help="Read further file names, one per line, from PATH ('-' for stdin)",
            metavar="PATH",
        )
        case_group = parser.add_mutually_exclusive_group()
        _ = case_group.add_argument(
            "-i",
            "--ignore-case",
            dest="case_fold",
            action="store_const",
            const=CaseFold.INSENSITIVE,
            help="Match case-insensitively",
        )
        _ = case_group.add_argument(
            "-s",
            "--case-sensitive",
            dest="case_fold",
            action="store_const",
            const=CaseFold.SENSITIVE,
            help="Match case-sensitively",
        )
        parser.set_defaults(case_fold=CaseFold.INHERIT)
        _ = parser.add_argument(
            "--revert-policy",
            type=str,
            default=REVERT_MODE.value,
            metavar="MODE",
            help="How to treat files changed on disk (silent, always-ask, never)",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed progress information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args, extras = parser.parse_known_args(args_list)
        parsed_args.files = ArgumentParser._merge_trailing_files(parser, parsed_args.files, extras)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        if not parsed_args.files and parsed_args.files_from is None:
            logger.error("No files given; pass FILE arguments or --files-from")
            sys.exit(2)

        try:
            revert_mode = RevertMode.from_user_input(parsed_args.revert_policy)
        except ValueError as e:
            logger.error("%s", e)
            sys.exit(2)

        command: str = parsed_args.command
        if command == "search":
            ArgumentParser._validate_pattern(parsed_args.pattern)
            return SearchArgs(
                command="search",
                pattern=parsed_args.pattern,
                files=list(parsed_args.files),
                files_from=parsed_args.files_from,
                case_fold=parsed_args.case_fold,
                revert_mode=revert_mode,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        if command == "replace":
            ArgumentParser._validate_pattern(parsed_args.source)
            return ReplaceArgs(
                command="replace",
                source=parsed_args.source,
                replacement=parsed_args.replacement,
                files=list(parsed_args.files),
                files_from=parsed_args.files_from,
                case_fold=parsed_args.case_fold,
                revert_mode=revert_mode,
                delimited=parsed_args.delimited,
                assume_yes=parsed_args.assume_yes,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _validate_pattern(pattern: str) -> None:
        try:
            _ = re.compile(pattern)
        except re.error as e:
            logger.error("Invalid regular expression %r: %s", pattern, e)
            sys.exit(2)

    @staticmethod
    def _merge_trailing_files(
        parser: argparse.ArgumentParser,
        files: list[Path],
        extras: list[str],
    ) -> list[Path]:
        """Append FILE arguments that followed an option.

        argparse closes the ``files`` positional at the first option, so
        names given after it come back as leftovers.
        """
        unknown = [arg for arg in extras if arg.startswith("-") and arg != "-"]
        if unknown:
            parser.error(f"unrecognized arguments: {' '.join(unknown)}")
        return [*files, *(Path(arg) for arg in extras)]
