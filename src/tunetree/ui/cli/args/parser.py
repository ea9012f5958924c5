"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from tunetree.config.config import Config
from tunetree.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from tunetree.ui.cli.args.options import BuildArgs


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
            prog="tunetree",
            description="Scan a music directory and print its Artist/Album/Disc/Track tree.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "library_path",
            nargs="?",
            type=str,
            help="Root directory of the music library (defaults to library_path in config)",
            metavar="LIBRARY_PATH",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug output, including skipped files",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress the tree and all output except errors",
        )
        _ = parser.add_argument(
            "--log-file",
            type=str,
            help="Write a debug log to this file",
            metavar="LOG_FILE",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> BuildArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            BuildArgs: Processed command line arguments.

        Raises:
            SystemExit: If no library path is available or it is not a directory.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        if parsed_args.log_file:
            log_file_path = Path(parsed_args.log_file)
        else:
            log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        if parsed_args.library_path:
            library_path = Path(parsed_args.library_path)
        elif configuration.library_path is not None:
            library_path = configuration.library_path
        else:
            logger.error("No library path given and none configured")
            sys.exit(2)

        if not library_path.is_dir():
            logger.error("Library path is not a directory: %s", library_path)
            sys.exit(1)

        return BuildArgs(
            library_path=library_path,
            quiet=parsed_args.quiet,
        )


__all__ = ["ArgumentParser"]
