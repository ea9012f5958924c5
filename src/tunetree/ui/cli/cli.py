"""Command line interface for tunetree."""

import sys
import tomllib
from typing import final

from mutagen import MutagenError

from tunetree.application.services.library_service import BuildLibraryRequest, LibraryService
from tunetree.platform.logging import logger
from tunetree.shared.errors import LibraryError
from tunetree.ui.cli.args import ArgumentParser
from tunetree.ui.cli.args.options import BuildArgs
from tunetree.ui.cli.display import LibraryTreeDisplay


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
            args: BuildArgs = ArgumentParser.process_args(args_list)
            library = LibraryService().build(BuildLibraryRequest(root=args.library_path))
            LibraryTreeDisplay().show_library(library, quiet=args.quiet)

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except tomllib.TOMLDecodeError as e:
            logger.error("Invalid configuration file: %s", e)
            sys.exit(1)
        except (LibraryError, MutagenError, OSError) as e:
            logger.error("Could not build library: %s", e)
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside ``CommandProcessor.process_command``.
    """
    CommandProcessor.process_command(sys.argv[1:])
    return 0
