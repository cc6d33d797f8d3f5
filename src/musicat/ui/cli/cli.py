"""Command line interface for musicat."""

import sys
from collections.abc import Sequence
from typing import Final, final

from musicat.features.catalog.domain.errors import CatalogIntegrityError
from musicat.platform.logging import logger
from musicat.ui.cli.args import ArgumentParser, ParseFailure
from musicat.ui.cli.commands import SyncCommand

EXIT_OK: Final[int] = 0
EXIT_FAILURE: Final[int] = 1
EXIT_INTEGRITY: Final[int] = -2
EXIT_INTERRUPTED: Final[int] = 130


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: Sequence[str] | None = None) -> int:
        """Parse arguments, run the catalog sync and map the outcome to an exit code.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Process exit code.
        """
        result = ArgumentParser.parse(args_list)
        if isinstance(result, ParseFailure):
            stream = sys.stderr if result.is_error else sys.stdout
            _ = stream.write(result.message if result.message.endswith("\n") else f"{result.message}\n")
            return result.exit_code

        try:
            _ = SyncCommand(result.args).execute()
            return EXIT_OK
        except CatalogIntegrityError as e:
            logger.error("Catalog integrity error, aborting: %s", e)
            return EXIT_INTEGRITY
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return EXIT_INTERRUPTED
        except Exception as e:
            logger.exception("An unexpected error occurred: %s", e)
            return EXIT_FAILURE


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code.
    """
    return CommandProcessor.process_command()
