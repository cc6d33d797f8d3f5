"""Command line argument parser."""

import argparse
import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import IO, Any, NoReturn, final, override

from musicat import __version__
from musicat.config.config import Config
from musicat.config.paths import default_db_path
from musicat.config.settings import CatalogSettings
from musicat.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from musicat.ui.cli.args.options import ParseFailure, ParseResult, ParseSuccess, SyncArgs

EXIT_USAGE: int = 1


class _ParserExit(Exception):
    """Raised instead of ``sys.exit`` so parsing yields a value."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


class _NonExitingParser(argparse.ArgumentParser):
    """``argparse`` parser that collects output rather than printing and exiting."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._captured: list[str] = []

    @override
    def _print_message(self, message: str, file: IO[str] | None = None) -> None:
        if message:
            self._captured.append(message)

    @override
    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:
        if message:
            self._captured.append(message)
        raise _ParserExit(status, "".join(self._captured))

    @override
    def error(self, message: str) -> NoReturn:
        usage = self.format_usage()
        raise _ParserExit(EXIT_USAGE, f"{usage}{self.prog}: error: {message}\n")


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = _NonExitingParser(
            prog="musicat",
            description="Reconcile a directory of music files against the catalog database.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "archive_root",
            type=str,
            help="Root directory of the music archive; stored locations are relative to it",
            metavar="ARCHIVE_ROOT",
        )
        _ = parser.add_argument(
            "subdirectory",
            type=str,
            nargs="?",
            default=".",
            help="Subdirectory of ARCHIVE_ROOT to scan (default: the whole archive)",
            metavar="SUBDIRECTORY",
        )
        _ = parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Log every create, update and unchanged decision",
        )
        _ = parser.add_argument(
            "--dbname",
            type=str,
            help="Catalog database file (default: from configuration)",
            metavar="DBNAME",
        )
        _ = parser.add_argument("--dbuser", type=str, help="Database user (server catalogs only)", metavar="USER")
        _ = parser.add_argument("--dbpass", type=str, help="Database password (server catalogs only)", metavar="PASS")
        _ = parser.add_argument("--dbhost", type=str, help="Database host (server catalogs only)", metavar="HOST")
        _ = parser.add_argument(
            "--list",
            dest="list_only",
            action="store_true",
            help="Only list the media files that would be scanned",
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )
        return parser

    @staticmethod
    def parse(args_list: Sequence[str] | None = None) -> ParseResult:
        """Parse and validate command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            ParseSuccess with resolved options, or ParseFailure carrying the
            text to show and the exit code.
        """
        parser = ArgumentParser.create_parser()
        try:
            parsed_args = parser.parse_args(args_list)
        except _ParserExit as exit_request:
            return ParseFailure(message=exit_request.message, exit_code=exit_request.status)

        archive_root = Path(os.path.abspath(parsed_args.archive_root))
        if not archive_root.is_dir():
            return ParseFailure(
                message=f"Archive root does not exist or is not a directory: {archive_root}",
                exit_code=EXIT_USAGE,
            )

        subdirectory = Path(parsed_args.subdirectory)
        if subdirectory.is_absolute():
            return ParseFailure(
                message=f"Subdirectory must be relative to the archive root: {subdirectory}",
                exit_code=EXIT_USAGE,
            )
        if not (archive_root / subdirectory).is_dir():
            return ParseFailure(
                message=f"Subdirectory does not exist: {archive_root / subdirectory}",
                exit_code=EXIT_USAGE,
            )

        configuration = Config.load()
        log_level = logging.DEBUG if parsed_args.verbose else logging.INFO
        _ = setup_logger(log_file=configuration.log_file or DEFAULT_LOG_FILE, console_level=log_level)

        if parsed_args.dbname:
            db_path = Path(parsed_args.dbname).expanduser()
        else:
            db_path = configuration.db_path or default_db_path()

        if parsed_args.dbuser or parsed_args.dbpass or parsed_args.dbhost:
            logger.warning("--dbuser, --dbpass and --dbhost are ignored by the sqlite catalog")

        return ParseSuccess(
            SyncArgs(
                archive_root=archive_root,
                subdirectory=subdirectory,
                verbose=parsed_args.verbose,
                db_path=db_path,
                db_user=parsed_args.dbuser,
                db_password=parsed_args.dbpass,
                db_host=parsed_args.dbhost,
                list_only=parsed_args.list_only,
                settings=CatalogSettings.from_config(configuration),
            )
        )
