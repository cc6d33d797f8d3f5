"""Command line argument options and parse results."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from musicat.config.settings import CatalogSettings


@final
@dataclass(slots=True)
class SyncArgs:
    """Resolved options for one catalog run."""

    archive_root: Path
    subdirectory: Path
    verbose: bool
    db_path: Path
    db_user: str | None
    db_password: str | None
    db_host: str | None
    list_only: bool
    settings: CatalogSettings


@final
@dataclass(slots=True, frozen=True)
class ParseSuccess:
    """Arguments were valid; the run may start."""

    args: SyncArgs


@final
@dataclass(slots=True, frozen=True)
class ParseFailure:
    """Parsing stopped before any work: help, version, or invalid input.

    ``exit_code`` is 0 for help and version output.
    """

    message: str
    exit_code: int

    @property
    def is_error(self) -> bool:
        return self.exit_code != 0


ParseResult = ParseSuccess | ParseFailure

__all__ = ["ParseFailure", "ParseResult", "ParseSuccess", "SyncArgs"]
