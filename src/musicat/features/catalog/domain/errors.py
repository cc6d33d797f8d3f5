"""Summary: Error taxonomy raised by the catalog reconciliation engine.
Why: Let the CLI map data-integrity failures to exit codes without library exits.
"""

from __future__ import annotations

from pathlib import Path

from .models import DimensionKind


class CatalogError(Exception):
    """Base class for catalog reconciliation errors."""


class CatalogIntegrityError(CatalogError):
    """The catalog holds data the engine cannot safely act on."""


class AmbiguousEntityError(CatalogIntegrityError):
    """More than one dimension row carries the same name."""

    def __init__(self, kind: DimensionKind, name: str, count: int) -> None:
        self.kind = kind
        self.name = name
        self.count = count
        super().__init__(f"{count} {kind.table} rows are named {name!r}; refusing to guess which one to use")


class MissingSentinelError(CatalogIntegrityError):
    """The reserved placeholder row for missing tag values does not exist."""

    def __init__(self, kind: DimensionKind, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"{kind.table} has no placeholder row named {name!r}")


class InvalidPathError(CatalogError, ValueError):
    """A path does not lie beneath the archive root."""

    def __init__(self, path: Path | str, root: Path | str) -> None:
        self.path = str(path)
        self.root = str(root)
        super().__init__(f"{self.path} is not located under archive root {self.root}")


__all__ = [
    "AmbiguousEntityError",
    "CatalogError",
    "CatalogIntegrityError",
    "InvalidPathError",
    "MissingSentinelError",
]
