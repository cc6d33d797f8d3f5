"""Summary: Ports defining catalog use case dependencies.
Why: Decouple use cases from sqlite and mutagen so tests and swaps stay simple."""

from __future__ import annotations

from pathlib import Path
from sqlite3 import Connection
from typing import Protocol, runtime_checkable

from musicat.features.catalog.domain.models import DimensionKind, DimensionRow, TrackRecord
from musicat.features.metadata.domain.track_tags import TrackTags


@runtime_checkable
class DatabaseManagerPort(Protocol):
    """Port for database lifecycle and transaction control."""

    conn: Connection | None

    def connect(self) -> None:
        """Ensure the underlying connection is ready."""
        ...

    def close(self) -> None:
        """Tear down the managed connection."""
        ...

    def begin_transaction(self) -> None:
        ...

    def commit_transaction(self) -> None:
        ...

    def rollback_transaction(self) -> None:
        ...


@runtime_checkable
class DimensionStorePort(Protocol):
    """Port for one artist, album, or genre table."""

    kind: DimensionKind

    def find_by_name(self, name: str) -> list[DimensionRow]:
        """Return all rows with exactly this name."""
        ...

    def insert(self, name: str) -> None:
        """Persist a new row with this name."""
        ...

    def recompute_track_counts(self) -> int:
        """Rewrite ``track_cnt`` from the tracks table inside the caller's transaction."""
        ...


@runtime_checkable
class TrackStorePort(Protocol):
    """Port for the tracks table."""

    def fetch_all(self) -> list[TrackRecord]:
        ...

    def insert(self, record: TrackRecord) -> int:
        ...

    def update(self, record: TrackRecord) -> None:
        ...


@runtime_checkable
class TagReaderPort(Protocol):
    """Port for reading tags and audio properties from a media file."""

    def read(self, file_path: Path) -> TrackTags:
        """Return the tags for ``file_path``; failures propagate."""
        ...


__all__ = [
    "DatabaseManagerPort",
    "DimensionStorePort",
    "TagReaderPort",
    "TrackStorePort",
]
