"""Summary: Catalog value objects shared by the reconciliation use cases.
Why: Keep row shapes and run counters independent from sqlite specifics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class DimensionKind(StrEnum):
    """Normalized lookup tables referenced by tracks."""

    ARTIST = "artist"
    ALBUM = "album"
    GENRE = "genre"

    @property
    def table(self) -> str:
        return _TABLES[self]

    @property
    def foreign_key(self) -> str:
        """Column on ``tracks`` that references this dimension."""
        return _FOREIGN_KEYS[self]


_TABLES: dict[DimensionKind, str] = {
    DimensionKind.ARTIST: "artists",
    DimensionKind.ALBUM: "albums",
    DimensionKind.GENRE: "genres",
}

_FOREIGN_KEYS: dict[DimensionKind, str] = {
    DimensionKind.ARTIST: "ar_id",
    DimensionKind.ALBUM: "al_id",
    DimensionKind.GENRE: "ge_id",
}


@dataclass(frozen=True, slots=True)
class DimensionRow:
    """A single artist, album, or genre row."""

    id: int
    name: str
    track_count: int = 0


@dataclass(slots=True)
class TrackRecord:
    """A catalog row describing one media file.

    ``location`` is the percent-encoded path relative to the archive root.
    ``duration`` is in milliseconds, ``bit_rate`` in kbit/s and
    ``modified_at`` in whole seconds since the epoch.
    """

    artist_id: int
    album_id: int
    genre_id: int
    name: str
    size: int
    location: str
    modified_at: int
    duration: int | None = None
    track_number: int | None = None
    year: int | None = None
    date: str | None = None
    bit_rate: int | None = None
    sample_rate: int | None = None
    kind: str | None = None
    comment: str | None = None
    id: int | None = None


@dataclass(slots=True)
class SyncStats:
    """Counters reported at the end of a run."""

    new_artists: int = 0
    new_albums: int = 0
    new_genres: int = 0
    new_tracks: int = 0
    updated_tracks: int = 0
    existing_tracks: int = 0
    skipped_paths: list[str] = field(default_factory=list)


__all__ = ["DimensionKind", "DimensionRow", "SyncStats", "TrackRecord"]
