# Where: musicat.features.metadata.domain.track_tags
# What: Tag values and audio properties read from one media file.
# Why: Give the catalog a single shape to build track rows from.

from dataclasses import dataclass


@dataclass
class TrackTags:
    """Metadata and audio properties for a music file."""

    title: str | None = None
    artist: str | None = None
    album: str | None = None
    genre: str | None = None
    track_number: int | None = None
    year: int | None = None
    comment: str | None = None
    duration_ms: int | None = None
    bit_rate: int | None = None
    sample_rate: int | None = None
    kind: str | None = None


__all__ = ["TrackTags"]
