"""Shared base classes for metadata extractors.

Where: src/musicat/features/metadata/usecases/extraction/_base_extractors.py
What: Define abstract base classes that encapsulate shared tag and stream-info handling.
Why: Each format only declares its file class, tag keys and kind label.
"""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Any, ClassVar, cast, override

from mutagen import FileType
from mutagen._util import MutagenError

from musicat.features.metadata.domain.track_tags import TrackTags
from musicat.platform.logging import logger

from ._tag_utils import bps_to_kbps, parse_slash_separated, parse_year, safe_get_first, seconds_to_ms

__all__ = [
    "AudioFormatExtractor",
    "BaseTagExtractor",
    "BaseAudioExtractor",
]


class AudioFormatExtractor(abc.ABC):
    """Abstract base class for audio metadata extractors."""

    @abc.abstractmethod
    def extract_metadata(self, file_path: Path) -> TrackTags:
        """Extract tags and stream properties from an audio file."""
        raise NotImplementedError


class BaseTagExtractor:
    """Provides common helper methods for tag extraction."""

    @staticmethod
    def get_str_tag(tags: Any, key: str, default: str | None = None) -> str | None:
        """Extract the first string value for a key from tag collection."""
        if tags is None or not key:
            return default
        value: object = tags.get(key)
        if isinstance(value, list):
            first = safe_get_first(data=cast(list[str], value), default=default or "")
            return str(first) if first else default
        if isinstance(value, str):
            return value
        return default


class BaseAudioExtractor(AudioFormatExtractor, abc.ABC):
    """Base class for audio metadata extractors."""

    FILE_CLASS: ClassVar[type[FileType] | None] = None
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}
    KIND: ClassVar[str] = "audio file"

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "",
        "artist": "",
        "album": "",
        "genre": "",
        "track": "",
        "date": "",
        "comment": "",
    }

    def _open_file(self, file_path: Path) -> FileType:
        """Open the audio file with the format's mutagen class."""
        if self.FILE_CLASS is None:
            raise NotImplementedError("FILE_CLASS must be defined in subclass")
        try:
            return self.FILE_CLASS(file_path, **self.FILE_INIT_PARAMS)
        except MutagenError as exc:
            logger.error(
                "Failed to read %s tags from %s: %s",
                self.__class__.__name__.replace("Extractor", ""),
                file_path,
                exc,
            )
            if "No such file" in str(exc):
                raise FileNotFoundError(str(exc)) from exc
            raise

    @abc.abstractmethod
    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        """Get a tag value; ``tags`` is ``None`` for untagged files."""
        raise NotImplementedError

    def _get_genre(self, tags: Any) -> str | None:
        return self._get_tag_value(tags, key=self.TAG_MAPPING["genre"])

    @staticmethod
    def _clean(value: str | None) -> str | None:
        if value is None:
            return None
        stripped = value.strip()
        return stripped or None

    @override
    def extract_metadata(self, file_path: Path) -> TrackTags:
        """Extract tags and stream properties from an audio file."""
        audio = self._open_file(file_path)
        tags = audio.tags
        logger.debug("Opened %s with tags type: %s", file_path, type(tags).__name__)

        track_number, _ = parse_slash_separated(value=self._get_tag_value(tags, key=self.TAG_MAPPING["track"]) or "")
        year = parse_year(self._get_tag_value(tags, key=self.TAG_MAPPING["date"]) or "")

        info = audio.info
        sample_rate = getattr(info, "sample_rate", None)

        return TrackTags(
            title=self._clean(self._get_tag_value(tags, key=self.TAG_MAPPING["title"])),
            artist=self._clean(self._get_tag_value(tags, key=self.TAG_MAPPING["artist"])),
            album=self._clean(self._get_tag_value(tags, key=self.TAG_MAPPING["album"])),
            genre=self._clean(self._get_genre(tags)),
            track_number=track_number,
            year=year,
            comment=self._clean(self._get_tag_value(tags, key=self.TAG_MAPPING["comment"])),
            duration_ms=seconds_to_ms(getattr(info, "length", None)),
            bit_rate=bps_to_kbps(getattr(info, "bitrate", None)),
            sample_rate=int(sample_rate) if sample_rate else None,
            kind=self.KIND,
        )
