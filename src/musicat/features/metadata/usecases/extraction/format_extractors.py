"""Format-specific metadata extractors.

Where: src/musicat/features/metadata/usecases/extraction/format_extractors.py
What: Define concrete metadata extractors for supported audio formats.
Why: Separate format logic from the facade so new formats stay local.
"""

from __future__ import annotations

from typing import Any, ClassVar, cast, override

from mutagen import FileType
from mutagen.flac import FLAC
from mutagen.mp3 import MP3
from mutagen.mp4 import MP4
from mutagen.oggopus import OggOpus
from mutagen.oggvorbis import OggVorbis

from ._base_extractors import BaseAudioExtractor, BaseTagExtractor
from ._tag_utils import parse_tuple_numbers

__all__ = [
    "Mp3Extractor",
    "FlacExtractor",
    "OggVorbisExtractor",
    "OpusExtractor",
    "M4aExtractor",
]

_VORBIS_MAPPING: dict[str, str] = {
    "title": "title",
    "artist": "artist",
    "album": "album",
    "genre": "genre",
    "track": "tracknumber",
    "date": "date",
    "comment": "comment",
}


class Mp3Extractor(BaseAudioExtractor):
    """Extractor for MP3 files reading raw ID3 frames."""

    FILE_CLASS: ClassVar[type[FileType] | None] = MP3
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}
    KIND: ClassVar[str] = "MPEG audio file"

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "TIT2",
        "artist": "TPE1",
        "album": "TALB",
        "genre": "TCON",
        "track": "TRCK",
        "date": "TDRC",
        "comment": "COMM",
    }

    @override
    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        if tags is None:
            return None
        if key == "COMM":
            # COMM frames are keyed by description and language.
            for frame in tags.getall("COMM"):
                if frame.text and str(frame.text[0]).strip():
                    return str(frame.text[0])
            return None
        frame = tags.get(key)
        if frame is None or not getattr(frame, "text", None):
            return None
        return str(frame.text[0])

    @override
    def _get_genre(self, tags: Any) -> str | None:
        if tags is None:
            return None
        frame = tags.get("TCON")
        if frame is None:
            return None
        # ``genres`` resolves ID3v1 numeric references such as "(13)".
        genres = cast(list[str], getattr(frame, "genres", []))
        return genres[0] if genres else None


class FlacExtractor(BaseAudioExtractor):
    """Extractor for FLAC files."""

    FILE_CLASS: ClassVar[type[FileType] | None] = FLAC
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}
    KIND: ClassVar[str] = "FLAC audio file"
    TAG_MAPPING: ClassVar[dict[str, str]] = dict(_VORBIS_MAPPING)

    @override
    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        return BaseTagExtractor.get_str_tag(tags, key)


class OggVorbisExtractor(BaseAudioExtractor):
    """Extractor for Ogg Vorbis files."""

    FILE_CLASS: ClassVar[type[FileType] | None] = OggVorbis
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}
    KIND: ClassVar[str] = "Ogg Vorbis audio file"
    TAG_MAPPING: ClassVar[dict[str, str]] = dict(_VORBIS_MAPPING)

    @override
    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        return BaseTagExtractor.get_str_tag(tags, key)


class OpusExtractor(BaseAudioExtractor):
    """Extractor for Opus (.opus) files using Vorbis comments."""

    FILE_CLASS: ClassVar[type[FileType] | None] = OggOpus
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}
    KIND: ClassVar[str] = "Opus audio file"
    TAG_MAPPING: ClassVar[dict[str, str]] = dict(_VORBIS_MAPPING)

    @override
    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        return BaseTagExtractor.get_str_tag(tags, key)


class M4aExtractor(BaseAudioExtractor):
    """Extractor for M4A/AAC files using MP4 tags."""

    FILE_CLASS: ClassVar[type[FileType] | None] = MP4
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}
    KIND: ClassVar[str] = "AAC audio file"

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "\xa9nam",
        "artist": "\xa9ART",
        "album": "\xa9alb",
        "genre": "\xa9gen",
        "track": "trkn",
        "date": "\xa9day",
        "comment": "\xa9cmt",
    }

    @override
    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        if tags is None:
            return None
        if key == "trkn":
            value = cast(list[tuple[int, int]] | None, tags.get(key))
            if not value:
                return None
            num, total = parse_tuple_numbers(data=value)
            return f"{num or ''}/{total or ''}"
        return BaseTagExtractor.get_str_tag(tags, key)
