"""Tag extraction built on mutagen."""

from .format_extractors import (
    FlacExtractor,
    M4aExtractor,
    Mp3Extractor,
    OggVorbisExtractor,
    OpusExtractor,
)
from .track_metadata_extractor import MetadataExtractor

__all__ = [
    "FlacExtractor",
    "M4aExtractor",
    "MetadataExtractor",
    "Mp3Extractor",
    "OggVorbisExtractor",
    "OpusExtractor",
]
