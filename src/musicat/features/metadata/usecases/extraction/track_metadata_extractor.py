"""Audio file metadata extraction functionality.

Where: src/musicat/features/metadata/usecases/extraction/track_metadata_extractor.py
What: Provide the MetadataExtractor facade that routes files to format extractors.
Why: The catalog depends on one ``read`` call regardless of container format.
"""

from pathlib import Path
from typing import ClassVar

from ._base_extractors import AudioFormatExtractor
from .format_extractors import (
    FlacExtractor,
    M4aExtractor,
    Mp3Extractor,
    OggVorbisExtractor,
    OpusExtractor,
)
from musicat.features.metadata.domain.track_tags import TrackTags

__all__ = [
    "MetadataExtractor",
]


class MetadataExtractor:
    """Facade class for extracting tags from audio files.

    This class selects the appropriate extractor based on file extension.
    """

    _format_map: ClassVar[dict[str, AudioFormatExtractor]] = {
        ".mp3": Mp3Extractor(),
        ".flac": FlacExtractor(),
        ".m4a": M4aExtractor(),
        ".ogg": OggVorbisExtractor(),
        ".opus": OpusExtractor(),
    }

    SUPPORTED_FORMATS: ClassVar[frozenset[str]] = frozenset(_format_map)

    def read(self, file_path: Path) -> TrackTags:
        """Extract tags and audio properties from an audio file.

        Args:
            file_path: Path to the audio file.

        Returns:
            TrackTags: Extracted values; missing tags are ``None``.

        Raises:
            ValueError: If the file format is unsupported.
            mutagen.MutagenError: If the file cannot be parsed.
        """
        ext: str = file_path.suffix.lower()
        extractor = self._format_map.get(ext)
        if extractor is None:
            raise ValueError(f"Unsupported file format: {ext}")
        return extractor.extract_metadata(file_path)
