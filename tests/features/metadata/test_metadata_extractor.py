# Where: tests/features/metadata/test_metadata_extractor.py
# What: Format routing and tag mapping of the mutagen-backed extractors.
# Why: The catalog relies on missing tags arriving as None, never as empty strings.
# Trade-offs:
# - Files are not decoded; mutagen file classes are replaced with canned objects.

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest
from mutagen import MutagenError
from mutagen.id3 import COMM, ID3, TALB, TCON, TDRC, TIT2, TPE1, TRCK
from pytest_mock import MockerFixture

from musicat.features.metadata.usecases.extraction import (
    FlacExtractor,
    M4aExtractor,
    MetadataExtractor,
    Mp3Extractor,
)

_INFO = SimpleNamespace(length=215.5, bitrate=320_000, sample_rate=44_100)


def _fake_file(tags: Any, info: Any = _INFO) -> SimpleNamespace:
    return SimpleNamespace(tags=tags, info=info)


def _id3(*frames: Any) -> ID3:
    tags = ID3()
    for frame in frames:
        tags.add(frame)
    return tags


def test_mp3_frames_are_mapped(mocker: MockerFixture) -> None:
    tags = _id3(
        TIT2(encoding=3, text=["Roygbiv"]),
        TPE1(encoding=3, text=["Boards of Canada"]),
        TALB(encoding=3, text=["Music Has the Right to Children"]),
        TCON(encoding=3, text=["Electronic"]),
        TRCK(encoding=3, text=["8/18"]),
        TDRC(encoding=3, text=["1998-04-20"]),
        COMM(encoding=3, lang="eng", desc="", text=["vinyl rip"]),
    )
    _ = mocker.patch.object(Mp3Extractor, "FILE_CLASS", return_value=_fake_file(tags))

    result = Mp3Extractor().extract_metadata(Path("song.mp3"))

    assert result.title == "Roygbiv"
    assert result.artist == "Boards of Canada"
    assert result.album == "Music Has the Right to Children"
    assert result.genre == "Electronic"
    assert result.track_number == 8
    assert result.year == 1998
    assert result.comment == "vinyl rip"
    assert result.duration_ms == 215_500
    assert result.bit_rate == 320
    assert result.sample_rate == 44_100
    assert result.kind == "MPEG audio file"


def test_mp3_numeric_genre_reference_is_resolved(mocker: MockerFixture) -> None:
    _ = mocker.patch.object(Mp3Extractor, "FILE_CLASS", return_value=_fake_file(_id3(TCON(encoding=3, text=["(13)"]))))

    assert Mp3Extractor().extract_metadata(Path("song.mp3")).genre == "Pop"


def test_untagged_mp3_yields_none(mocker: MockerFixture) -> None:
    _ = mocker.patch.object(Mp3Extractor, "FILE_CLASS", return_value=_fake_file(None))

    result = Mp3Extractor().extract_metadata(Path("song.mp3"))

    assert (result.title, result.artist, result.album, result.genre) == (None, None, None, None)
    assert result.track_number is None
    assert result.year is None
    assert result.kind == "MPEG audio file"


def test_blank_vorbis_values_become_none(mocker: MockerFixture) -> None:
    tags = {"title": ["  "], "artist": ["Low"], "album": [""], "tracknumber": ["2"], "date": ["1994"]}
    _ = mocker.patch.object(FlacExtractor, "FILE_CLASS", return_value=_fake_file(tags))

    result = FlacExtractor().extract_metadata(Path("song.flac"))

    assert result.title is None
    assert result.artist == "Low"
    assert result.album is None
    assert result.track_number == 2
    assert result.year == 1994


def test_m4a_track_tuple_is_parsed(mocker: MockerFixture) -> None:
    tags = {"\xa9nam": ["Teardrop"], "\xa9ART": ["Massive Attack"], "trkn": [(3, 11)], "\xa9day": ["1998"]}
    _ = mocker.patch.object(M4aExtractor, "FILE_CLASS", return_value=_fake_file(tags))

    result = M4aExtractor().extract_metadata(Path("song.m4a"))

    assert result.title == "Teardrop"
    assert result.track_number == 3
    assert result.kind == "AAC audio file"


def test_missing_file_maps_to_file_not_found(mocker: MockerFixture) -> None:
    _ = mocker.patch.object(
        Mp3Extractor,
        "FILE_CLASS",
        side_effect=MutagenError("[Errno 2] No such file or directory: 'gone.mp3'"),
    )

    with pytest.raises(FileNotFoundError):
        _ = Mp3Extractor().extract_metadata(Path("gone.mp3"))


def test_corrupt_file_error_propagates(mocker: MockerFixture) -> None:
    _ = mocker.patch.object(Mp3Extractor, "FILE_CLASS", side_effect=MutagenError("can't sync to MPEG frame"))

    with pytest.raises(MutagenError):
        _ = Mp3Extractor().extract_metadata(Path("bad.mp3"))


def test_facade_routes_by_suffix(mocker: MockerFixture) -> None:
    _ = mocker.patch.object(Mp3Extractor, "FILE_CLASS", return_value=_fake_file(_id3(TIT2(encoding=3, text=["X"]))))

    assert MetadataExtractor().read(Path("LOUD.MP3")).title == "X"


def test_facade_rejects_unknown_suffix() -> None:
    with pytest.raises(ValueError, match="Unsupported file format"):
        _ = MetadataExtractor().read(Path("notes.txt"))


def test_supported_formats() -> None:
    assert MetadataExtractor.SUPPORTED_FORMATS == frozenset({".mp3", ".flac", ".m4a", ".ogg", ".opus"})
