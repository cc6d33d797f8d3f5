"""Integration tests for TrackDAO."""

from __future__ import annotations

import sqlite3

import pytest

from musicat.features.catalog.domain.models import TrackRecord
from musicat.platform.db.daos import TrackDAO
from musicat.platform.db.db_manager import DatabaseManager


@pytest.fixture
def dao(db_manager: DatabaseManager) -> TrackDAO:
    assert db_manager.conn is not None
    return TrackDAO(db_manager.conn)


def _record(location: str = "Artist/Album/01%20Intro.mp3", **overrides: object) -> TrackRecord:
    values: dict[str, object] = {
        "artist_id": 1,
        "album_id": 1,
        "genre_id": 1,
        "name": "Intro",
        "size": 4096,
        "location": location,
        "modified_at": 1_700_000_000,
        "duration": 215_000,
        "track_number": 1,
        "year": 1999,
        "date": "2024-01-01T00:00:00+00:00",
        "bit_rate": 320,
        "sample_rate": 44100,
        "kind": "MPEG audio file",
        "comment": "ripped",
    }
    values.update(overrides)
    return TrackRecord(**values)  # type: ignore[arg-type]


def test_insert_and_fetch_all(dao: TrackDAO) -> None:
    track_id = dao.insert(_record())

    stored = dao.fetch_all()
    assert len(stored) == 1
    assert stored[0].id == track_id
    assert stored[0] == _record(id=track_id)


def test_location_is_unique(dao: TrackDAO) -> None:
    _ = dao.insert(_record())

    with pytest.raises(sqlite3.IntegrityError):
        _ = dao.insert(_record())

    assert dao.count() == 1


def test_update_overwrites_mutable_fields(dao: TrackDAO) -> None:
    track_id = dao.insert(_record())

    dao.update(
        _record(
            id=track_id,
            name="Intro (Remastered)",
            size=5000,
            modified_at=1_700_000_001,
            date="ignored",
            location="ignored.mp3",
            comment=None,
        )
    )

    stored = dao.get_by_location("Artist/Album/01%20Intro.mp3")
    assert stored is not None
    assert stored.name == "Intro (Remastered)"
    assert stored.size == 5000
    assert stored.modified_at == 1_700_000_001
    assert stored.comment is None
    assert stored.date == "2024-01-01T00:00:00+00:00"


def test_update_requires_id(dao: TrackDAO) -> None:
    with pytest.raises(ValueError):
        dao.update(_record())


def test_update_of_missing_row_fails(dao: TrackDAO) -> None:
    with pytest.raises(sqlite3.DatabaseError):
        dao.update(_record(id=42))


def test_get_by_location_missing(dao: TrackDAO) -> None:
    assert dao.get_by_location("nowhere.mp3") is None
