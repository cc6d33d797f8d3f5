"""Tests for the all-or-nothing track count refresh."""

from __future__ import annotations

import sqlite3

import pytest
from pytest_mock import MockerFixture

from musicat.features.catalog.domain.models import DimensionKind, TrackRecord
from musicat.features.catalog.usecases.aggregates import AggregateRecalculator
from musicat.platform.db.daos import DimensionDAO, TrackDAO
from musicat.platform.db.db_manager import DatabaseManager


@pytest.fixture
def stores(db_manager: DatabaseManager) -> dict[DimensionKind, DimensionDAO]:
    assert db_manager.conn is not None
    return {kind: DimensionDAO(db_manager.conn, kind) for kind in DimensionKind}


def _add_track(db_manager: DatabaseManager, location: str, artist_id: int, album_id: int, genre_id: int = 1) -> None:
    assert db_manager.conn is not None
    _ = TrackDAO(db_manager.conn).insert(
        TrackRecord(
            artist_id=artist_id,
            album_id=album_id,
            genre_id=genre_id,
            name=location,
            size=1,
            location=location,
            modified_at=0,
        )
    )


def _count(store: DimensionDAO, name: str) -> int:
    return store.find_by_name(name)[0].track_count


def test_counts_match_track_references(db_manager: DatabaseManager, stores: dict[DimensionKind, DimensionDAO]) -> None:
    stores[DimensionKind.ARTIST].insert("X")
    stores[DimensionKind.ALBUM].insert("Y")
    stores[DimensionKind.ALBUM].insert("Unused")
    x = stores[DimensionKind.ARTIST].find_by_name("X")[0].id
    y = stores[DimensionKind.ALBUM].find_by_name("Y")[0].id
    _add_track(db_manager, "1.mp3", x, y)
    _add_track(db_manager, "2.mp3", x, 1)
    _add_track(db_manager, "3.mp3", 1, 1)

    written = AggregateRecalculator(db_manager, stores).recalculate()

    assert written == {DimensionKind.ARTIST: 2, DimensionKind.ALBUM: 3, DimensionKind.GENRE: 1}
    assert _count(stores[DimensionKind.ARTIST], "X") == 2
    assert _count(stores[DimensionKind.ARTIST], "N/A") == 1
    assert _count(stores[DimensionKind.ALBUM], "Y") == 1
    assert _count(stores[DimensionKind.ALBUM], "N/A") == 2
    assert _count(stores[DimensionKind.ALBUM], "Unused") == 0
    assert _count(stores[DimensionKind.GENRE], "N/A") == 3


def test_stale_counts_are_reset_to_zero(db_manager: DatabaseManager, stores: dict[DimensionKind, DimensionDAO]) -> None:
    assert db_manager.conn is not None
    _ = db_manager.conn.execute("UPDATE artists SET track_cnt = 99")
    db_manager.conn.commit()

    _ = AggregateRecalculator(db_manager, stores).recalculate()

    assert _count(stores[DimensionKind.ARTIST], "N/A") == 0


def test_failure_rolls_back_every_count(
    db_manager: DatabaseManager, stores: dict[DimensionKind, DimensionDAO], mocker: MockerFixture
) -> None:
    _add_track(db_manager, "1.mp3", 1, 1)
    _ = mocker.patch.object(
        stores[DimensionKind.GENRE],
        "recompute_track_counts",
        side_effect=sqlite3.OperationalError("database is locked"),
    )
    rollback = mocker.spy(db_manager, "rollback_transaction")

    with pytest.raises(sqlite3.OperationalError):
        _ = AggregateRecalculator(db_manager, stores).recalculate()

    rollback.assert_called_once()
    assert _count(stores[DimensionKind.ARTIST], "N/A") == 0
    assert _count(stores[DimensionKind.ALBUM], "N/A") == 0
