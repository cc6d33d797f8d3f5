"""Data access object for the tracks table."""

import sqlite3
from typing import Any, Final, final

from musicat.features.catalog.domain.models import TrackRecord
from musicat.platform.logging import logger

# Column order shared by SELECT and the row mapper.
_SELECT_COLUMNS: Final[str] = (
    "id, ar_id, al_id, ge_id, name, size, time, track_number, year, date, "
    "bit_rate, sample_rate, kind, comments, location, mtime"
)


def _row_to_record(row: tuple[Any, ...]) -> TrackRecord:
    return TrackRecord(
        id=row[0],
        artist_id=row[1],
        album_id=row[2],
        genre_id=row[3],
        name=row[4],
        size=row[5],
        duration=row[6],
        track_number=row[7],
        year=row[8],
        date=row[9],
        bit_rate=row[10],
        sample_rate=row[11],
        kind=row[12],
        comment=row[13],
        location=row[14],
        modified_at=row[15],
    )


@final
class TrackDAO:
    """Data access object for tracks table."""

    conn: sqlite3.Connection

    def __init__(self, conn: sqlite3.Connection) -> None:
        """Initialize DAO.

        Args:
            conn: Database connection.
        """
        self.conn = conn

    def fetch_all(self) -> list[TrackRecord]:
        """Load every track in the catalog."""
        cursor = self.conn.cursor()
        _ = cursor.execute(f"SELECT {_SELECT_COLUMNS} FROM tracks ORDER BY id")
        return [_row_to_record(row) for row in cursor.fetchall()]

    def get_by_location(self, location: str) -> TrackRecord | None:
        cursor = self.conn.cursor()
        _ = cursor.execute(f"SELECT {_SELECT_COLUMNS} FROM tracks WHERE location = ?", (location,))
        row = cursor.fetchone()
        return _row_to_record(row) if row else None

    def insert(self, record: TrackRecord) -> int:
        """Insert a track and commit.

        Args:
            record: Track to store. ``record.id`` is ignored.

        Returns:
            The id assigned by the database.
        """
        try:
            cursor = self.conn.cursor()
            _ = cursor.execute(
                """
                INSERT INTO tracks (
                    ar_id, al_id, ge_id, name, size, time, track_number, year, date,
                    bit_rate, sample_rate, kind, comments, location, mtime
                )
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    record.artist_id,
                    record.album_id,
                    record.genre_id,
                    record.name,
                    record.size,
                    record.duration,
                    record.track_number,
                    record.year,
                    record.date,
                    record.bit_rate,
                    record.sample_rate,
                    record.kind,
                    record.comment,
                    record.location,
                    record.modified_at,
                ),
            )
            self.conn.commit()
        except sqlite3.Error as e:
            logger.error("Failed to insert track %s: %s", record.location, e)
            self.conn.rollback()
            raise
        track_id = cursor.lastrowid
        if track_id is None:
            raise sqlite3.DatabaseError(f"No row id returned for track {record.location}")
        return track_id

    def update(self, record: TrackRecord) -> None:
        """Overwrite the mutable columns of an existing track and commit.

        ``location`` and ``date`` are left as stored.

        Args:
            record: Track carrying the id of the row to update.
        """
        if record.id is None:
            raise ValueError(f"Cannot update track without id: {record.location}")
        try:
            cursor = self.conn.cursor()
            _ = cursor.execute(
                """
                UPDATE tracks
                SET ar_id = ?, al_id = ?, ge_id = ?, name = ?, size = ?, time = ?,
                    track_number = ?, year = ?, bit_rate = ?, sample_rate = ?,
                    kind = ?, comments = ?, mtime = ?
                WHERE id = ?
                """,
                (
                    record.artist_id,
                    record.album_id,
                    record.genre_id,
                    record.name,
                    record.size,
                    record.duration,
                    record.track_number,
                    record.year,
                    record.bit_rate,
                    record.sample_rate,
                    record.kind,
                    record.comment,
                    record.modified_at,
                    record.id,
                ),
            )
            if cursor.rowcount == 0:
                raise sqlite3.DatabaseError(f"Track {record.id} vanished before update")
            self.conn.commit()
        except sqlite3.Error as e:
            logger.error("Failed to update track %s: %s", record.location, e)
            self.conn.rollback()
            raise

    def count(self) -> int:
        cursor = self.conn.cursor()
        _ = cursor.execute("SELECT COUNT(*) FROM tracks")
        return int(cursor.fetchone()[0])
