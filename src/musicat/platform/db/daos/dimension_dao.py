"""Data access object for the artists, albums and genres tables."""

import sqlite3
from typing import final

from musicat.features.catalog.domain.models import DimensionKind, DimensionRow
from musicat.platform.logging import logger


@final
class DimensionDAO:
    """Data access object for one dimension table.

    Table and column names come from ``DimensionKind`` and are never taken
    from user input.
    """

    conn: sqlite3.Connection
    kind: DimensionKind

    def __init__(self, conn: sqlite3.Connection, kind: DimensionKind) -> None:
        """Initialize DAO.

        Args:
            conn: Database connection.
            kind: Dimension table served by this DAO.
        """
        self.conn = conn
        self.kind = kind

    def find_by_name(self, name: str) -> list[DimensionRow]:
        """Return every row whose name matches exactly.

        Args:
            name: Dimension name.

        Returns:
            Matching rows ordered by id; more than one indicates a corrupt catalog.
        """
        cursor = self.conn.cursor()
        _ = cursor.execute(
            f"SELECT id, name, track_cnt FROM {self.kind.table} WHERE name = ? ORDER BY id",
            (name,),
        )
        return [DimensionRow(id=row[0], name=row[1], track_count=row[2] or 0) for row in cursor.fetchall()]

    def insert(self, name: str) -> None:
        """Insert a new row and commit.

        Args:
            name: Dimension name.
        """
        try:
            _ = self.conn.execute(f"INSERT INTO {self.kind.table} (name) VALUES (?)", (name,))
            self.conn.commit()
        except sqlite3.Error as e:
            logger.error("Failed to insert %s %r: %s", self.kind.value, name, e)
            self.conn.rollback()
            raise

    def get_by_id(self, row_id: int) -> DimensionRow | None:
        cursor = self.conn.cursor()
        _ = cursor.execute(
            f"SELECT id, name, track_cnt FROM {self.kind.table} WHERE id = ?",
            (row_id,),
        )
        row = cursor.fetchone()
        return DimensionRow(id=row[0], name=row[1], track_count=row[2] or 0) if row else None

    def recompute_track_counts(self) -> int:
        """Rewrite ``track_cnt`` from the tracks table without committing.

        Returns:
            Number of dimension rows written.
        """
        cursor = self.conn.cursor()
        _ = cursor.execute(
            f"""
            UPDATE {self.kind.table}
            SET track_cnt = (
                SELECT COUNT(*) FROM tracks
                WHERE tracks.{self.kind.foreign_key} = {self.kind.table}.id
            )
            """
        )
        return cursor.rowcount
