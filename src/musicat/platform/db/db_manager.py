"""Database manager for the musicat catalog."""

import sqlite3
from pathlib import Path
from typing import final, Any

from musicat.config.config import SENTINEL_NAME_DEFAULT
from musicat.config.paths import default_db_path
from musicat.platform.logging import logger

DIMENSION_TABLES: tuple[str, ...] = ("artists", "albums", "genres")
TRACK_TABLE: str = "tracks"


@final
class DatabaseManager:
    """Owns the sqlite connection and creates the catalog schema on first use."""

    db_path: str | Path
    sentinel_name: str
    conn: sqlite3.Connection | None

    def __init__(self, db_path: Path | str | None = None, sentinel_name: str = SENTINEL_NAME_DEFAULT) -> None:
        """Initialize database manager.

        Args:
            db_path: Path to database file. If None, use the default catalog in the data
                   directory. If ":memory:", use in-memory database.
            sentinel_name: Placeholder name seeded into freshly created dimension tables.
        """
        if db_path == ":memory:":
            self.db_path = ":memory:"
        elif db_path is None:
            self.db_path = default_db_path()
        else:
            self.db_path = Path(db_path) if isinstance(db_path, str) else db_path
        self.sentinel_name = sentinel_name
        self.conn = None

    def connect(self) -> None:
        """Connect to database and initialize schema."""
        try:
            if isinstance(self.db_path, Path):
                self.db_path.parent.mkdir(parents=True, exist_ok=True)

            try:
                self.conn = sqlite3.connect(
                    self.db_path,
                    timeout=30.0,
                    isolation_level="IMMEDIATE",
                )
            except sqlite3.OperationalError as e:
                if "unable to open database file" in str(e):
                    raise PermissionError(f"Unable to open database at {self.db_path}") from e
                raise

            _ = self.conn.execute("PRAGMA foreign_keys = ON")
            _ = self.conn.execute("PRAGMA synchronous = NORMAL")
            _ = self.conn.execute("PRAGMA journal_mode = WAL")
            _ = self.conn.execute("PRAGMA busy_timeout = 30000")

            self._init_schema()

        except OSError as e:
            if isinstance(e, PermissionError):
                raise
            logger.error("Failed to prepare database location: %s", e)
            raise PermissionError(f"Unable to open database at {self.db_path}") from e
        except sqlite3.Error as e:
            logger.error("Failed to connect to database: %s", e)
            raise

    def _init_schema(self) -> None:
        """Create missing catalog tables.

        Existing tables are never altered. Dimension tables created here
        receive their placeholder row.
        """
        if self.conn is None:
            return

        try:
            cursor = self.conn.cursor()

            expected_tables = {*DIMENSION_TABLES, TRACK_TABLE}
            _ = cursor.execute(
                """
                SELECT name FROM sqlite_master
                WHERE type='table' AND name IN ('artists', 'albums', 'genres', 'tracks')
                """
            )
            existing_tables = {row[0] for row in cursor.fetchall()}

            if existing_tables.issuperset(expected_tables):
                logger.debug("Tables already exist, skipping schema initialization")
                return

            for table in DIMENSION_TABLES:
                if table in existing_tables:
                    continue
                _ = cursor.execute(
                    f"""
                    CREATE TABLE {table} (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        name TEXT NOT NULL,
                        track_cnt INTEGER NOT NULL DEFAULT 0
                    )
                    """
                )
                _ = cursor.execute(f"CREATE INDEX IF NOT EXISTS idx_{table}_name ON {table}(name)")
                _ = cursor.execute(f"INSERT INTO {table} (name) VALUES (?)", (self.sentinel_name,))

            _ = cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS tracks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    ar_id INTEGER NOT NULL REFERENCES artists (id),
                    al_id INTEGER NOT NULL REFERENCES albums (id),
                    ge_id INTEGER NOT NULL REFERENCES genres (id),
                    name TEXT NOT NULL,
                    size INTEGER NOT NULL,
                    time INTEGER,
                    track_number INTEGER,
                    year INTEGER,
                    date TEXT,
                    bit_rate INTEGER,
                    sample_rate INTEGER,
                    kind TEXT,
                    comments TEXT,
                    location TEXT NOT NULL UNIQUE,
                    mtime INTEGER NOT NULL
                )
                """
            )
            _ = cursor.execute("CREATE INDEX IF NOT EXISTS idx_tracks_ar_id ON tracks(ar_id)")
            _ = cursor.execute("CREATE INDEX IF NOT EXISTS idx_tracks_al_id ON tracks(al_id)")
            _ = cursor.execute("CREATE INDEX IF NOT EXISTS idx_tracks_ge_id ON tracks(ge_id)")

            self.conn.commit()
            logger.info("Initialized catalog schema in %s", self.db_path)

        except sqlite3.Error as e:
            logger.error("Failed to initialize schema: %s", e)
            if self.conn:
                self.conn.rollback()
            raise

    def close(self) -> None:
        """Close database connection."""
        if self.conn:
            try:
                self.conn.close()
                self.conn = None
            except sqlite3.Error as e:
                logger.error("Failed to close database connection: %s", e)

    def __enter__(self) -> "DatabaseManager":
        """Enter context manager."""
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any | None,
    ) -> None:
        """Exit context manager."""
        self.close()

    def begin_transaction(self) -> None:
        """Begin a transaction."""
        if self.conn:
            _ = self.conn.execute("BEGIN TRANSACTION")

    def commit_transaction(self) -> None:
        """Commit the current transaction."""
        if self.conn:
            self.conn.commit()

    def rollback_transaction(self) -> None:
        """Rollback the current transaction."""
        if self.conn:
            self.conn.rollback()
