"""src/musicat/features/catalog/usecases/sync_runner.py
What: Wire scanner, reconciler and aggregate step into one catalog run.
Why: Give the CLI a single entry point that owns per-run state.
"""

from __future__ import annotations

import os
import time
from pathlib import Path

from musicat.config.settings import CatalogSettings
from musicat.features.catalog.domain.models import DimensionKind, SyncStats
from musicat.platform.db.daos import DimensionDAO, TrackDAO
from musicat.platform.logging import logger

from .aggregates import AggregateRecalculator
from .entity_cache import EntityCache
from .path_codec import PathCodec
from .ports import DatabaseManagerPort, TagReaderPort
from .reconciler import Reconciler
from .scanner import Scanner


class CatalogSynchronizer:
    """Runs one reconciliation pass of an archive subtree against the catalog.

    The caller owns the connection: it is expected to be open before ``run``
    and is left open afterwards.
    """

    def __init__(
        self,
        db_manager: DatabaseManagerPort,
        tag_reader: TagReaderPort,
        archive_root: Path,
        settings: CatalogSettings | None = None,
    ) -> None:
        self.db_manager = db_manager
        self.tag_reader = tag_reader
        self.archive_root = Path(os.path.normpath(archive_root))
        self.settings = settings or CatalogSettings()
        self.scanner = Scanner(self.settings.media_extensions, self.settings.hidden_prefix)

    def run(self, subdirectory: Path | str = ".") -> SyncStats:
        """Reconcile ``archive_root / subdirectory`` and refresh track counts.

        Raises:
            CatalogIntegrityError: The catalog holds duplicate or missing rows.
            NotADirectoryError: The subtree does not exist.
        """
        conn = self.db_manager.conn
        if conn is None:
            raise RuntimeError("Database connection is not initialized")

        started = time.perf_counter()
        stores = {kind: DimensionDAO(conn, kind) for kind in DimensionKind}
        entities = EntityCache(stores, sentinel_name=self.settings.sentinel_name)
        reconciler = Reconciler(
            codec=PathCodec(self.archive_root),
            entities=entities,
            tracks=TrackDAO(conn),
            tag_reader=self.tag_reader,
        )

        logger.info("Loading catalog snapshot")
        loaded = reconciler.load_snapshot()
        logger.info("%d tracks in catalog", loaded)

        logger.info("Scanning %s", self.archive_root / subdirectory)
        stats = reconciler.run(self.scanner.walk(self.archive_root, subdirectory))
        stats.new_artists = entities.created(DimensionKind.ARTIST)
        stats.new_albums = entities.created(DimensionKind.ALBUM)
        stats.new_genres = entities.created(DimensionKind.GENRE)

        logger.info("Recalculating aggregates")
        _ = AggregateRecalculator(self.db_manager, stores).recalculate()

        logger.debug("Run finished in %.2fs", time.perf_counter() - started)
        return stats


__all__ = ["CatalogSynchronizer"]
