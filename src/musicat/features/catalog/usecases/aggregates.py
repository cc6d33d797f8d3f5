"""Summary: Recompute denormalized track counts for every dimension table.
Why: All three counts must change together or not at all.
"""

from __future__ import annotations

from collections.abc import Mapping

from musicat.features.catalog.domain.models import DimensionKind
from musicat.platform.logging import logger

from .ports import DatabaseManagerPort, DimensionStorePort


class AggregateRecalculator:
    """Rewrites ``track_cnt`` for artists, albums and genres in one transaction."""

    def __init__(
        self,
        db_manager: DatabaseManagerPort,
        stores: Mapping[DimensionKind, DimensionStorePort],
    ) -> None:
        self.db_manager = db_manager
        self.stores = stores

    def recalculate(self) -> dict[DimensionKind, int]:
        """Recompute counts across the whole catalog.

        Returns:
            Rows rewritten per dimension kind.

        Raises:
            sqlite3.Error: Any failure; nothing is written in that case.
        """
        written: dict[DimensionKind, int] = {}
        self.db_manager.begin_transaction()
        try:
            for kind in DimensionKind:
                written[kind] = self.stores[kind].recompute_track_counts()
            self.db_manager.commit_transaction()
        except Exception:
            logger.error("Aggregate recalculation failed; rolling back all track counts")
            self.db_manager.rollback_transaction()
            raise

        logger.debug(
            "Recalculated track counts: %s",
            ", ".join(f"{count} {kind.table}" for kind, count in written.items()),
        )
        return written


__all__ = ["AggregateRecalculator"]
