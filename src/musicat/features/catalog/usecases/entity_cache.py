"""Summary: Run-scoped resolve-or-create cache for artist, album and genre rows.
Why: Each distinct name costs at most one store round trip per run and never yields two rows.
"""

from __future__ import annotations

from collections.abc import Mapping

from musicat.config.config import SENTINEL_NAME_DEFAULT
from musicat.features.catalog.domain.errors import AmbiguousEntityError, MissingSentinelError
from musicat.features.catalog.domain.models import DimensionKind, DimensionRow
from musicat.platform.logging import logger

from .ports import DimensionStorePort


class EntityCache:
    """Memoizes dimension ids by name for the lifetime of one run.

    The read-then-insert sequence is not atomic; a second writer on the same
    catalog can produce duplicate names, which surface later as
    ``AmbiguousEntityError``.
    """

    def __init__(
        self,
        stores: Mapping[DimensionKind, DimensionStorePort],
        sentinel_name: str = SENTINEL_NAME_DEFAULT,
    ) -> None:
        missing = [kind.value for kind in DimensionKind if kind not in stores]
        if missing:
            raise ValueError(f"No store configured for: {', '.join(missing)}")
        self._stores = dict(stores)
        self.sentinel_name = sentinel_name
        self._by_name: dict[DimensionKind, dict[str, int]] = {kind: {} for kind in DimensionKind}
        self._by_id: dict[DimensionKind, dict[int, str]] = {kind: {} for kind in DimensionKind}
        self._created: dict[DimensionKind, int] = {kind: 0 for kind in DimensionKind}

    def resolve(self, kind: DimensionKind, name: str | None) -> int:
        """Return the id of the ``kind`` row named ``name``, creating it if needed.

        Blank names resolve to the sentinel row, which is never created here.

        Raises:
            MissingSentinelError: The sentinel row does not exist.
            AmbiguousEntityError: Several rows share the name.
        """
        lookup_name = name if name is not None and name.strip() else self.sentinel_name
        is_sentinel = lookup_name == self.sentinel_name

        cached = self._by_name[kind].get(lookup_name)
        if cached is not None:
            return cached

        store = self._stores[kind]
        rows = store.find_by_name(lookup_name)

        if not rows:
            if is_sentinel:
                raise MissingSentinelError(kind, lookup_name)
            store.insert(lookup_name)
            rows = store.find_by_name(lookup_name)
            if not rows:
                raise RuntimeError(f"Inserted {kind.value} {lookup_name!r} could not be read back")
            self._created[kind] += 1
            logger.debug(
                "New %s: %s",
                kind.value,
                lookup_name,
                extra={"catalog_action": "dimension", "dimension_kind": kind.value},
            )

        if len(rows) > 1:
            logger.error("Found %d %s rows named %r", len(rows), kind.value, lookup_name)
            raise AmbiguousEntityError(kind, lookup_name, len(rows))

        return self._remember(kind, rows[0])

    def name_for(self, kind: DimensionKind, entity_id: int) -> str | None:
        """Return the name behind an id resolved earlier in this run."""
        return self._by_id[kind].get(entity_id)

    def created(self, kind: DimensionKind) -> int:
        """Number of ``kind`` rows inserted during this run."""
        return self._created[kind]

    def _remember(self, kind: DimensionKind, row: DimensionRow) -> int:
        self._by_name[kind][row.name] = row.id
        self._by_id[kind][row.id] = row.name
        return row.id


__all__ = ["EntityCache"]
