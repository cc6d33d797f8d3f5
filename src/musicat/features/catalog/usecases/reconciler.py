"""Summary: Decide create, update, or no-op for each scanned file and apply it.
Why: Keep the catalog's track rows consistent with file modification times.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from enum import StrEnum
from pathlib import Path

from musicat.features.catalog.domain.errors import InvalidPathError
from musicat.features.catalog.domain.models import DimensionKind, SyncStats, TrackRecord
from musicat.features.metadata.domain.track_tags import TrackTags
from musicat.platform.logging import logger

from .entity_cache import EntityCache
from .path_codec import PathCodec
from .ports import TagReaderPort, TrackStorePort


class ReconcileAction(StrEnum):
    """Outcome of reconciling one file."""

    CREATED = "create"
    UPDATED = "update"
    UNCHANGED = "noop"
    SKIPPED = "skip"


def _utc_now() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


class Reconciler:
    """Applies one file at a time against a snapshot of the tracks table.

    Each write commits on its own; an interrupted run leaves processed files
    stored and the rest untouched.
    """

    def __init__(
        self,
        codec: PathCodec,
        entities: EntityCache,
        tracks: TrackStorePort,
        tag_reader: TagReaderPort,
        stats: SyncStats | None = None,
        clock: Callable[[], str] = _utc_now,
    ) -> None:
        self.codec = codec
        self.entities = entities
        self.tracks = tracks
        self.tag_reader = tag_reader
        self.stats = stats if stats is not None else SyncStats()
        self._clock = clock
        self._snapshot: dict[Path, TrackRecord] = {}

    @property
    def snapshot(self) -> dict[Path, TrackRecord]:
        return self._snapshot

    def load_snapshot(self) -> int:
        """Index every stored track by its decoded absolute path.

        Returns:
            Number of tracks in the snapshot.
        """
        self._snapshot = {self.codec.to_readable(record.location): record for record in self.tracks.fetch_all()}
        return len(self._snapshot)

    def run(self, paths: Iterable[Path]) -> SyncStats:
        for path in paths:
            _ = self.reconcile(path)
        return self.stats

    def reconcile(self, path: Path) -> ReconcileAction:
        """Bring the catalog row for ``path`` up to date.

        Tag-reading and store errors propagate.
        """
        existing = self._snapshot.get(path)

        if existing is None:
            try:
                location = self.codec.to_storable(path)
            except InvalidPathError as exc:
                logger.warning("Skipping %s", exc)
                self.stats.skipped_paths.append(str(path))
                return ReconcileAction.SKIPPED
            return self._create(path, location)

        stat = os.stat(path)
        if existing.modified_at == int(stat.st_mtime):
            self.stats.existing_tracks += 1
            self._log_decision(ReconcileAction.UNCHANGED, path, "")
            return ReconcileAction.UNCHANGED

        return self._update(path, existing, stat)

    def _create(self, path: Path, location: str) -> ReconcileAction:
        stat = os.stat(path)
        tags = self.tag_reader.read(path)
        record = self._build_record(path, tags, stat, location)
        record.date = self._clock()
        record.id = self.tracks.insert(record)
        self._snapshot[path] = record

        self.stats.new_tracks += 1
        self.stats.existing_tracks += 1
        self._log_decision(ReconcileAction.CREATED, path, self._describe(record))
        return ReconcileAction.CREATED

    def _update(self, path: Path, existing: TrackRecord, stat: os.stat_result) -> ReconcileAction:
        tags = self.tag_reader.read(path)
        record = self._build_record(path, tags, stat, existing.location)
        record.id = existing.id
        record.date = existing.date
        self.tracks.update(record)
        self._snapshot[path] = record

        self.stats.updated_tracks += 1
        self.stats.existing_tracks += 1
        self._log_decision(
            ReconcileAction.UPDATED,
            path,
            f"mtime {existing.modified_at} -> {record.modified_at}; {self._describe(record)}",
        )
        return ReconcileAction.UPDATED

    def _build_record(self, path: Path, tags: TrackTags, stat: os.stat_result, location: str) -> TrackRecord:
        return TrackRecord(
            artist_id=self.entities.resolve(DimensionKind.ARTIST, tags.artist),
            album_id=self.entities.resolve(DimensionKind.ALBUM, tags.album),
            genre_id=self.entities.resolve(DimensionKind.GENRE, tags.genre),
            name=tags.title if tags.title and tags.title.strip() else path.stem,
            size=stat.st_size,
            location=location,
            modified_at=int(stat.st_mtime),
            duration=tags.duration_ms,
            track_number=tags.track_number,
            year=tags.year,
            bit_rate=tags.bit_rate,
            sample_rate=tags.sample_rate,
            kind=tags.kind,
            comment=tags.comment,
        )

    def _describe(self, record: TrackRecord) -> str:
        artist = self.entities.name_for(DimensionKind.ARTIST, record.artist_id)
        album = self.entities.name_for(DimensionKind.ALBUM, record.album_id)
        return f"{artist} / {album} / {record.name}"

    def _log_decision(self, action: ReconcileAction, path: Path, detail: str) -> None:
        logger.debug(
            "%s",
            detail,
            extra={
                "catalog_action": action.value,
                "source_path": str(path),
                "archive_root": str(self.codec.archive_root),
            },
        )


__all__ = ["ReconcileAction", "Reconciler"]
