"""Tests for the sync command wiring."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from catalog_fakes import FakeTagReader, write_media
from musicat.config.settings import CatalogSettings
from musicat.features.catalog.domain.errors import MissingSentinelError
from musicat.features.metadata.domain.track_tags import TrackTags
from musicat.platform.db.daos import TrackDAO
from musicat.platform.db.db_manager import DatabaseManager
from musicat.ui.cli.args.options import SyncArgs
from musicat.ui.cli.commands import SyncCommand


def _args(archive_root: Path, db_path: Path, **overrides: object) -> SyncArgs:
    values: dict[str, object] = {
        "archive_root": archive_root,
        "subdirectory": Path("."),
        "verbose": False,
        "db_path": db_path,
        "db_user": None,
        "db_password": None,
        "db_host": None,
        "list_only": False,
        "settings": CatalogSettings(),
    }
    values.update(overrides)
    return SyncArgs(**values)  # type: ignore[arg-type]


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=100, color_system=None), buffer


def test_execute_syncs_into_file_catalog(archive_root: Path, tmp_path: Path) -> None:
    _ = write_media(archive_root / "a.mp3")
    db_path = tmp_path / "db" / "catalog.db"
    console, buffer = _console()
    reader = FakeTagReader({"a.mp3": TrackTags(title="A", artist="X")})

    stats = SyncCommand(_args(archive_root, db_path), console=console, tag_reader=reader).execute()

    assert stats is not None
    assert stats.new_tracks == 1
    assert stats.new_artists == 1
    assert "Catalog summary" in buffer.getvalue()
    with DatabaseManager(db_path) as manager:
        assert manager.conn is not None
        assert TrackDAO(manager.conn).count() == 1


def test_connection_is_released_on_integrity_error(archive_root: Path, tmp_path: Path) -> None:
    _ = write_media(archive_root / "a.mp3")
    settings = CatalogSettings(sentinel_name="Unknown")
    db_path = tmp_path / "catalog.db"
    # Seed the catalog with the default placeholder so "Unknown" is missing.
    with DatabaseManager(db_path):
        pass
    console, _ = _console()
    reader = FakeTagReader({"a.mp3": TrackTags()})
    closed: list[bool] = []
    original_close = DatabaseManager.close

    def _tracking_close(self: DatabaseManager) -> None:
        closed.append(True)
        original_close(self)

    with pytest.MonkeyPatch.context() as monkeypatch:
        monkeypatch.setattr(DatabaseManager, "close", _tracking_close)
        with pytest.raises(MissingSentinelError):
            _ = SyncCommand(_args(archive_root, db_path, settings=settings), console=console, tag_reader=reader).execute()

    assert closed == [True]


def test_list_mode_prints_candidates_without_catalog(archive_root: Path, tmp_path: Path) -> None:
    _ = write_media(archive_root / "Artist" / "a.mp3")
    _ = write_media(archive_root / ".trash" / "b.mp3")
    db_path = tmp_path / "never" / "catalog.db"
    console, buffer = _console()
    reader = FakeTagReader()

    result = SyncCommand(_args(archive_root, db_path, list_only=True), console=console, tag_reader=reader).execute()

    assert result is None
    assert reader.calls == []
    assert not db_path.parent.exists()
    output = buffer.getvalue()
    assert str(Path("Artist") / "a.mp3") in output
    assert "b.mp3" not in output
    assert "1 media files" in output
