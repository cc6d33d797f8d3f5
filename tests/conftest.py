"""Shared pytest fixtures for catalog tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from catalog_fakes import FakeTagReader
from musicat.platform.db.db_manager import DatabaseManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point config and data locations at a throwaway directory."""

    import musicat.config.config as config_module

    home = tmp_path_factory.mktemp("musicat_home")
    monkeypatch.setenv("MUSICAT_CONFIG", str(home / "config.toml"))
    monkeypatch.setenv("MUSICAT_DATA_DIR", str(home / "data"))
    config_module.Config.reset()
    try:
        yield home.resolve()
    finally:
        config_module.Config.reset()


@pytest.fixture
def db_manager() -> Iterator[DatabaseManager]:
    """Create a database manager with in-memory database.

    Yields:
        DatabaseManager: Connected manager with a fresh catalog schema.
    """
    manager = DatabaseManager(":memory:")
    manager.connect()
    yield manager
    manager.close()


@pytest.fixture
def archive_root(tmp_path: Path) -> Path:
    root = tmp_path / "archive"
    root.mkdir()
    return root


@pytest.fixture
def tag_reader() -> FakeTagReader:
    return FakeTagReader()
