"""Tests for configuration path resolution helpers."""

from pathlib import Path

import pytest

from musicat.config.paths import (
    default_config_path,
    default_data_dir,
    default_db_path,
    default_log_dir,
    default_log_file,
    resolve_overridable_path,
)


def test_default_log_paths(portable_repo_root: Path) -> None:
    """Default log locations should live under the repository logs/ folder."""

    expected_dir = portable_repo_root / "logs"
    assert default_log_dir() == expected_dir
    assert default_log_file() == expected_dir / "musicat.log"


def test_env_overrides_win(isolated_config: Path) -> None:
    assert default_config_path() == isolated_config / "config.toml"
    assert default_data_dir() == isolated_config / "data"
    assert default_db_path() == isolated_config / "data" / "musicat.db"


def test_repo_defaults_without_env(portable_repo_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MUSICAT_CONFIG", raising=False)
    monkeypatch.delenv("MUSICAT_DATA_DIR", raising=False)

    assert default_config_path() == portable_repo_root / "config" / "config.toml"
    assert default_data_dir() == portable_repo_root / ".data"


def test_explicit_path_beats_environment(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=tmp_path / "explicit.toml",
        env={"X": str(tmp_path / "env.toml")},
        env_var="X",
        default_factory=lambda: tmp_path / "default.toml",
    )
    assert resolved == (tmp_path / "explicit.toml").resolve()


def test_blank_environment_value_falls_back(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=None,
        env={"X": "   "},
        env_var="X",
        default_factory=lambda: tmp_path / "default.toml",
    )
    assert resolved == (tmp_path / "default.toml").resolve()
