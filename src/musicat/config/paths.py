"""Locations of the configuration file, the catalog database and the logs.

Everything defaults to folders next to the checkout so a clone runs
without setup:

- ``<repo_root>/config/config.toml``, or ``$MUSICAT_CONFIG``
- ``<repo_root>/.data/musicat.db``, the data folder overridable with
  ``$MUSICAT_DATA_DIR``
- ``<repo_root>/logs/musicat.log``
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final

_ENV_CONFIG_PATH: Final[str] = "MUSICAT_CONFIG"
_ENV_DATA_DIR: Final[str] = "MUSICAT_DATA_DIR"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")

CONFIG_FILE_NAME: Final[str] = "config.toml"
DB_FILE_NAME: Final[str] = "musicat.db"
LOG_FILE_NAME: Final[str] = "musicat.log"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Pick the first of explicit path, non-blank env value, or default.

    The result is always absolute with ``~`` expanded.
    """
    chosen: Path | str | None = explicit_path
    if chosen is None and env_var:
        raw = (os.environ if env is None else env).get(env_var, "")
        chosen = raw.strip() or None
    if chosen is None:
        chosen = default_factory()
    return Path(chosen).expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the nearest ancestor holding ``pyproject.toml`` or ``.git``.

    Falls back to the working directory for installs outside a checkout.
    """
    origin = (start or Path(__file__).resolve()).parent
    return next(
        (candidate for candidate in (origin, *origin.parents) if any((candidate / m).exists() for m in _ROOT_MARKERS)),
        Path.cwd(),
    )


def default_config_path() -> Path:
    return resolve_overridable_path(
        explicit_path=None,
        env=None,
        env_var=_ENV_CONFIG_PATH,
        default_factory=lambda: _detect_repo_root() / "config" / CONFIG_FILE_NAME,
    )


def default_data_dir() -> Path:
    return resolve_overridable_path(
        explicit_path=None,
        env=None,
        env_var=_ENV_DATA_DIR,
        default_factory=lambda: _detect_repo_root() / ".data",
    )


def default_db_path() -> Path:
    """Catalog used when neither ``--dbname`` nor ``db_path`` is given."""
    return default_data_dir() / DB_FILE_NAME


def default_log_dir() -> Path:
    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    return default_log_dir() / LOG_FILE_NAME


__all__ = [
    "CONFIG_FILE_NAME",
    "DB_FILE_NAME",
    "LOG_FILE_NAME",
    "default_config_path",
    "default_data_dir",
    "default_db_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
