"""Summary: Convert between absolute paths and stored archive-relative locations.
Why: Tracks are keyed by a percent-encoded location that survives moving the archive root.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote, unquote

from musicat.features.catalog.domain.errors import InvalidPathError

# Undecodable filename bytes survive the round trip as %XX escapes.
_ERRORS = "surrogateescape"


def _normalize(path: os.PathLike[str] | str) -> str:
    return os.path.normpath(os.fspath(path))


def to_storable(absolute_path: os.PathLike[str] | str, archive_root: os.PathLike[str] | str) -> str:
    """Return the percent-encoded location of ``absolute_path`` below ``archive_root``.

    Separators between segments are kept literal; everything else outside
    the unreserved set is escaped.

    Raises:
        InvalidPathError: If the path is not strictly beneath the root.
    """
    path = _normalize(absolute_path)
    root = _normalize(archive_root)
    prefix = root if root.endswith(os.sep) else root + os.sep

    if not path.startswith(prefix) or len(path) == len(prefix):
        raise InvalidPathError(absolute_path, archive_root)

    return quote(path[len(prefix) :], safe=os.sep, errors=_ERRORS)


def to_readable(encoded_relative_path: str, archive_root: os.PathLike[str] | str) -> Path:
    """Decode a stored location and join it onto ``archive_root``."""

    return Path(_normalize(archive_root)) / unquote(encoded_relative_path, errors=_ERRORS)


@dataclass(frozen=True, slots=True)
class PathCodec:
    """``to_storable``/``to_readable`` bound to one archive root."""

    archive_root: Path

    def to_storable(self, absolute_path: os.PathLike[str] | str) -> str:
        return to_storable(absolute_path, self.archive_root)

    def to_readable(self, encoded_relative_path: str) -> Path:
        return to_readable(encoded_relative_path, self.archive_root)


__all__ = ["PathCodec", "to_readable", "to_storable"]
