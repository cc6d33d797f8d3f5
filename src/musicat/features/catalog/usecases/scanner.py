"""Summary: Walk an archive subtree and yield media files, pruning hidden directories.
Why: The reconciler consumes one lazy pass over candidate files per run.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from musicat.config.config import HIDDEN_PREFIX_DEFAULT, MEDIA_EXTENSIONS_DEFAULT
from musicat.platform.logging import logger


class Scanner:
    """Depth-first walk over ``root / subdirectory``."""

    def __init__(
        self,
        media_extensions: Iterable[str] = MEDIA_EXTENSIONS_DEFAULT,
        hidden_prefix: str = HIDDEN_PREFIX_DEFAULT,
    ) -> None:
        self.media_extensions = frozenset(ext.lower() for ext in media_extensions)
        self.hidden_prefix = hidden_prefix

    def is_media_file(self, path: Path | str) -> bool:
        """True when the suffix matches a configured media extension, ignoring case."""
        return Path(path).suffix.lower() in self.media_extensions

    def is_hidden_directory(self, name: str) -> bool:
        return name.startswith(self.hidden_prefix)

    def walk(self, root: Path | str, subdirectory: Path | str = ".") -> Iterator[Path]:
        """Return a single-use iterator of media files below ``root / subdirectory``.

        Hidden directories beneath the start directory are never entered.

        Raises:
            NotADirectoryError: If the start directory does not exist.
        """
        start = Path(os.path.normpath(Path(root) / subdirectory))
        if not start.is_dir():
            raise NotADirectoryError(f"Not a directory: {start}")
        return self._iter_files(start)

    def _iter_files(self, start: Path) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(start, onerror=self._log_walk_error):
            # Pruning in place stops os.walk from descending.
            dirnames[:] = sorted(name for name in dirnames if not self.is_hidden_directory(name))
            for filename in sorted(filenames):
                if self.is_media_file(filename):
                    yield Path(dirpath) / filename

    @staticmethod
    def _log_walk_error(error: OSError) -> None:
        logger.warning("Cannot read directory %s: %s", error.filename, error.strerror or error)


__all__ = ["Scanner"]
