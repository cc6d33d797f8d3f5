"""Rich console handler used by the shared logger.

Where: platform/logging/handlers.py
What: Render log records with a level marker and archive-relative paths.
Why: Keep per-track decision lines short when scanning deep trees.
"""

from __future__ import annotations

import logging
from typing import Any, override

from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

_ELLIPSIS = "…"
_MAX_PATH_SEGMENTS = 4

_ACTION_STYLES: dict[str, tuple[str, Style]] = {
    "create": ("+ ", Style(color="green", bold=True)),
    "update": ("~ ", Style(color="yellow", bold=True)),
    "noop": ("= ", Style(color="bright_black")),
    "dimension": ("* ", Style(color="cyan", bold=True)),
}


class CatalogRichHandler(RichHandler):
    """Rich handler that shortens paths and tags catalog decisions."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> Text:
        """Render ``message`` with a marker derived from the record.

        Records carrying a ``catalog_action`` extra get an action marker and,
        when ``source_path`` is present, the path relative to
        ``archive_root``.
        """
        text = Text()
        action = getattr(record, "catalog_action", None)

        if isinstance(action, str) and action in _ACTION_STYLES:
            marker, style = _ACTION_STYLES[action]
            text.append(marker, style=style)
            source_path = getattr(record, "source_path", None)
            if source_path is not None:
                root = getattr(record, "archive_root", None)
                text.append(self.shorten_path(str(source_path), None if root is None else str(root)))
                if message:
                    text.append("  ")
            text.append(message)
            return text

        if record.levelno >= logging.ERROR:
            text.append("x ", style=Style(color="red", bold=True))
            text.append(message, style=Style(color="red"))
        elif record.levelno >= logging.WARNING:
            text.append("! ", style=Style(color="yellow", bold=True))
            text.append(message, style=Style(color="yellow"))
        else:
            text.append(message)
        return text

    @staticmethod
    def shorten_path(path: str, base: str | None = None) -> str:
        """Return ``path`` relative to ``base`` or truncated to its tail."""

        separator = "\\" if "\\" in path and "/" not in path else "/"
        if base:
            normalized_base = base.rstrip("\\/")
            if path.startswith(normalized_base + separator):
                return path[len(normalized_base) + 1 :]

        segments = [segment for segment in path.split(separator) if segment]
        if len(segments) <= _MAX_PATH_SEGMENTS:
            return path
        return _ELLIPSIS + separator + separator.join(segments[-_MAX_PATH_SEGMENTS:])


__all__ = ["CatalogRichHandler"]
