"""Where: src/musicat/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Hand validated values to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with existing catalogs.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

from dataclasses import dataclass

from musicat.config.config import (
    HIDDEN_PREFIX_DEFAULT,
    MEDIA_EXTENSIONS_DEFAULT,
    SENTINEL_NAME_DEFAULT,
    Config,
)


@dataclass(frozen=True, slots=True)
class CatalogSettings:
    """Validated values consumed by the scanner and entity cache."""

    media_extensions: frozenset[str] = frozenset(MEDIA_EXTENSIONS_DEFAULT)
    sentinel_name: str = SENTINEL_NAME_DEFAULT
    hidden_prefix: str = HIDDEN_PREFIX_DEFAULT

    @classmethod
    def from_config(cls, config: Config) -> "CatalogSettings":
        extensions = frozenset(config.media_extensions) or frozenset(MEDIA_EXTENSIONS_DEFAULT)
        sentinel = config.sentinel_name.strip() or SENTINEL_NAME_DEFAULT
        # An empty prefix would match every directory.
        hidden = config.hidden_prefix or HIDDEN_PREFIX_DEFAULT
        return cls(media_extensions=extensions, sentinel_name=sentinel, hidden_prefix=hidden)


__all__ = ["CatalogSettings"]
