"""Tag utility helpers.

Where: src/musicat/features/metadata/usecases/extraction/_tag_utils.py
What: Provide pure helper routines for parsing and safe metadata tag access.
Why: Keep format extractors focused on which keys to read, not how to parse them.
"""

from __future__ import annotations

__all__ = [
    "safe_get_first",
    "parse_slash_separated",
    "parse_tuple_numbers",
    "parse_year",
    "seconds_to_ms",
    "bps_to_kbps",
]


def safe_get_first(data: list[str] | None, default: str = "") -> str:
    """Safely get the first element from a list or return the default."""
    return data[0] if data else default


def parse_slash_separated(value: str) -> tuple[int | None, int | None]:
    """Parse a string in 'number/total' format.

    Returns a tuple (number, total) or (None, None) if conversion fails.
    """
    parts: list[str] = value.strip().split(sep="/") if value else []
    num: int | None = int(parts[0]) if parts and parts[0].strip().isdigit() else None
    total: int | None = int(parts[1]) if len(parts) > 1 and parts[1].strip().isdigit() else None
    return num, total


def parse_tuple_numbers(data: list[tuple[int, int]] | None) -> tuple[int | None, int | None]:
    """Parse a list of numeric tuples and return the first tuple with zeros converted to None."""
    if data:
        first: tuple[int, int] = data[0]
        num: int | None = first[0] if first[0] != 0 else None
        total: int | None = first[1] if first[1] != 0 else None
        return num, total
    return None, None


def parse_year(date_str: str) -> int | None:
    """Parse a year from a string (expects the first 4 characters to be digits)."""
    date_str = date_str.strip() if date_str else ""
    return int(date_str[:4]) if len(date_str) >= 4 and date_str[:4].isdigit() else None


def seconds_to_ms(length: float | None) -> int | None:
    """Convert a stream length in seconds to whole milliseconds."""
    if not length or length < 0:
        return None
    return int(round(length * 1000))


def bps_to_kbps(bitrate: int | None) -> int | None:
    """Convert bits per second to kbit/s, rounding to the nearest unit."""
    if not bitrate or bitrate < 0:
        return None
    return int(round(bitrate / 1000))
