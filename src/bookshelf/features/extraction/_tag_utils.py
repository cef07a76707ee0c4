"""Tag utility helpers.

Where: src/bookshelf/features/extraction/_tag_utils.py
What: Provide pure helper routines for parsing raw tag values.
Why: Keep format extractors free of string-munging details.
"""

from __future__ import annotations

__all__ = [
    "safe_get_first",
    "dedupe_names",
    "parse_int",
    "parse_slash_separated",
    "parse_tuple_numbers",
    "parse_year",
]


def safe_get_first(data: list[str] | None, default: str = "") -> str:
    """Safely get the first element from a list or return the default."""
    return data[0] if data else default


def dedupe_names(values: list[str]) -> list[str]:
    """Strip names, drop blanks and repeats while keeping first-seen order."""
    seen: dict[str, None] = {}
    for value in values:
        name = value.strip()
        if name:
            seen.setdefault(name, None)
    return list(seen)


def parse_int(value: str | None) -> int | None:
    """Parse a non-negative integer, tolerating surrounding whitespace."""
    if not value:
        return None
    stripped = value.strip()
    return int(stripped) if stripped.isdigit() else None


def parse_slash_separated(value: str) -> tuple[int | None, int | None]:
    """Parse a string in 'number/total' format.

    Returns a tuple (number, total); either side is None when not numeric.
    """
    parts: list[str] = value.split(sep="/") if value else []
    num = parse_int(parts[0]) if parts else None
    total = parse_int(parts[1]) if len(parts) > 1 else None
    return num, total


def parse_tuple_numbers(data: list[tuple[int, int]] | None) -> tuple[int | None, int | None]:
    """Parse MP4 number pairs, treating zeros as absent."""
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
