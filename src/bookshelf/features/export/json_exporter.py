"""
Summary: Render walk results as a JSON document.
Why: Give downstream tools a stable, sorted representation of books and conflicts.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any, TextIO

from bookshelf.features.books.domain.models import Book, BookConflictError, Track
from bookshelf.features.books.usecases.processing_types import DirectoryResult


def track_to_dict(track: Track) -> dict[str, Any]:
    return {
        "title": track.title,
        "narrators": sorted(track.narrators),
        "track": track.track_number,
        "disc": track.disc_number,
    }


def book_to_dict(book: Book) -> dict[str, Any]:
    """Convert a book into JSON-compatible primitives; sets become sorted lists."""
    return {
        "title": book.title,
        "authors": sorted(book.authors),
        "narrators": sorted(book.narrators),
        "tracks": [track_to_dict(track) for track in book.tracks],
        "total_tracks": book.total_tracks,
        "discs": book.discs,
        "year": book.year,
    }


def conflict_to_dict(conflict: BookConflictError) -> dict[str, Any]:
    return {
        "kind": type(conflict).__name__,
        "message": str(conflict),
        "left": conflict.left,
        "right": conflict.right,
    }


def result_to_dict(result: DirectoryResult) -> dict[str, Any]:
    """Convert one directory result; conflicts render under ``error``."""
    payload: dict[str, Any] = {"directory": str(result.directory)}
    if result.book is not None:
        payload["book"] = book_to_dict(result.book)
    elif result.conflict is not None:
        payload["error"] = conflict_to_dict(result.conflict)
    return payload


def export_json(
    results: Iterable[DirectoryResult],
    stream: TextIO,
    *,
    indent: int | None = 2,
) -> tuple[int, int]:
    """Write ``{"books": [...], "conflicts": [...]}`` to ``stream``.

    Returns:
        The number of books and conflicts written.
    """
    books: list[dict[str, Any]] = []
    conflicts: list[dict[str, Any]] = []
    for result in results:
        (books if result.success else conflicts).append(result_to_dict(result))

    json.dump({"books": books, "conflicts": conflicts}, stream, indent=indent, ensure_ascii=False)
    _ = stream.write("\n")
    return len(books), len(conflicts)


__all__ = ["book_to_dict", "conflict_to_dict", "export_json", "result_to_dict", "track_to_dict"]
