"""
Summary: Pure merge of book fragments with first-failure propagation.
Why: Keep the consistency rules testable without touching the filesystem.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce

from .models import (
    Book,
    BookConflictError,
    BookResult,
    DiscCountConflictError,
    TitleConflictError,
    YearConflictError,
)


def merge(left: BookResult, right: BookResult) -> BookResult:
    """Combine two fragments into one book.

    Title, disc count and year must be equal on both sides; authors and
    narrators are unioned, tracks concatenated and track counts summed.
    A conflict on either input is returned unchanged, left first.

    Returns:
        The merged Book, or the conflict error describing the mismatch.
    """
    if isinstance(left, BookConflictError):
        return left
    if isinstance(right, BookConflictError):
        return right

    if left.title != right.title:
        return TitleConflictError(left.title, right.title)
    if left.discs != right.discs:
        return DiscCountConflictError(left.discs, right.discs)
    if left.year != right.year:
        return YearConflictError(left.year, right.year)

    return Book(
        title=left.title,
        authors=left.authors | right.authors,
        narrators=left.narrators | right.narrators,
        tracks=left.tracks + right.tracks,
        total_tracks=left.total_tracks + right.total_tracks,
        discs=left.discs,
        year=left.year,
    )


def merge_all(results: Iterable[BookResult]) -> BookResult | None:
    """Fold fragments through ``merge``; None when there are none."""
    iterator = iter(results)
    first = next(iterator, None)
    if first is None:
        return None
    return reduce(merge, iterator, first)


__all__ = ["merge", "merge_all"]
