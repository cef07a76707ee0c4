"""
Summary: Immutable Track and Book records plus the metadata conflict errors.
Why: Give the reducer plain values to combine and typed failures to return.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import TypeAlias

from bookshelf.shared.errors import BookshelfError, MissingTagError
from bookshelf.shared.track_metadata import TrackMetadata


@dataclass(frozen=True, slots=True)
class Track:
    """One audio segment of a book."""

    title: str
    narrators: frozenset[str]
    track_number: int
    disc_number: int | None = None


@dataclass(frozen=True, slots=True)
class Book:
    """All tracks believed to belong to one audiobook.

    A single-file fragment is a Book with one track and ``total_tracks == 1``.
    """

    title: str
    authors: frozenset[str]
    narrators: frozenset[str]
    tracks: tuple[Track, ...]
    total_tracks: int
    discs: int | None = None
    year: int | None = None

    @classmethod
    def from_metadata(cls, metadata: TrackMetadata, file_path: Path) -> "Book":
        """Lift one file's tags into a Book-of-one.

        A missing album artist becomes the empty-string author.

        Raises:
            MissingTagError: If title, artist, track number or album is absent.
        """
        if not metadata.title:
            raise MissingTagError(file_path, "title")
        if not metadata.artists:
            raise MissingTagError(file_path, "artist")
        if metadata.track_number is None:
            raise MissingTagError(file_path, "track number")
        if not metadata.album:
            raise MissingTagError(file_path, "album title")

        narrators = frozenset(metadata.artists)
        track = Track(
            title=metadata.title,
            narrators=narrators,
            track_number=metadata.track_number,
            disc_number=metadata.disc_number,
        )
        return cls(
            title=metadata.album,
            authors=frozenset({metadata.album_artist or ""}),
            narrators=narrators,
            tracks=(track,),
            total_tracks=1,
            discs=metadata.disc_total,
            year=metadata.year,
        )

    def sorted_tracks(self) -> "Book":
        """Return a copy with tracks stable-sorted by track number."""
        return replace(self, tracks=tuple(sorted(self.tracks, key=lambda t: t.track_number)))


class BookConflictError(BookshelfError):
    """Fragments of one directory disagree on a field that must match."""

    field_name: str = "field"

    def __init__(self, left: object, right: object) -> None:
        super().__init__(f"Different {self.field_name} given: {left!r} and {right!r}")
        self.left: object = left
        self.right: object = right

    def __eq__(self, other: object) -> bool:
        return (
            type(other) is type(self)
            and isinstance(other, BookConflictError)
            and (self.left, self.right) == (other.left, other.right)
        )

    def __hash__(self) -> int:
        return hash((type(self), repr(self.left), repr(self.right)))


class TitleConflictError(BookConflictError):
    """More than one book title within one directory."""

    field_name = "title"


class DiscCountConflictError(BookConflictError):
    """Different declared disc totals within one directory."""

    field_name = "disc count"


class YearConflictError(BookConflictError):
    """Different publication years within one directory."""

    field_name = "year"


BookResult: TypeAlias = Book | BookConflictError


__all__ = [
    "Book",
    "BookConflictError",
    "BookResult",
    "DiscCountConflictError",
    "TitleConflictError",
    "Track",
    "YearConflictError",
]
