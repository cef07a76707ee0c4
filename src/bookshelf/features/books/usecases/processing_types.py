"""src/bookshelf/features/books/usecases/processing_types.py
What: Shared enums and dataclasses for the aggregation flow.
Why: Keep the aggregator and walker lean by centralising type definitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import cast

from bookshelf.features.books.domain.models import Book, BookConflictError, BookResult


class AggregationEvent(StrEnum):
    """Structured event identifiers for aggregation logs."""

    WALK_START = "aggregation.walk.start"
    WALK_COMPLETE = "aggregation.walk.complete"
    DIRECTORY_BOOK = "aggregation.directory.book"
    DIRECTORY_CONFLICT = "aggregation.directory.conflict"
    DIRECTORY_NO_BOOK = "aggregation.directory.no_book"
    DIRECTORY_UNREADABLE = "aggregation.directory.unreadable"
    FILE_SKIP = "aggregation.file.skip"
    ENTRY_SKIP = "aggregation.entry.skip"


@dataclass(frozen=True, slots=True)
class DirectoryResult:
    """Outcome for one book directory in a walk."""

    directory: Path
    book: Book | None = None
    conflict: BookConflictError | None = None

    def __post_init__(self) -> None:
        if (self.book is None) == (self.conflict is None):
            raise ValueError(
                f"DirectoryResult for {self.directory} needs exactly one of book or conflict"
            )

    @classmethod
    def from_result(cls, directory: Path, result: BookResult) -> "DirectoryResult":
        if isinstance(result, BookConflictError):
            return cls(directory=directory, conflict=result)
        return cls(directory=directory, book=result)

    @property
    def success(self) -> bool:
        return self.book is not None

    @property
    def result(self) -> BookResult:
        """The Book or conflict carried by this result."""
        if self.book is not None:
            return self.book
        return cast(BookConflictError, self.conflict)


__all__ = ["AggregationEvent", "DirectoryResult"]
