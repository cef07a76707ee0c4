# Where: bookshelf.features.books.__init__
# What: Expose the book domain records and reducer.
# Why: Use cases live in ``bookshelf.features.books.usecases`` to keep imports acyclic.

from .domain import (
    Book,
    BookConflictError,
    BookResult,
    DiscCountConflictError,
    TitleConflictError,
    Track,
    YearConflictError,
    merge,
    merge_all,
)

__all__ = [
    "Book",
    "BookConflictError",
    "BookResult",
    "DiscCountConflictError",
    "TitleConflictError",
    "Track",
    "YearConflictError",
    "merge",
    "merge_all",
]
