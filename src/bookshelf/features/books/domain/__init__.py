"""Book domain: records and the fragment reducer."""

from .models import (
    Book,
    BookConflictError,
    BookResult,
    DiscCountConflictError,
    TitleConflictError,
    Track,
    YearConflictError,
)
from .reducer import merge, merge_all

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
