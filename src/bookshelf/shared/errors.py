"""
Summary: Exception hierarchy shared across bookshelf features.
Why: Let callers catch one family per failure kind without importing adapters.
"""

from __future__ import annotations

from pathlib import Path


class BookshelfError(Exception):
    """Base class for all bookshelf errors."""


class ConfigError(BookshelfError):
    """Raised when the configuration file holds invalid values."""


class ExtractionError(BookshelfError):
    """Raised when a file's tags cannot be turned into a fragment."""

    def __init__(self, file_path: Path, reason: str) -> None:
        super().__init__(f"{reason}: {file_path}")
        self.file_path: Path = file_path
        self.reason: str = reason


class UnsupportedFormatError(ExtractionError):
    """Raised for files whose extension has no extractor."""

    def __init__(self, file_path: Path) -> None:
        super().__init__(file_path, f"Unsupported file format: {file_path.suffix.lower() or '<none>'}")


class MissingTagError(ExtractionError):
    """Raised when a required tag is absent from a file."""

    def __init__(self, file_path: Path, tag: str) -> None:
        super().__init__(file_path, f"No {tag} defined in file")
        self.tag: str = tag


class DirectoryListingError(BookshelfError, OSError):
    """Raised when a directory's entries cannot be enumerated."""

    def __init__(self, directory: Path, cause: OSError) -> None:
        message = cause.strerror or str(cause) or type(cause).__name__
        super().__init__(f"Cannot list directory {directory}: {message}")
        self.directory: Path = directory
        self.cause: OSError = cause


__all__ = [
    "BookshelfError",
    "ConfigError",
    "ExtractionError",
    "UnsupportedFormatError",
    "MissingTagError",
    "DirectoryListingError",
]
