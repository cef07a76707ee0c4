"""Summary: Ports defining the aggregation use case dependencies.
Why: Decouple aggregation from mutagen and the disk so tests can stub both."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from bookshelf.features.books.domain.models import Book
from bookshelf.platform.filesystem import DirectoryEntry


@runtime_checkable
class TagExtractorPort(Protocol):
    """Port turning one file into a single-file fragment."""

    def extract(self, file_path: Path) -> Book:
        """Return the fragment or raise ``ExtractionError``."""
        ...


@runtime_checkable
class FilesystemPort(Protocol):
    """Port listing the immediate entries of a directory."""

    def list_entries(self, directory: Path) -> list[DirectoryEntry]:
        """Return entries or raise ``DirectoryListingError``."""
        ...


__all__ = ["FilesystemPort", "TagExtractorPort"]
