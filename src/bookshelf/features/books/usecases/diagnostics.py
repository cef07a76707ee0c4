"""
Summary: Explicit collector for files, entries, and directories skipped during aggregation.
Why: Let callers inspect what was dropped and why without scraping log output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class SkippedFile:
    """A regular file that produced no fragment."""

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class SkippedEntry:
    """A directory entry whose type could not be determined."""

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class SkippedDirectory:
    """A descendant directory whose listing failed; its subtree was not visited."""

    path: Path
    reason: str


@dataclass(slots=True)
class AggregationDiagnostics:
    """Mutable bookkeeping for one or more aggregation runs."""

    skipped_files: list[SkippedFile] = field(default_factory=list)
    skipped_entries: list[SkippedEntry] = field(default_factory=list)
    skipped_directories: list[SkippedDirectory] = field(default_factory=list)
    books: int = 0
    conflicts: int = 0

    def record_skipped_file(self, path: Path, reason: str) -> None:
        self.skipped_files.append(SkippedFile(path=path, reason=reason))

    def record_skipped_entry(self, path: Path, reason: str) -> None:
        self.skipped_entries.append(SkippedEntry(path=path, reason=reason))

    def record_skipped_directory(self, path: Path, reason: str) -> None:
        self.skipped_directories.append(SkippedDirectory(path=path, reason=reason))

    def record_book(self) -> None:
        self.books += 1

    def record_conflict(self) -> None:
        self.conflicts += 1

    def summary_extra(self) -> dict[str, int]:
        """Return counters suitable for structured logging extras."""

        return {
            "books": self.books,
            "conflicts": self.conflicts,
            "skipped_files": len(self.skipped_files),
            "skipped_entries": len(self.skipped_entries),
            "skipped_directories": len(self.skipped_directories),
        }


__all__ = [
    "AggregationDiagnostics",
    "SkippedDirectory",
    "SkippedEntry",
    "SkippedFile",
]
