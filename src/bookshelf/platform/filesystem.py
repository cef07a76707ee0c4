"""Filesystem helpers used by the directory aggregator and tree walker."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from bookshelf.shared.errors import DirectoryListingError


class EntryKind(StrEnum):
    """What a directory entry is, judged without following symlinks."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """One immediate child of a listed directory."""

    path: Path
    kind: EntryKind
    error: str | None = None


def _classify(entry: os.DirEntry[str]) -> tuple[EntryKind, str | None]:
    try:
        if entry.is_symlink():
            return EntryKind.SYMLINK, None
        if entry.is_file(follow_symlinks=False):
            return EntryKind.FILE, None
        if entry.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY, None
        return EntryKind.OTHER, None
    except OSError as exc:
        return EntryKind.UNKNOWN, exc.strerror or str(exc)


class LocalFilesystem:
    """List directories on the local disk."""

    def list_entries(self, directory: Path) -> list[DirectoryEntry]:
        """Return the immediate entries of ``directory`` sorted by name.

        Raises:
            DirectoryListingError: If the directory itself cannot be opened.
        """
        try:
            with os.scandir(directory) as it:
                raw_entries = list(it)
        except OSError as exc:
            raise DirectoryListingError(directory, exc) from exc

        entries: list[DirectoryEntry] = []
        for raw in sorted(raw_entries, key=lambda e: e.name):
            kind, error = _classify(raw)
            entries.append(DirectoryEntry(path=directory / raw.name, kind=kind, error=error))
        return entries


__all__ = ["DirectoryEntry", "EntryKind", "LocalFilesystem"]
