"""src/bookshelf/features/books/usecases/directory_aggregator.py
What: Fold the audio files of exactly one directory into a book record.
Why: Isolate per-directory aggregation so the walker only handles recursion.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from pathlib import Path

from bookshelf.features.books.domain.models import Book, BookConflictError, BookResult
from bookshelf.features.books.domain.reducer import merge_all
from bookshelf.features.extraction.tag_extractor import TagExtractor
from bookshelf.platform.filesystem import DirectoryEntry, EntryKind, LocalFilesystem
from bookshelf.platform.logging import logger
from bookshelf.shared.errors import ExtractionError

from .diagnostics import AggregationDiagnostics
from .ports import FilesystemPort, TagExtractorPort
from .processing_types import AggregationEvent


def aggregate_directory(
    directory: Path,
    *,
    extractor: TagExtractorPort | None = None,
    filesystem: FilesystemPort | None = None,
    diagnostics: AggregationDiagnostics | None = None,
    root: Path | None = None,
) -> BookResult | None:
    """Build the book held by one directory's regular files.

    Args:
        directory: Directory whose immediate files are aggregated.
        extractor: Tag extractor; defaults to the mutagen-backed one.
        filesystem: Directory lister; defaults to the local disk.
        diagnostics: Collector receiving skipped files and entries.
        root: Base path used only to shorten paths in log output.

    Returns:
        The merged Book with tracks sorted by number, the conflict error when
        fragments disagree, or None when no file yielded a fragment.

    Raises:
        DirectoryListingError: If the directory cannot be listed.
    """
    fs = filesystem or LocalFilesystem()
    entries = fs.list_entries(directory)
    return aggregate_entries(
        directory,
        entries,
        extractor=extractor or TagExtractor(),
        diagnostics=diagnostics if diagnostics is not None else AggregationDiagnostics(),
        root=root,
    )


def aggregate_entries(
    directory: Path,
    entries: Sequence[DirectoryEntry],
    *,
    extractor: TagExtractorPort,
    diagnostics: AggregationDiagnostics,
    root: Path | None = None,
) -> BookResult | None:
    """Aggregate an already listed directory; see ``aggregate_directory``."""

    base = root or directory
    fragments = _extract_fragments(entries, extractor, diagnostics, base)
    result = merge_all(fragments)

    if result is None:
        logger.info(
            "No parsable audio files [path=%s]",
            directory,
            extra={
                "aggregation_event": AggregationEvent.DIRECTORY_NO_BOOK.value,
                "directory": str(directory),
                "root": str(base),
            },
        )
        return None

    if isinstance(result, BookConflictError):
        logger.error(
            "Inconsistent metadata in directory [path=%s, error=%s]",
            directory,
            result,
            extra={
                "aggregation_event": AggregationEvent.DIRECTORY_CONFLICT.value,
                "directory": str(directory),
                "root": str(base),
                "error_message": str(result),
            },
        )
        return result

    book: Book = result.sorted_tracks()
    logger.info(
        "Book aggregated [title=%s, tracks=%d, path=%s]",
        book.title,
        book.total_tracks,
        directory,
        extra={
            "aggregation_event": AggregationEvent.DIRECTORY_BOOK.value,
            "directory": str(directory),
            "root": str(base),
            "title": book.title,
            "total_tracks": book.total_tracks,
        },
    )
    return book


def _extract_fragments(
    entries: Sequence[DirectoryEntry],
    extractor: TagExtractorPort,
    diagnostics: AggregationDiagnostics,
    base: Path,
) -> Iterator[Book]:
    for entry in entries:
        if entry.kind is EntryKind.UNKNOWN:
            reason = entry.error or "file type could not be determined"
            diagnostics.record_skipped_entry(entry.path, reason)
            logger.warning(
                "Error while collecting path [path=%s, error=%s]",
                entry.path,
                reason,
                extra={
                    "aggregation_event": AggregationEvent.ENTRY_SKIP.value,
                    "source_path": str(entry.path),
                    "root": str(base),
                    "reason": reason,
                },
            )
            continue
        if entry.kind is not EntryKind.FILE:
            continue

        try:
            fragment = extractor.extract(entry.path)
        except ExtractionError as exc:
            diagnostics.record_skipped_file(entry.path, exc.reason)
            _log_skipped_file(entry.path, exc.reason, base)
            continue
        logger.debug("Parsed fragment from %s", entry.path)
        yield fragment


def _log_skipped_file(path: Path, reason: str, base: Path) -> None:
    logger.warning(
        "Error parsing file [path=%s, error=%s]",
        path,
        reason,
        extra={
            "aggregation_event": AggregationEvent.FILE_SKIP.value,
            "source_path": str(path),
            "root": str(base),
            "reason": reason,
        },
    )


__all__ = ["aggregate_directory", "aggregate_entries"]
