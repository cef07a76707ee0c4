"""src/bookshelf/features/books/usecases/tree_walker.py
What: Lazily walk a directory tree and yield one result per book directory.
Why: Keep memory bounded by tree depth while isolating failures per directory.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from bookshelf.features.extraction.tag_extractor import TagExtractor
from bookshelf.platform.filesystem import EntryKind, LocalFilesystem
from bookshelf.platform.logging import logger
from bookshelf.shared.errors import DirectoryListingError

from .diagnostics import AggregationDiagnostics
from .directory_aggregator import aggregate_entries
from .ports import FilesystemPort, TagExtractorPort
from .processing_types import AggregationEvent, DirectoryResult


def walk(
    root: Path,
    *,
    extractor: TagExtractorPort | None = None,
    filesystem: FilesystemPort | None = None,
    diagnostics: AggregationDiagnostics | None = None,
) -> Iterator[DirectoryResult]:
    """Yield the book or conflict of every book directory under ``root``.

    Directories are visited depth-first in pre-order, children in name order.
    Directories without parsable files yield nothing but are still descended
    into. Symlinked directories are not followed.

    Raises:
        DirectoryListingError: On the first ``next()`` if ``root`` itself
            cannot be listed. Failures below the root are logged, recorded in
            ``diagnostics`` and skipped.
    """
    extractor = extractor or TagExtractor()
    fs = filesystem or LocalFilesystem()
    collector = diagnostics if diagnostics is not None else AggregationDiagnostics()

    logger.debug(
        "Walk started [root=%s]",
        root,
        extra={"aggregation_event": AggregationEvent.WALK_START.value, "directory": str(root)},
    )

    stack: list[Path] = [root]
    while stack:
        directory = stack.pop()
        try:
            entries = fs.list_entries(directory)
        except DirectoryListingError as exc:
            if directory == root:
                raise
            reason = str(exc.cause.strerror or exc.cause)
            collector.record_skipped_directory(directory, reason)
            logger.warning(
                "Skipping unreadable directory [path=%s, error=%s]",
                directory,
                reason,
                extra={
                    "aggregation_event": AggregationEvent.DIRECTORY_UNREADABLE.value,
                    "directory": str(directory),
                    "root": str(root),
                    "error_message": reason,
                },
            )
            continue

        result = aggregate_entries(
            directory,
            entries,
            extractor=extractor,
            diagnostics=collector,
            root=root,
        )

        subdirectories = [entry.path for entry in entries if entry.kind is EntryKind.DIRECTORY]
        stack.extend(reversed(subdirectories))

        if result is None:
            continue
        directory_result = DirectoryResult.from_result(directory, result)
        if directory_result.success:
            collector.record_book()
        else:
            collector.record_conflict()
        yield directory_result

    logger.debug(
        "Walk complete [root=%s]",
        root,
        extra={
            "aggregation_event": AggregationEvent.WALK_COMPLETE.value,
            "directory": str(root),
            **collector.summary_extra(),
        },
    )


__all__ = ["walk"]
