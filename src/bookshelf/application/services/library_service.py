"""Summary: Compose extractor, filesystem, and diagnostics into library scans.
Why: Give callers one object configured from the TOML config."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from bookshelf.config.config import Config
from bookshelf.features.books.usecases import (
    AggregationDiagnostics,
    DirectoryResult,
    FilesystemPort,
    TagExtractorPort,
    walk,
)
from bookshelf.features.export import export_json
from bookshelf.features.extraction import TagExtractor
from bookshelf.platform.filesystem import LocalFilesystem
from bookshelf.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger


class LibraryService:
    """Scan audiobook libraries and export the resulting records."""

    config: Config
    extractor: TagExtractorPort
    filesystem: FilesystemPort

    def __init__(
        self,
        config: Config | None = None,
        *,
        extractor: TagExtractorPort | None = None,
        filesystem: FilesystemPort | None = None,
        configure_logging: bool = False,
    ) -> None:
        self.config = config or Config.load()
        self.extractor = extractor or TagExtractor(self.config.supported_extensions)
        self.filesystem = filesystem or LocalFilesystem()
        self._diagnostics: AggregationDiagnostics = AggregationDiagnostics()

        if configure_logging:
            _ = setup_logger(
                log_file=self.config.log_file or DEFAULT_LOG_FILE,
                console_level=self.config.console_log_level,
            )

    @property
    def diagnostics(self) -> AggregationDiagnostics:
        """Skips and counters accumulated by the most recent scan."""
        return self._diagnostics

    def scan(self, root: Path) -> Iterator[DirectoryResult]:
        """Return the lazy walk over ``root``; each call resets diagnostics."""
        self._diagnostics = AggregationDiagnostics()
        return walk(
            root,
            extractor=self.extractor,
            filesystem=self.filesystem,
            diagnostics=self._diagnostics,
        )

    def export(self, root: Path, stream: TextIO) -> tuple[int, int]:
        """Walk ``root`` and write every result as JSON to ``stream``."""
        books, conflicts = export_json(self.scan(root), stream, indent=self.config.export_indent)
        logger.info(
            "Exported %d books and %d conflicts from %s (%d files skipped)",
            books,
            conflicts,
            root,
            len(self._diagnostics.skipped_files),
        )
        return books, conflicts


__all__ = ["LibraryService"]
