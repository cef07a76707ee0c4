"""Audio file tag extraction facade.

Where: src/bookshelf/features/extraction/tag_extractor.py
What: Route files to format extractors and lift reads into book fragments.
Why: Give the aggregator one entry point that fails only with ExtractionError.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import ClassVar

from bookshelf.config.config import DEFAULT_SUPPORTED_EXTENSIONS
from bookshelf.features.books.domain.models import Book
from bookshelf.shared.errors import UnsupportedFormatError
from bookshelf.shared.track_metadata import TrackMetadata

from ._base_extractors import AudioFormatExtractor
from .format_extractors import (
    FlacExtractor,
    M4aExtractor,
    Mp3Extractor,
    OggVorbisExtractor,
    OpusExtractor,
)

__all__ = ["TagExtractor"]


class TagExtractor:
    """Facade class for reading tags and building single-file fragments.

    The extractor is selected by file extension.
    """

    # Mapping from file extension to corresponding extractor instance.
    _format_map: ClassVar[dict[str, AudioFormatExtractor]] = {
        ".mp3": Mp3Extractor(),
        ".flac": FlacExtractor(),
        ".opus": OpusExtractor(),
        ".ogg": OggVorbisExtractor(),
        ".m4a": M4aExtractor(),
        ".m4b": M4aExtractor(),
    }

    def __init__(self, supported_extensions: Iterable[str] = DEFAULT_SUPPORTED_EXTENSIONS) -> None:
        self.supported_extensions: frozenset[str] = frozenset(
            ext.lower() for ext in supported_extensions if ext.lower() in self._format_map
        )

    def read_tags(self, file_path: Path) -> TrackMetadata:
        """Read the raw tags of an audio file.

        Raises:
            UnsupportedFormatError: If the extension is not handled.
            ExtractionError: If the container cannot be parsed.
        """
        ext = file_path.suffix.lower()
        if ext not in self.supported_extensions:
            raise UnsupportedFormatError(file_path)
        return self._format_map[ext].extract_metadata(file_path)

    def extract(self, file_path: Path) -> Book:
        """Turn one audio file into a Book-of-one.

        Raises:
            ExtractionError: If the file is unsupported, unreadable, or lacks
                a required tag.
        """
        return Book.from_metadata(self.read_tags(file_path), file_path)
