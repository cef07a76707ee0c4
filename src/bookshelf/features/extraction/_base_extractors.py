"""Shared base classes for tag extractors.

Where: src/bookshelf/features/extraction/_base_extractors.py
What: Define abstract base classes that encapsulate shared tag handling logic.
Why: Let each container format declare only its tag keys and quirks.
"""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Any, ClassVar, TYPE_CHECKING, cast

from typing_extensions import override

from mutagen import MutagenError

from bookshelf.platform.logging import logger
from bookshelf.shared.errors import ExtractionError
from bookshelf.shared.track_metadata import TrackMetadata

from ._tag_utils import dedupe_names, parse_int, parse_slash_separated, parse_year, safe_get_first

if TYPE_CHECKING:
    from mutagen import MutagenTags
else:  # pragma: no cover - typing convenience
    MutagenTags: type[object] = object

__all__ = [
    "AudioFormatExtractor",
    "BaseTagExtractor",
    "BaseAudioExtractor",
]


class AudioFormatExtractor(abc.ABC):
    """Abstract base class for audio tag extractors."""

    @abc.abstractmethod
    def extract_metadata(self, file_path: Path) -> TrackMetadata:
        """Read the tags of one audio file."""
        raise NotImplementedError


class BaseTagExtractor:
    """Provides common helper methods for tag extraction."""

    @staticmethod
    def get_str_tag(tags: MutagenTags, key: str, default: str | None = None) -> str | None:
        """Extract the first string value for a key from tag collection."""
        value = tags.get(key)
        if isinstance(value, list):
            return safe_get_first(data=cast(list[str], value), default=default or "") or default
        if isinstance(value, str):
            return value
        return default

    @staticmethod
    def get_str_list(tags: MutagenTags, key: str) -> list[str]:
        """Extract every string value for a key from tag collection."""
        value = tags.get(key)
        if isinstance(value, list):
            return [str(item) for item in cast(list[object], value)]
        if isinstance(value, str):
            return [value]
        return []


class BaseAudioExtractor(AudioFormatExtractor, abc.ABC):
    """Base class for mutagen-backed extractors."""

    FILE_CLASS: ClassVar[type | None] = None
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "",
        "artist": "",
        "album_artist": "",
        "album": "",
        "track": "",
        "disc": "",
        "date": "",
    }
    # Separate total fields, for formats that store them apart from the number.
    TOTAL_MAPPING: ClassVar[dict[str, str]] = {}

    def _open_file(self, file_path: Path) -> MutagenTags:
        """Open the audio file and get its tags."""
        if self.FILE_CLASS is None:
            raise NotImplementedError("FILE_CLASS must be defined in subclass")
        try:
            file_instance = self.FILE_CLASS(file_path, **self.FILE_INIT_PARAMS)
        except (MutagenError, OSError) as exc:
            raise ExtractionError(
                file_path,
                f"Can't parse {self.__class__.__name__.replace('Extractor', '')} container ({exc})",
            ) from exc
        return cast(MutagenTags, file_instance)

    @abc.abstractmethod
    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        """Get a single tag value from the audio file."""
        raise NotImplementedError

    def _get_tag_values(self, tags: Any, key: str) -> list[str]:
        """Get every value of a multi-valued tag."""
        return BaseTagExtractor.get_str_list(tags, key)

    def _get_total(self, tags: Any, name: str) -> int | None:
        key = self.TOTAL_MAPPING.get(name)
        return parse_int(self._get_tag_value(tags, key)) if key else None

    @override
    def extract_metadata(self, file_path: Path) -> TrackMetadata:
        """Read the tags of one audio file."""
        tags: MutagenTags = self._open_file(file_path)
        logger.debug("Opened file %s with tags type: %s", file_path, type(tags))

        title = self._get_tag_value(tags, key=self.TAG_MAPPING["title"])
        artists = dedupe_names(self._get_tag_values(tags, key=self.TAG_MAPPING["artist"]))
        album_artist = self._get_tag_value(tags, key=self.TAG_MAPPING["album_artist"])
        album = self._get_tag_value(tags, key=self.TAG_MAPPING["album"])

        track_str: str = self._get_tag_value(tags, key=self.TAG_MAPPING["track"]) or ""
        track_number, track_total = parse_slash_separated(value=track_str)
        if track_total is None:
            track_total = self._get_total(tags, "track")

        disc_str: str = self._get_tag_value(tags, key=self.TAG_MAPPING["disc"]) or ""
        disc_number, disc_total = parse_slash_separated(value=disc_str)
        if disc_total is None:
            disc_total = self._get_total(tags, "disc")

        year_str_preferred: str = self._get_tag_value(tags, key="year") or ""
        date_str: str = self._get_tag_value(tags, key=self.TAG_MAPPING["date"]) or ""
        year: int | None = parse_year(year_str_preferred) or parse_year(date_str)

        metadata = TrackMetadata(
            title=title,
            artists=artists,
            album=album,
            album_artist=album_artist,
            year=year,
            track_number=track_number,
            track_total=track_total,
            disc_number=disc_number,
            disc_total=disc_total,
            file_extension=file_path.suffix.lower(),
        )
        logger.debug("Extracted metadata: %s", metadata)
        return metadata
