"""Format-specific tag extractors.

Where: src/bookshelf/features/extraction/format_extractors.py
What: Define concrete extractors for supported audio containers.
Why: Separate format logic from the facade to simplify future extensions.
"""

from __future__ import annotations

from typing import Any, ClassVar, TYPE_CHECKING, cast

from mutagen.easyid3 import EasyID3
from mutagen.flac import FLAC
from mutagen.mp3 import MP3
from mutagen.mp4 import MP4
from mutagen.oggopus import OggOpus
from mutagen.oggvorbis import OggVorbis

from ._base_extractors import BaseAudioExtractor, BaseTagExtractor
from ._tag_utils import parse_tuple_numbers

if TYPE_CHECKING:
    from mutagen import MutagenTags
else:  # pragma: no cover - typing convenience
    MutagenTags: type[object] = object

__all__ = [
    "Mp3Extractor",
    "FlacExtractor",
    "OpusExtractor",
    "OggVorbisExtractor",
    "M4aExtractor",
]

_VORBIS_MAPPING: dict[str, str] = {
    "title": "title",
    "artist": "artist",
    "album_artist": "albumartist",
    "album": "album",
    "track": "tracknumber",
    "disc": "discnumber",
    "date": "date",
}
_VORBIS_TOTALS: dict[str, str] = {"track": "tracktotal", "disc": "disctotal"}


class Mp3Extractor(BaseAudioExtractor):
    """Extractor for MP3 files using EasyID3 tags."""

    FILE_CLASS: ClassVar[type | None] = MP3
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {"ID3": EasyID3}

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "title",
        "artist": "artist",
        "album_artist": "albumartist",
        "album": "album",
        "track": "tracknumber",
        "disc": "discnumber",
        "date": "date",
    }

    def _get_tag_value(self, tags: MutagenTags, key: str) -> str | None:
        return BaseTagExtractor.get_str_tag(tags, key)


class FlacExtractor(BaseAudioExtractor):
    """Extractor for FLAC files."""

    FILE_CLASS: ClassVar[type | None] = FLAC
    TAG_MAPPING: ClassVar[dict[str, str]] = _VORBIS_MAPPING
    TOTAL_MAPPING: ClassVar[dict[str, str]] = _VORBIS_TOTALS

    def _get_tag_value(self, tags: MutagenTags, key: str) -> str | None:
        return BaseTagExtractor.get_str_tag(tags, key)


class OpusExtractor(BaseAudioExtractor):
    """Extractor for Opus (.opus) files using Vorbis comments."""

    FILE_CLASS: ClassVar[type | None] = OggOpus
    TAG_MAPPING: ClassVar[dict[str, str]] = _VORBIS_MAPPING
    TOTAL_MAPPING: ClassVar[dict[str, str]] = _VORBIS_TOTALS

    def _get_tag_value(self, tags: MutagenTags, key: str) -> str | None:
        return BaseTagExtractor.get_str_tag(tags, key)


class OggVorbisExtractor(BaseAudioExtractor):
    """Extractor for Ogg Vorbis (.ogg) files."""

    FILE_CLASS: ClassVar[type | None] = OggVorbis
    TAG_MAPPING: ClassVar[dict[str, str]] = _VORBIS_MAPPING
    TOTAL_MAPPING: ClassVar[dict[str, str]] = _VORBIS_TOTALS

    def _get_tag_value(self, tags: MutagenTags, key: str) -> str | None:
        return BaseTagExtractor.get_str_tag(tags, key)


class M4aExtractor(BaseAudioExtractor):
    """Extractor for M4A/M4B files using MP4 atoms."""

    FILE_CLASS: ClassVar[type | None] = MP4

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "\xa9nam",
        "artist": "\xa9ART",
        "album_artist": "aART",
        "album": "\xa9alb",
        "track": "trkn",
        "disc": "disk",
        "date": "\xa9day",
    }

    def _get_tag_value(self, tags: MutagenTags, key: str) -> str | None:
        if key in ["trkn", "disk"]:
            value = cast(list[tuple[int, int]] | None, tags.get(key))
            if not value:
                return None
            num, total = parse_tuple_numbers(data=value)
            return f"{num or ''}/{total or ''}"
        return BaseTagExtractor.get_str_tag(tags, key)
