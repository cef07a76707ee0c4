# Where: bookshelf.shared.track_metadata
# What: Raw per-file tag read shared by the extractor and the book fragments.
# Why: Keep one representation of what a single audio file declares.

from dataclasses import dataclass, field


@dataclass
class TrackMetadata:
    """Metadata read from one audio file's tags."""

    title: str | None = None
    artists: list[str] = field(default_factory=list)
    album: str | None = None
    album_artist: str | None = None
    year: int | None = None
    track_number: int | None = None
    track_total: int | None = None
    disc_number: int | None = None
    disc_total: int | None = None
    file_extension: str | None = None


__all__ = ["TrackMetadata"]
