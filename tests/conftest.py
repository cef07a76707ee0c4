"""Shared pytest fixtures for aggregation tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from bookshelf.features.books import Book
from bookshelf.shared import TrackMetadata, UnsupportedFormatError


class StubExtractor:
    """Tag extractor returning canned metadata keyed by file name."""

    def __init__(self, metadata_by_name: dict[str, TrackMetadata]) -> None:
        self.metadata_by_name: dict[str, TrackMetadata] = metadata_by_name
        self.calls: list[Path] = []

    def extract(self, file_path: Path) -> Book:
        self.calls.append(file_path)
        metadata = self.metadata_by_name.get(file_path.name)
        if metadata is None:
            raise UnsupportedFormatError(file_path)
        return Book.from_metadata(metadata, file_path)


def make_metadata(
    track_number: int | None,
    *,
    title: str | None = None,
    album: str | None = "Huckleberry Finn",
    artists: list[str] | None = None,
    album_artist: str | None = "Mark Twain",
    year: int | None = 1884,
    disc_number: int | None = None,
    disc_total: int | None = 1,
) -> TrackMetadata:
    return TrackMetadata(
        title=title if title is not None else f"Chapter {track_number}",
        artists=artists if artists is not None else ["John Greenman"],
        album=album,
        album_artist=album_artist,
        year=year,
        track_number=track_number,
        disc_number=disc_number,
        disc_total=disc_total,
        file_extension=".mp3",
    )


@pytest.fixture
def metadata_factory() -> Callable[..., TrackMetadata]:
    """Expose ``make_metadata`` to tests."""
    return make_metadata


@pytest.fixture
def stub_extractor_factory() -> Callable[[dict[str, TrackMetadata]], StubExtractor]:
    """Build stub extractors from a name-to-metadata table."""
    return StubExtractor


@pytest.fixture
def fragment_factory() -> Callable[..., Book]:
    """Build single-file fragments from keyword overrides."""

    def _factory(track_number: int = 1, **overrides: object) -> Book:
        metadata = make_metadata(track_number, **overrides)  # type: ignore[arg-type]
        return Book.from_metadata(metadata, Path(f"{track_number:02d}.mp3"))

    return _factory
