"""Tests for the lazy tree walk."""

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from bookshelf.features.books import Book, TitleConflictError
from bookshelf.features.books.usecases import AggregationDiagnostics, DirectoryResult, walk
from bookshelf.platform.filesystem import DirectoryEntry, LocalFilesystem
from bookshelf.shared import DirectoryListingError, TrackMetadata, UnsupportedFormatError


@pytest.fixture
def library(tmp_path: Path, metadata_factory: Callable[..., TrackMetadata]) -> tuple[Path, dict[str, TrackMetadata]]:
    """Create a small library tree and the tags of its files.

    Layout::

        root/readme.txt
        root/Huckfinn/01.mp3 .. 04.mp3
        root/Mixed/01.mp3 02.mp3            (title conflict)
        root/Mixed/Extras/01.mp3            (book nested under a conflict)
        root/empty folder/
        root/Series/Winnetou/01.mp3         (book under a no-book directory)
    """
    root = tmp_path / "library"
    table: dict[str, TrackMetadata] = {}

    def add(relative: str, metadata: TrackMetadata) -> None:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
        table[relative] = metadata

    root.mkdir()
    (root / "readme.txt").touch()
    for n in (4, 2, 3, 1):
        add(f"Huckfinn/{n:02d}.mp3", metadata_factory(n))
    add("Mixed/01.mp3", metadata_factory(1, album="Penguin Island"))
    add("Mixed/02.mp3", metadata_factory(2, album="Penguin Isle"))
    add("Mixed/Extras/01.mp3", metadata_factory(1, album="Penguin Island Extras"))
    (root / "empty folder").mkdir()
    add("Series/Winnetou/01.mp3", metadata_factory(1, album="Winnetou", year=1893))
    return root, table


class PathStubExtractor:
    """Stub extractor keyed by path relative to the library root."""

    def __init__(self, root: Path, table: dict[str, TrackMetadata]) -> None:
        self.root: Path = root
        self.table: dict[str, TrackMetadata] = table

    def extract(self, file_path: Path) -> Book:
        metadata = self.table.get(file_path.relative_to(self.root).as_posix())
        if metadata is None:
            raise UnsupportedFormatError(file_path)
        return Book.from_metadata(metadata, file_path)


@pytest.fixture
def extractor(library: tuple[Path, dict[str, TrackMetadata]]) -> PathStubExtractor:
    root, table = library
    return PathStubExtractor(root, table)


class TestWalk:
    """Recursive, lazy production of directory results."""

    def test_yields_one_result_per_book_directory_in_preorder(
        self,
        library: tuple[Path, dict[str, TrackMetadata]],
        extractor: PathStubExtractor,
    ) -> None:
        root, _ = library

        results = list(walk(root, extractor=extractor))

        assert [r.directory.relative_to(root).as_posix() for r in results] == [
            "Huckfinn",
            "Mixed",
            "Mixed/Extras",
            "Series/Winnetou",
        ]
        huckfinn, mixed, extras, winnetou = results
        assert huckfinn.success
        assert huckfinn.book is not None
        assert [t.track_number for t in huckfinn.book.tracks] == [1, 2, 3, 4]
        assert not mixed.success
        assert isinstance(mixed.conflict, TitleConflictError)
        assert extras.book is not None and extras.book.title == "Penguin Island Extras"
        assert winnetou.book is not None and winnetou.book.year == 1893

    def test_root_with_one_book_and_one_empty_subdirectory(
        self,
        tmp_path: Path,
        metadata_factory: Callable[..., TrackMetadata],
        stub_extractor_factory: Callable[..., object],
    ) -> None:
        (tmp_path / "Book").mkdir()
        (tmp_path / "Book" / "01.mp3").touch()
        (tmp_path / "Empty").mkdir()
        extractor = stub_extractor_factory({"01.mp3": metadata_factory(1)})

        results = list(walk(tmp_path, extractor=extractor))

        assert len(results) == 1
        assert results[0].directory == tmp_path / "Book"

    def test_walk_is_lazy_and_restartable(
        self,
        library: tuple[Path, dict[str, TrackMetadata]],
        extractor: PathStubExtractor,
    ) -> None:
        root, _ = library

        iterator = walk(root, extractor=extractor)
        first = next(iterator)
        iterator.close()

        assert first.directory == root / "Huckfinn"
        assert list(walk(root, extractor=extractor))[0] == first

    def test_diagnostics_collect_counters_and_skips(
        self,
        library: tuple[Path, dict[str, TrackMetadata]],
        extractor: PathStubExtractor,
    ) -> None:
        root, _ = library
        diagnostics = AggregationDiagnostics()

        _ = list(walk(root, extractor=extractor, diagnostics=diagnostics))

        assert diagnostics.books == 3
        assert diagnostics.conflicts == 1
        assert [f.path.name for f in diagnostics.skipped_files] == ["readme.txt"]

    def test_unreadable_subdirectory_is_skipped(
        self,
        library: tuple[Path, dict[str, TrackMetadata]],
        extractor: PathStubExtractor,
    ) -> None:
        root, _ = library
        blocked = root / "Mixed"

        class BlockingFilesystem(LocalFilesystem):
            def list_entries(self, directory: Path) -> list[DirectoryEntry]:
                if directory == blocked:
                    raise DirectoryListingError(directory, PermissionError(13, "Permission denied"))
                return super().list_entries(directory)

        diagnostics = AggregationDiagnostics()
        results = list(
            walk(root, extractor=extractor, filesystem=BlockingFilesystem(), diagnostics=diagnostics)
        )

        assert [r.directory.name for r in results] == ["Huckfinn", "Winnetou"]
        assert [(d.path, d.reason) for d in diagnostics.skipped_directories] == [
            (blocked, "Permission denied")
        ]

    def test_unreadable_root_raises(self, tmp_path: Path, stub_extractor_factory: Callable[..., object]) -> None:
        iterator = walk(tmp_path / "missing", extractor=stub_extractor_factory({}))

        with pytest.raises(DirectoryListingError):
            _ = next(iterator)

    def test_symlinked_directories_are_not_followed(
        self,
        tmp_path: Path,
        metadata_factory: Callable[..., TrackMetadata],
        stub_extractor_factory: Callable[..., object],
    ) -> None:
        (tmp_path / "Book").mkdir()
        (tmp_path / "Book" / "01.mp3").touch()
        try:
            os.symlink(tmp_path, tmp_path / "Book" / "loop", target_is_directory=True)
        except OSError:
            pytest.skip("symlinks not supported on this platform")

        results = list(walk(tmp_path, extractor=stub_extractor_factory({"01.mp3": metadata_factory(1)})))

        assert [r.directory for r in results] == [tmp_path / "Book"]

    def test_result_exposes_book_or_conflict(self, tmp_path: Path) -> None:
        conflict = TitleConflictError("a", "b")

        result = DirectoryResult.from_result(tmp_path, conflict)

        assert result.result is conflict
        assert result.book is None
        assert not result.success


class TestDirectoryResult:
    """Invariants of a single walk result."""

    def test_requires_exactly_one_outcome(self, tmp_path: Path, fragment_factory: Callable[..., Book]) -> None:
        with pytest.raises(ValueError, match="exactly one"):
            _ = DirectoryResult(directory=tmp_path)
        with pytest.raises(ValueError, match="exactly one"):
            _ = DirectoryResult(
                directory=tmp_path,
                book=fragment_factory(1),
                conflict=TitleConflictError("a", "b"),
            )

    def test_result_returns_book(self, tmp_path: Path, fragment_factory: Callable[..., Book]) -> None:
        book = fragment_factory(1)

        assert DirectoryResult.from_result(tmp_path, book).result is book
