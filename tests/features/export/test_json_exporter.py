"""Tests for JSON rendering of walk results."""

import json
from collections.abc import Callable
from io import StringIO
from pathlib import Path

from bookshelf.features.books import Book, YearConflictError, merge_all
from bookshelf.features.books.usecases import DirectoryResult
from bookshelf.features.export import book_to_dict, export_json, result_to_dict


def test_book_to_dict_sorts_sets(fragment_factory: Callable[..., Book]) -> None:
    merged = merge_all(
        [
            fragment_factory(2, artists=["Zed"], album_artist="B"),
            fragment_factory(1, artists=["Amy"], album_artist="A"),
        ]
    )
    assert isinstance(merged, Book)

    payload = book_to_dict(merged.sorted_tracks())

    assert payload == {
        "title": "Huckleberry Finn",
        "authors": ["A", "B"],
        "narrators": ["Amy", "Zed"],
        "tracks": [
            {"title": "Chapter 1", "narrators": ["Amy"], "track": 1, "disc": None},
            {"title": "Chapter 2", "narrators": ["Zed"], "track": 2, "disc": None},
        ],
        "total_tracks": 2,
        "discs": 1,
        "year": 1884,
    }


def test_result_to_dict_renders_conflict() -> None:
    result = DirectoryResult(directory=Path("/lib/Mixed"), conflict=YearConflictError(1884, 1885))

    assert result_to_dict(result) == {
        "directory": str(Path("/lib/Mixed")),
        "error": {
            "kind": "YearConflictError",
            "message": "Different year given: 1884 and 1885",
            "left": 1884,
            "right": 1885,
        },
    }


def test_export_json_splits_books_and_conflicts(fragment_factory: Callable[..., Book]) -> None:
    results = [
        DirectoryResult(directory=Path("a"), book=fragment_factory(1)),
        DirectoryResult(directory=Path("b"), conflict=YearConflictError(None, 2000)),
        DirectoryResult(directory=Path("c"), book=fragment_factory(1, album="Ünïcode")),
    ]
    stream = StringIO()

    counts = export_json(iter(results), stream, indent=None)

    assert counts == (2, 1)
    document = json.loads(stream.getvalue())
    assert [b["directory"] for b in document["books"]] == ["a", "c"]
    assert document["books"][1]["book"]["title"] == "Ünïcode"
    assert "Ünïcode" in stream.getvalue()
    assert document["conflicts"][0]["error"]["left"] is None
