# Where: bookshelf.shared.__init__
# What: Provide a concise import surface for shared dataclasses and errors.
# Why: Encourage consistent reuse of shared types across features.

"""Shared cross-cutting types exposed at the package level."""

from .errors import (
    BookshelfError,
    ConfigError,
    DirectoryListingError,
    ExtractionError,
    MissingTagError,
    UnsupportedFormatError,
)
from .track_metadata import TrackMetadata

__all__ = [
    "BookshelfError",
    "ConfigError",
    "DirectoryListingError",
    "ExtractionError",
    "MissingTagError",
    "TrackMetadata",
    "UnsupportedFormatError",
]
