"""Bookshelf: fold per-file audio tags into per-directory audiobook records."""

__version__ = "0.1.0"
