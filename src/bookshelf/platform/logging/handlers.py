"""Rich console handler for bookshelf logs.

Where: platform/logging/handlers.py
What: Render structured aggregation events with icons and compact paths.
Why: Keep console output scannable when walking large libraries.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class BookshelfRichHandler(RichHandler):
    """Rich handler that renders aggregation events and paths in white."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "aggregation.walk.start": ("🚀", "cyan"),
        "aggregation.walk.complete": ("✅", "green"),
        "aggregation.directory.book": ("📚", "green"),
        "aggregation.directory.conflict": ("❌", "red"),
        "aggregation.directory.no_book": ("ℹ️", "yellow"),
        "aggregation.directory.unreadable": ("⛔", "red"),
        "aggregation.file.skip": ("↪️", "yellow"),
        "aggregation.entry.skip": ("↪️", "yellow"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path relative to ``base`` with colored separators.

        Long paths keep only their last segments behind an ellipsis.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and pure_path.is_relative_to(base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor and not truncated:
            display_string = anchor.rstrip("\\/") + separator if anchor.strip("\\/") else separator
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        text = Text()
        for char in path_string:
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_event_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured aggregation events with dedicated styling."""

        event = getattr(record, "aggregation_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        base = getattr(record, "root", None)
        base_str = str(base) if base else None

        if event == "aggregation.walk.start":
            _ = body.append("Walk start")
        elif event == "aggregation.walk.complete":
            _ = body.append("Walk complete")
            metrics: list[str] = []
            for name in ("books", "conflicts", "skipped_files", "skipped_directories"):
                value = getattr(record, name, None)
                if isinstance(value, int):
                    metrics.append(f"{name}={value}")
            if metrics:
                _ = body.append(" [" + ", ".join(metrics) + "]")
        elif event == "aggregation.directory.book":
            title = getattr(record, "title", None)
            total_tracks = getattr(record, "total_tracks", None)
            _ = body.append("Book")
            if title:
                _ = body.append(f" {title!r}")
            if isinstance(total_tracks, int):
                _ = body.append(f" [tracks={total_tracks}]")
        elif event == "aggregation.directory.conflict":
            _ = body.append("Conflict")
            error_message = getattr(record, "error_message", None)
            if error_message:
                _ = body.append(f" ({error_message})")
        elif event == "aggregation.directory.no_book":
            _ = body.append("No parsable audio")
        elif event == "aggregation.directory.unreadable":
            _ = body.append("Unreadable directory")
            error_message = getattr(record, "error_message", None)
            if error_message:
                _ = body.append(f" ({error_message})")
        else:
            _ = body.append("Skipped ")
            source_path = getattr(record, "source_path", None)
            if source_path:
                _ = body.append_text(self._format_path(str(source_path), base=base_str))
            reason = getattr(record, "reason", None)
            if reason:
                _ = body.append(f" ({reason})")
            _ = text.append_text(body)
            return text

        directory = getattr(record, "directory", None)
        if directory:
            _ = body.append(" @ ")
            _ = body.append_text(self._format_path(str(directory), base=base_str))

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for aggregation events."""

        event_text = self._render_event_message(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["BookshelfRichHandler"]
