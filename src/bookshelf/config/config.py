"""Configuration management for bookshelf."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from bookshelf.config.paths import default_config_path
from bookshelf.shared.errors import ConfigError

logger = logging.getLogger("bookshelf.config")

DEFAULT_SUPPORTED_EXTENSIONS: tuple[str, ...] = (".mp3", ".flac", ".opus", ".ogg", ".m4a", ".m4b")
_LEVEL_NAMES: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path; console-only logging when unset
    log_file: Path | None = _path_field()

    # Console verbosity, one of the stdlib level names
    console_level: str = "INFO"

    # JSON indentation used by the exporter
    export_indent: int | None = 2

    # Extensions handed to the tag extractor
    supported_extensions: tuple[str, ...] = DEFAULT_SUPPORTED_EXTENSIONS

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Normalize and validate values coming from TOML."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

        level = str(self.console_level).upper()
        if level not in _LEVEL_NAMES:
            raise ConfigError(f"Invalid console_level: {self.console_level!r}")
        self.console_level = level

        if self.export_indent is not None and (
            isinstance(self.export_indent, bool)
            or not isinstance(self.export_indent, int)
            or self.export_indent < 0
        ):
            raise ConfigError(f"Invalid export_indent: {self.export_indent!r}")

        extensions = tuple(
            ext.lower() if ext.startswith(".") else f".{ext.lower()}"
            for ext in self.supported_extensions
        )
        if not extensions:
            raise ConfigError("supported_extensions must not be empty")
        self.supported_extensions = extensions

    @property
    def console_log_level(self) -> int:
        """Return the console level as a ``logging`` constant."""
        return logging.getLevelName(self.console_level)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Config":
        """Build a configuration from a parsed TOML mapping.

        Unknown keys are ignored with a warning so older files keep loading.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in raw.items():
            if key not in known:
                logger.warning("Ignoring unknown configuration key: %s", key)
                continue
            values[key] = value

        extensions = values.get("supported_extensions")
        if extensions is not None:
            if not isinstance(extensions, list) or not all(isinstance(e, str) for e in extensions):
                raise ConfigError("supported_extensions must be a list of strings")
            values["supported_extensions"] = tuple(extensions)

        return cls(**values)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            config_file: Explicit file to read. Defaults to the portable path.

        Returns:
            Config: Loaded configuration, or defaults when no file exists.

        Raises:
            ConfigError: If the file is not valid TOML or holds invalid values.
        """
        if config_file is None and cls._instance is not None:
            return cls._instance

        target = config_file or default_config_path()
        if not target.exists():
            logger.debug("No configuration file at %s, using defaults", target)
            instance = cls()
        else:
            try:
                with open(target, "rb") as f:
                    raw = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"Invalid TOML in {target}: {exc}") from exc
            instance = cls.from_dict(raw)
            logger.info("Configuration loaded from %s", target)

        if config_file is None:
            cls._instance = instance
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads the file."""
        cls._instance = None


__all__ = ["Config", "DEFAULT_SUPPORTED_EXTENSIONS"]
