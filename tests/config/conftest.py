"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def portable_repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Provide a temporary repository root for portable path detection."""

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import bookshelf.config.paths as paths

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    monkeypatch.delenv("BOOKSHELF_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def config_runtime_env(portable_repo_root: Path) -> Iterator[Path]:
    """Reset the configuration singleton around a test run."""

    from bookshelf.config.config import Config

    Config.reset()
    try:
        yield portable_repo_root
    finally:
        Config.reset()
