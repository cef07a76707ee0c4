"""Tests for portable path discovery."""

from pathlib import Path

from bookshelf.config.paths import default_config_path, default_log_file, resolve_overridable_path


def test_default_paths_live_under_repo_root(portable_repo_root: Path) -> None:
    assert default_config_path(env={}) == (portable_repo_root / "config" / "config.toml").resolve()
    assert default_log_file() == (portable_repo_root / "logs" / "bookshelf.log").resolve()


def test_env_override_wins(portable_repo_root: Path, tmp_path: Path) -> None:
    target = tmp_path / "custom.toml"

    assert default_config_path(env={"BOOKSHELF_CONFIG": f"  {target}  "}) == target.resolve()


def test_explicit_path_wins_over_env(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=tmp_path / "a.toml",
        env={"X": str(tmp_path / "b.toml")},
        env_var="X",
        default_factory=lambda: tmp_path / "c.toml",
    )

    assert resolved == (tmp_path / "a.toml").resolve()
