"""Unit tests for path primitives and XDG locations."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from filekit.core.paths import (
    APP_NAME,
    basename,
    get_config_dir,
    get_settings_path,
    get_user_theme_path,
    is_root,
    join,
    parent,
    relative,
    resolve,
    root_of,
)


class TestJoin:
    """Tests for join."""

    def test_joins_all_segments(self) -> None:
        """Every segment is part of the result."""
        assert join(["/a", "b", "c.txt"]) == os.path.join("/a", "b", "c.txt")

    def test_accepts_pathlike(self, tmp_path: Path) -> None:
        """Path objects are accepted and a string is returned."""
        assert join([tmp_path, "x"]) == str(tmp_path / "x")

    def test_single_segment(self) -> None:
        """A single segment is returned as-is."""
        assert join(["/only"]) == "/only"

    def test_empty_raises(self) -> None:
        """An empty sequence is rejected."""
        with pytest.raises(ValueError, match="At least one"):
            join([])


class TestPrimitives:
    """Tests for parent, basename, relative, resolve and root detection."""

    def test_parent_and_basename(self) -> None:
        """parent and basename split a path."""
        assert parent("/a/b/c.txt") == "/a/b"
        assert basename("/a/b/c.txt") == "c.txt"

    def test_relative(self) -> None:
        """relative is computed from start to path."""
        assert relative("/a/b", "/a/b/c/d.txt") == os.path.join("c", "d.txt")

    def test_resolve_makes_absolute(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """resolve anchors relative paths at the working directory."""
        monkeypatch.chdir(tmp_path)
        assert resolve("x/../y") == os.path.join(os.getcwd(), "y")

    def test_is_root(self) -> None:
        """Only the filesystem root is its own parent."""
        assert is_root(os.path.abspath(os.sep)) is True
        assert is_root("/tmp") is False

    def test_root_of(self, tmp_path: Path) -> None:
        """root_of walks up to the terminal ancestor."""
        assert root_of(tmp_path) == os.path.abspath(os.sep)


class TestXdgLocations:
    """Tests for XDG-based locations."""

    def test_default_config_dir(self) -> None:
        """get_config_dir falls back to ~/.config/filekit."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": ""}):
            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert get_config_dir() == tmp_path / APP_NAME

    def test_settings_and_theme_paths(self, tmp_path: Path) -> None:
        """Settings and theme files live in the config directory."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert get_settings_path() == tmp_path / APP_NAME / "config.toml"
            assert get_user_theme_path() == tmp_path / APP_NAME / "theme.toml"
