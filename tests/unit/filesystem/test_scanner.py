"""Tests for Scanner recursive listing."""

import os
import re
from pathlib import Path

import pytest
from filekit.filesystem.filters import PatternFilter
from filekit.filesystem.scanner import Scanner
from filekit.tracing.channel import LogChannel
from filekit.tracing.models import LogEvent, LogLevel


@pytest.fixture
def scanner(channel: LogChannel) -> Scanner:
    return Scanner(channel)


class TestScan:
    """Tests for Scanner.scan."""

    def test_lists_all_files_sorted(self, scanner: Scanner, sample_tree: Path) -> None:
        """Every regular file is listed, sorted, as an absolute path."""
        result = scanner.scan(sample_tree)

        assert result == sorted(result)
        assert result == [
            str(sample_tree / "a.txt"),
            str(sample_tree / "b.bin"),
            str(sample_tree / "docs" / "nested" / "deep.txt"),
            str(sample_tree / "docs" / "readme.md"),
        ]
        assert all(os.path.isabs(p) for p in result)

    def test_relative_root_returns_absolute_paths(
        self, scanner: Scanner, sample_tree: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A relative root is resolved against the working directory."""
        monkeypatch.chdir(sample_tree.parent)

        result = scanner.scan("src/docs")

        assert result == [
            str(sample_tree / "docs" / "nested" / "deep.txt"),
            str(sample_tree / "docs" / "readme.md"),
        ]

    def test_missing_root_warns_and_returns_empty(
        self, scanner: Scanner, tmp_path: Path, events: list[LogEvent]
    ) -> None:
        """A missing root is not an error: one warn event, empty result."""
        missing = tmp_path / "nope"

        assert scanner.scan(missing) == []

        warnings = [e for e in events if e.level == LogLevel.WARN]
        assert len(warnings) == 1
        assert warnings[0].label == "Directory not found: %s"
        assert warnings[0].arguments == [str(missing)]

    def test_single_file_root(self, scanner: Scanner, sample_tree: Path) -> None:
        """A file root yields a one-element list."""
        target = sample_tree / "a.txt"
        assert scanner.scan(target) == [str(target)]

    def test_empty_directory(self, scanner: Scanner, sample_tree: Path) -> None:
        """An empty directory yields nothing and emits no warning."""
        assert scanner.scan(sample_tree / "empty") == []

    def test_filter_applies_to_files(self, scanner: Scanner, sample_tree: Path) -> None:
        """Files rejected by the filter are not listed."""
        result = scanner.scan(sample_tree, lambda p: not p.endswith(".bin"))

        assert str(sample_tree / "b.bin") not in result
        assert str(sample_tree / "a.txt") in result

    def test_rejected_directory_prunes_subtree(self, scanner: Scanner, sample_tree: Path) -> None:
        """A directory rejected by the filter contributes nothing, even
        when its children would pass."""
        docs = str(sample_tree / "docs")

        result = scanner.scan(sample_tree, lambda p: p != docs)

        assert result == [str(sample_tree / "a.txt"), str(sample_tree / "b.bin")]

    def test_filter_is_tested_on_root(self, scanner: Scanner, sample_tree: Path) -> None:
        """A filter rejecting the root yields an empty result."""
        visited: list[str] = []

        def reject_all(path: str) -> bool:
            visited.append(path)
            return False

        assert scanner.scan(sample_tree, reject_all) == []
        assert visited == [str(sample_tree)]

    def test_pattern_filter_is_a_directory_filter_too(
        self, scanner: Scanner, sample_tree: Path
    ) -> None:
        """A regex matching only file names also rejects intermediate directories."""
        assert scanner.scan(sample_tree, PatternFilter(re.compile(r"\.txt$"))) == []

    def test_symlinks_are_excluded(self, scanner: Scanner, sample_tree: Path) -> None:
        """Symlinks to files and directories are neither listed nor followed."""
        (sample_tree / "link.txt").symlink_to(sample_tree / "a.txt")
        (sample_tree / "docs_link").symlink_to(sample_tree / "docs")
        (sample_tree / "dead").symlink_to(sample_tree / "missing")

        result = scanner.scan(sample_tree)

        assert len(result) == 4
        assert not any("link" in p or "dead" in p for p in result)

    def test_symlink_root_yields_nothing(self, scanner: Scanner, sample_tree: Path) -> None:
        """A symlink given as root is detected and not followed."""
        link = sample_tree.parent / "link_root"
        link.symlink_to(sample_tree)

        assert scanner.scan(link) == []

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="FIFOs not supported")
    def test_unsupported_entry_reported(
        self, scanner: Scanner, sample_tree: Path, events: list[LogEvent]
    ) -> None:
        """A FIFO is skipped with an info event."""
        fifo = sample_tree / "pipe"
        os.mkfifo(fifo)

        result = scanner.scan(sample_tree)

        assert str(fifo) not in result
        unsupported = [e for e in events if e.label == "Unsupported file type: %s"]
        assert len(unsupported) == 1
        assert unsupported[0].level == LogLevel.INFO
        assert unsupported[0].arguments == [str(fifo)]

    def test_returns_fresh_state_each_call(self, scanner: Scanner, sample_tree: Path) -> None:
        """Nothing is cached between calls."""
        first = scanner.scan(sample_tree)
        (sample_tree / "new.txt").write_text("new")

        assert len(scanner.scan(sample_tree)) == len(first) + 1
