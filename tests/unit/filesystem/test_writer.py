"""Tests for Writer read/write."""

from pathlib import Path

import pytest
from filekit.filesystem.creator import DirectoryCreator
from filekit.filesystem.writer import Writer
from filekit.tracing.channel import LogChannel
from filekit.tracing.models import LogEvent


@pytest.fixture
def writer(channel: LogChannel) -> Writer:
    return Writer(channel, DirectoryCreator(channel))


class TestWriteFile:
    """Tests for Writer.write_file."""

    def test_creates_missing_parents(
        self, writer: Writer, tmp_path: Path, events: list[LogEvent]
    ) -> None:
        """Parent directories are created before the file is written."""
        target = tmp_path / "a" / "b" / "c" / "f.txt"

        writer.write_file(target, "data")

        assert target.read_text() == "data"
        created = [e.arguments[0] for e in events if e.label == "Directory %s created"]
        assert created == [
            str(tmp_path / "a"),
            str(tmp_path / "a" / "b"),
            str(tmp_path / "a" / "b" / "c"),
        ]

    def test_second_write_creates_no_directories(
        self, writer: Writer, tmp_path: Path, events: list[LogEvent]
    ) -> None:
        """Directory creation is idempotent across writes."""
        target = tmp_path / "a" / "b" / "f.txt"
        writer.write_file(target, "one")
        events.clear()

        writer.write_file(target, "two")

        assert target.read_text() == "two"
        assert [e.label for e in events] == ["Writing %s bytes to file %s"]

    def test_reports_encoded_byte_length(
        self, writer: Writer, tmp_path: Path, events: list[LogEvent]
    ) -> None:
        """The trace reports bytes, not characters."""
        target = tmp_path / "utf8.txt"

        writer.write_file(target, "héllo")

        assert events[-1].arguments == [6, str(target)]

    def test_bytes_content_is_written_verbatim(self, writer: Writer, tmp_path: Path) -> None:
        """Bytes are written without transcoding, whatever the encoding."""
        target = tmp_path / "blob.bin"
        payload = bytes(range(256))

        writer.write_file(target, payload)

        assert target.read_bytes() == payload

    def test_text_without_encoding_rejected(self, writer: Writer, tmp_path: Path) -> None:
        """encoding=None requires bytes content."""
        with pytest.raises(TypeError):
            writer.write_file(tmp_path / "x.txt", "text", None)

    def test_explicit_encoding(self, writer: Writer, tmp_path: Path) -> None:
        """An explicit encoding is used for text content."""
        target = tmp_path / "latin.txt"

        writer.write_file(target, "é", "latin-1")

        assert target.read_bytes() == b"\xe9"

    def test_parent_collision_raises(self, writer: Writer, tmp_path: Path) -> None:
        """A file where the parent directory should be is fatal."""
        (tmp_path / "blocker").write_text("x")

        with pytest.raises(OSError):
            writer.write_file(tmp_path / "blocker" / "f.txt", "data")


class TestReadFile:
    """Tests for Writer.read_file."""

    def test_reads_text_by_default(self, writer: Writer, tmp_path: Path) -> None:
        """Default mode decodes with the writer's encoding."""
        target = tmp_path / "t.txt"
        target.write_bytes("ünïcode".encode())

        assert writer.read_file(target) == "ünïcode"

    def test_reads_bytes_without_encoding(self, writer: Writer, tmp_path: Path) -> None:
        """encoding=None returns raw bytes."""
        target = tmp_path / "b.bin"
        target.write_bytes(b"\x00\xff")

        assert writer.read_file(target, None) == b"\x00\xff"

    def test_configured_default_encoding(self, channel: LogChannel, tmp_path: Path) -> None:
        """The writer's encoding applies when none is passed."""
        writer = Writer(channel, DirectoryCreator(channel), encoding="latin-1")
        target = tmp_path / "l.txt"
        target.write_bytes(b"\xe9")

        assert writer.encoding == "latin-1"
        assert writer.read_file(target) == "é"

    def test_missing_file_raises(self, writer: Writer, tmp_path: Path) -> None:
        """Reading a missing file is fatal."""
        with pytest.raises(FileNotFoundError):
            writer.read_file(tmp_path / "missing.txt")
