"""
Tests for FileService: moves must never overwrite an existing file.
"""
import pytest

from chronosort.services.file_service import FileService


class TestMove:

    def test_moves_file_and_creates_parents(self, tmp_path):
        source = tmp_path / "a.txt"
        source.write_text("content")
        destination = tmp_path / "x" / "y" / "a.txt"

        result = FileService.move(source, destination)

        assert result == destination
        assert not source.exists()
        assert destination.read_text() == "content"

    def test_preserves_modification_time(self, tmp_path):
        source = tmp_path / "a.txt"
        source.write_text("content")
        mtime_ns = source.stat().st_mtime_ns
        destination = tmp_path / "b.txt"
        FileService.move(source, destination)
        assert destination.stat().st_mtime_ns == mtime_ns

    def test_refuses_to_overwrite(self, tmp_path):
        source = tmp_path / "a.txt"
        source.write_text("new")
        destination = tmp_path / "b.txt"
        destination.write_text("old")

        with pytest.raises(FileExistsError):
            FileService.move(source, destination)

        assert source.read_text() == "new"
        assert destination.read_text() == "old"

    def test_missing_source(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="File not found"):
            FileService.move(tmp_path / "missing.txt", tmp_path / "b.txt")

    def test_handles_unicode_and_spaces(self, tmp_path):
        source = tmp_path / "моё фото.jpg"
        source.write_bytes(b"x")
        destination = tmp_path / "out" / "моё фото_1.jpg"
        FileService.move(source, destination)
        assert destination.exists()


class TestEnsureDirectory:

    def test_creates_nested_and_is_idempotent(self, tmp_path):
        target = tmp_path / "a" / "b"
        FileService.ensure_directory(target)
        FileService.ensure_directory(target)
        assert target.is_dir()
