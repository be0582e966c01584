"""
Unit tests for FileScannerImpl.
Verifies exclusion of organized roots, deterministic order, symlink handling and error isolation.
"""
import os
from pathlib import Path

import pytest

from chronosort.core.scanner import FileScannerImpl
from chronosort.errors import InvalidRootError
from conftest import DEFAULT_MOMENT


def scan_names(root: Path, excluded=None):
    scanner = FileScannerImpl(str(root), excluded_dirs=excluded)
    return [os.path.relpath(r.path, root) for r in scanner.scan()]


class TestFileScannerImpl:

    def test_finds_files_recursively(self, source_root, make_file):
        make_file(source_root, "a.txt")
        make_file(source_root, "sub/b.txt")
        make_file(source_root, "sub/deeper/c.txt")
        assert scan_names(source_root) == [
            "a.txt",
            os.path.join("sub", "b.txt"),
            os.path.join("sub", "deeper", "c.txt"),
        ]

    def test_order_is_sorted_and_stable(self, source_root, make_file):
        for name in ("z.txt", "m.txt", "a.txt"):
            make_file(source_root, name)
        assert scan_names(source_root) == ["a.txt", "m.txt", "z.txt"]

    def test_zero_byte_files_are_included(self, source_root, make_file):
        """Unlike a duplicate finder, the organizer has to place empty files too."""
        make_file(source_root, "empty.txt", b"")
        assert scan_names(source_root) == ["empty.txt"]

    def test_excluded_roots_are_pruned(self, source_root, make_file):
        make_file(source_root, "original/txt/2023/05/01/kept.txt")
        make_file(source_root, "duplicate/txt/2023/05/01/kept.txt")
        make_file(source_root, "new.txt")
        excluded = [str(source_root / "original"), str(source_root / "duplicate")]
        assert scan_names(source_root, excluded) == ["new.txt"]

    def test_nested_directory_with_same_name_is_not_excluded(self, source_root, make_file):
        """Only the exact excluded paths are skipped, not any folder called 'original'."""
        make_file(source_root, "sub/original/x.txt")
        excluded = [str(source_root / "original"), str(source_root / "duplicate")]
        assert scan_names(source_root, excluded) == [os.path.join("sub", "original", "x.txt")]

    def test_record_carries_size_and_mtime(self, source_root, make_file):
        make_file(source_root, "a.txt", b"12345")
        record = FileScannerImpl(str(source_root)).scan()[0]
        assert record.size == 5
        assert record.name == "a.txt"
        assert record.modified == DEFAULT_MOMENT

    def test_skips_symlinks(self, source_root, make_file):
        real = make_file(source_root, "real.txt")
        try:
            (source_root / "link.txt").symlink_to(real)
            (source_root / "linkdir").symlink_to(source_root / "sub", target_is_directory=True)
        except (OSError, NotImplementedError):
            pytest.skip("Symlinks not supported")
        make_file(source_root, "sub/inner.txt")
        assert scan_names(source_root) == ["real.txt", os.path.join("sub", "inner.txt")]

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(InvalidRootError, match="does not exist"):
            FileScannerImpl(str(tmp_path / "missing")).scan()

    def test_file_root_raises(self, tmp_path):
        path = tmp_path / "file.txt"
        path.write_text("x")
        with pytest.raises(InvalidRootError, match="Not a directory"):
            FileScannerImpl(str(path)).scan()

    def test_stat_failure_is_recorded_not_raised(self, source_root, make_file, monkeypatch):
        make_file(source_root, "ok.txt")
        denied = make_file(source_root, "denied.txt")

        original_stat = Path.stat

        def mocked_stat(self, *args, **kwargs):
            if str(self) == str(denied):
                raise PermissionError(f"Permission denied: {self}")
            return original_stat(self, *args, **kwargs)

        monkeypatch.setattr(Path, "stat", mocked_stat)

        scanner = FileScannerImpl(str(source_root))
        records = scanner.scan()

        assert [r.name for r in records] == ["ok.txt"]
        assert [path for path, _ in scanner.failures] == [str(denied)]

    def test_progress_callback_reports_scan_total(self, source_root, make_file):
        make_file(source_root, "a.txt")
        make_file(source_root, "b.txt")
        events = []
        FileScannerImpl(str(source_root)).scan(progress_callback=lambda *e: events.append(e))
        assert events == [("scanning", 2, None)]

    def test_unlistable_directory_is_recorded(self, source_root, make_file, monkeypatch):
        make_file(source_root, "ok.txt")
        make_file(source_root, "locked/hidden.txt")
        blocked = str(source_root / "locked")
        real_scandir = os.scandir

        def guarded_scandir(path="."):
            if os.fspath(path) == blocked:
                raise PermissionError(13, "Permission denied", blocked)
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", guarded_scandir)

        scanner = FileScannerImpl(str(source_root))
        records = scanner.scan()

        assert [r.name for r in records] == ["ok.txt"]
        assert [path for path, _ in scanner.failures] == [blocked]
