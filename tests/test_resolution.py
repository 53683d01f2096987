"""Tests for wren.files.resolution — the single filesystem probe."""

import logging
import os
import sys

import pytest

from wren.files import resolution
from wren.files.resolution import PassThrough, Reject, Serve, resolve_file


@pytest.fixture
def root(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "b.txt").write_text("bee")
    (tmp_path / "index.html").write_text("<h1>Home</h1>")
    return tmp_path


class TestResolveFile:
    def test_regular_file_is_served(self, root) -> None:
        assert resolve_file(root, "a/b.txt") == Serve(root / "a" / "b.txt")

    def test_missing_file_passes_through(self, root) -> None:
        assert resolve_file(root, "a/missing.txt") == PassThrough()

    def test_directory_passes_through(self, root) -> None:
        assert resolve_file(root, "a") == PassThrough()

    def test_current_dir_is_the_root_directory(self, root) -> None:
        assert resolve_file(root, ".") == PassThrough()

    def test_dot_segments_are_allowed(self, root) -> None:
        outcome = resolve_file(root, "./a/./b.txt")
        assert isinstance(outcome, Serve)
        assert outcome.path.read_text() == "bee"

    def test_file_used_as_directory_passes_through(self, root) -> None:
        assert resolve_file(root, "a/b.txt/more") == PassThrough()

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX trailing-slash semantics")
    @pytest.mark.parametrize("relative", ["a/b.txt/", "a/b.txt/.", "a/b.txt/./"])
    def test_file_with_trailing_separator_passes_through(self, root, relative) -> None:
        assert resolve_file(root, relative) == PassThrough()

    def test_directory_with_trailing_separator_passes_through(self, root) -> None:
        assert resolve_file(root, "a/") == PassThrough()

    def test_nul_byte_passes_through(self, root) -> None:
        assert resolve_file(root, "a/b.txt\x00") == PassThrough()


class TestRejection:
    def test_parent_reference_rejected(self, root) -> None:
        outcome = resolve_file(root, "../secret.txt")
        assert isinstance(outcome, Reject)
        assert outcome.status == 400
        assert "../secret.txt" in outcome.reason

    def test_absolute_path_rejected(self, root) -> None:
        assert isinstance(resolve_file(root, "/etc/passwd"), Reject)

    def test_rejection_never_probes_filesystem(self, root, monkeypatch) -> None:
        def fail_stat(*args, **kwargs):
            raise AssertionError("filesystem must not be probed")

        monkeypatch.setattr(resolution.os, "stat", fail_stat)
        assert isinstance(resolve_file(root, "a/../a/b.txt"), Reject)


class TestMetadataErrors:
    def test_permission_error_logged_and_passes_through(self, root, monkeypatch, caplog) -> None:
        def deny(path, *args, **kwargs):
            raise PermissionError(13, "Permission denied", str(path))

        monkeypatch.setattr(resolution.os, "stat", deny)
        with caplog.at_level(logging.DEBUG, logger="wren.static"):
            assert resolve_file(root, "a/b.txt") == PassThrough()
        assert "Error getting metadata" in caplog.text

    def test_not_found_is_silent(self, root, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="wren.static"):
            resolve_file(root, "nope.txt")
        assert "Error getting metadata" not in caplog.text

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_unreadable_directory(self, root) -> None:
        if os.geteuid() == 0:
            pytest.skip("root bypasses directory permissions")
        locked = root / "locked"
        locked.mkdir()
        (locked / "f.txt").write_text("x")
        locked.chmod(0)
        try:
            assert resolve_file(root, "locked/f.txt") == PassThrough()
        finally:
            locked.chmod(0o755)
