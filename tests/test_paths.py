"""Tests for wren.files.paths — extraction, decoding, and component checks."""

from pathlib import PurePosixPath, PureWindowsPath

import pytest

from wren.errors import DecodeError
from wren.files.paths import (
    Component,
    components,
    extract_path,
    is_safe_path,
    percent_decode,
)
from wren.http.method import Method


class TestExtractPath:
    def test_root_maps_to_index(self) -> None:
        assert extract_path(Method.GET, "/") == "index.html"

    def test_strips_single_leading_slash(self) -> None:
        assert extract_path(Method.GET, "/a/b.txt") == "a/b.txt"

    def test_strips_exactly_one_character(self) -> None:
        assert extract_path(Method.GET, "//etc/passwd") == "/etc/passwd"
        assert extract_path(Method.GET, "xabc") == "abc"

    def test_head_is_eligible(self) -> None:
        assert extract_path(Method.HEAD, "/style.css") == "style.css"

    def test_other_methods_not_applicable(self) -> None:
        assert extract_path(Method.OTHER, "/style.css") is None

    def test_missing_path_not_applicable(self) -> None:
        assert extract_path(Method.GET, None) is None


class TestPercentDecode:
    def test_plain_text_unchanged(self) -> None:
        assert percent_decode("css/main.css") == "css/main.css"

    def test_space(self) -> None:
        assert percent_decode("my%20file.txt") == "my file.txt"

    def test_encoded_dots(self) -> None:
        assert percent_decode("%2e%2e/secret.txt") == "../secret.txt"

    def test_mixed_case_hex(self) -> None:
        assert percent_decode("%2E%2e") == ".."

    def test_multibyte_utf8(self) -> None:
        assert percent_decode("caf%C3%A9.html") == "café.html"

    def test_unescaped_non_ascii_passes_through(self) -> None:
        assert percent_decode("café.html") == "café.html"

    def test_plus_is_not_a_space(self) -> None:
        assert percent_decode("a+b.txt") == "a+b.txt"

    def test_mixed_case_escapes(self) -> None:
        assert percent_decode("%41%2f%e2%82%AC") == "A/€"

    def test_invalid_escape_fails(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            percent_decode("%zz")
        assert exc_info.value.kind == "malformed-escape"

    def test_truncated_escape_fails(self) -> None:
        with pytest.raises(DecodeError):
            percent_decode("file%4")

    def test_lone_percent_fails(self) -> None:
        with pytest.raises(DecodeError):
            percent_decode("100%")

    def test_invalid_utf8_fails(self) -> None:
        """Escapes decoding to non-UTF-8 bytes are not passed through raw."""
        with pytest.raises(DecodeError) as exc_info:
            percent_decode("%ff%fe.txt")
        assert exc_info.value.kind == "invalid-utf8"

    def test_truncated_utf8_sequence_fails(self) -> None:
        with pytest.raises(DecodeError):
            percent_decode("caf%C3")


class TestSafePath:
    @pytest.mark.parametrize(
        "path",
        [
            "foo/bar/../baz/index.html",
            "foo/bar/../baz",
            "../bar/",
            "..",
            "/",
            "foo/..",
        ],
    )
    def test_unsafe(self, path: str) -> None:
        assert not is_safe_path(path), f"expected {path!r} to be suspicious"

    @pytest.mark.parametrize(
        "path",
        [
            "foo/bar/./baz/index.html",
            "foo/bar/./baz",
            "./bar/",
            ".",
            "index.html",
            "..hidden",
            "a..b/c",
        ],
    )
    def test_safe(self, path: str) -> None:
        assert is_safe_path(path), f"expected {path!r} to not be suspicious"

    def test_absolute_posix_path_unsafe(self) -> None:
        assert not is_safe_path("/etc/passwd", PurePosixPath)

    def test_backslash_is_a_name_under_posix(self) -> None:
        assert is_safe_path("..\\secret", PurePosixPath)


class TestWindowsRules:
    def test_drive_prefix(self) -> None:
        assert not is_safe_path("C:secret.txt", PureWindowsPath)

    def test_drive_and_root(self) -> None:
        assert not is_safe_path("C:\\Windows\\win.ini", PureWindowsPath)

    def test_backslash_parent(self) -> None:
        assert not is_safe_path("foo\\..\\bar", PureWindowsPath)

    def test_unc_share(self) -> None:
        assert not is_safe_path("\\\\server\\share\\file", PureWindowsPath)

    def test_drive_embedded_mid_path(self) -> None:
        assert not is_safe_path("foo/C:bar", PureWindowsPath)

    def test_plain_names(self) -> None:
        assert is_safe_path("foo\\bar.txt", PureWindowsPath)


class TestComponents:
    def test_classification(self) -> None:
        kinds = [kind for kind, _ in components("./a/../b", PurePosixPath)]
        assert kinds == [
            Component.CURRENT,
            Component.NORMAL,
            Component.PARENT,
            Component.NORMAL,
        ]

    def test_root_reported(self) -> None:
        assert list(components("/a", PurePosixPath)) == [
            (Component.ROOT, "/"),
            (Component.NORMAL, "a"),
        ]

    def test_bare_current_dir(self) -> None:
        assert list(components(".", PurePosixPath)) == [(Component.CURRENT, ".")]

    def test_windows_prefix_and_root(self) -> None:
        kinds = [kind for kind, _ in components("C:\\x", PureWindowsPath)]
        assert kinds == [Component.PREFIX, Component.ROOT, Component.NORMAL]
