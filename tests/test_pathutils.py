import os

import pytest

from actionskit.pathutils import to_platform_path, to_posix_path, to_win32_path

SAMPLES = ["", "plain", "a/b/c", "a\\b\\c", "/abs/mixed\\path/", "C:\\Users\\me/x"]


def test_to_posix_path_pinned():
    assert to_posix_path("a\\b\\c") == "a/b/c"


def test_to_win32_path_pinned():
    assert to_win32_path("a/b/c") == "a\\b\\c"


@pytest.mark.parametrize("path", SAMPLES)
def test_posix_has_no_backslashes(path):
    result = to_posix_path(path)
    assert "\\" not in result
    assert len(result) == len(path)


@pytest.mark.parametrize("path", SAMPLES)
def test_win32_has_no_slashes(path):
    result = to_win32_path(path)
    assert "/" not in result
    assert len(result) == len(path)


@pytest.mark.parametrize("path", SAMPLES)
def test_conversions_are_reversible(path):
    assert to_posix_path(to_win32_path(path)) == to_posix_path(path)
    assert to_win32_path(to_posix_path(path)) == to_win32_path(path)


@pytest.mark.parametrize("path", SAMPLES)
def test_platform_path_uses_os_separator(path):
    result = to_platform_path(path)
    other = "\\" if os.sep == "/" else "/"
    assert other not in result
    assert result.count(os.sep) == path.count("/") + path.count("\\")


def test_platform_path_matches_native_conversion():
    expected = to_win32_path("x/y\\z") if os.sep == "\\" else to_posix_path("x/y\\z")
    assert to_platform_path("x/y\\z") == expected