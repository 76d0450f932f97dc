"""Path separator conversions."""

from __future__ import annotations

import os


def to_posix_path(path: str) -> str:
    """Replace backslashes with forward slashes."""
    return path.replace("\\", "/")


def to_win32_path(path: str) -> str:
    """Replace forward slashes with backslashes."""
    return path.replace("/", "\\")


def to_platform_path(path: str) -> str:
    """Replace either separator with the one used by this platform."""
    return path.translate(str.maketrans({"/": os.sep, "\\": os.sep}))