"""Building and writing the job step summary file."""

from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass
from typing import Union

SUMMARY_ENV_VAR = "GITHUB_STEP_SUMMARY"
SUMMARY_DOCS_URL = (
    "https://docs.github.com/actions/using-workflows/"
    "workflow-commands-for-github-actions#adding-a-job-summary"
)

EOL = "\r\n" if sys.platform == "win32" else "\n"


@dataclass
class SummaryTableCell:
    """A single table cell."""

    data: str
    header: bool | None = None
    colspan: str | None = None
    rowspan: str | None = None


SummaryTableRow = list[Union[SummaryTableCell, str]]


@dataclass
class SummaryImageOptions:
    """Optional image dimensions."""

    width: str | None = None
    height: str | None = None


class Summary:
    """A buffered job summary that can be flushed to the summary file."""

    def __init__(self) -> None:
        self._buffer = ""
        self._file_path: str | None = None

    def _resolve_file_path(self) -> str:
        if self._file_path is not None:
            return self._file_path

        path = os.environ.get(SUMMARY_ENV_VAR, "")
        if not path:
            raise RuntimeError(
                f"unable to find environment variable for {SUMMARY_ENV_VAR!r}. "
                "check if your runtime environment supports job summaries"
            )
        try:
            mode = os.stat(path).st_mode
        except OSError as exc:
            raise OSError(
                f"unable to access summary file {path!r}. "
                "check if the file has correct read/write permissions"
            ) from exc
        if stat.S_IMODE(mode) & 0o777 != 0o666:
            raise OSError(
                f"unable to access summary file {path!r}. "
                "check if the file has correct read/write permissions"
            )

        self._file_path = path
        return path

    @staticmethod
    def _wrap(tag: str, content: str | None = None, attrs: dict[str, str] | None = None) -> str:
        html_attrs = "".join(f' {key}="{value}"' for key, value in (attrs or {}).items())
        if not content:
            return f"<{tag}{html_attrs}/>"
        return f"<{tag}{html_attrs}>{content}</{tag}>"

    def write(self, overwrite: bool = False) -> Summary:
        """Write the buffer to the summary file and empty it."""
        path = self._resolve_file_path()
        mode = "w" if overwrite else "a"
        with open(path, mode, encoding="utf-8", newline="") as handle:
            handle.write(self._buffer)
        return self.empty_buffer()

    def clear(self) -> Summary:
        """Empty the buffer and truncate the summary file."""
        return self.empty_buffer().write(overwrite=True)

    def stringify(self) -> str:
        """Return the buffered text."""
        return self._buffer

    __str__ = stringify

    def is_empty_buffer(self) -> bool:
        """Whether nothing is buffered."""
        return self._buffer == ""

    def empty_buffer(self) -> Summary:
        """Discard the buffered text."""
        self._buffer = ""
        return self

    def add_raw(self, text: str, add_eol: bool = False) -> Summary:
        """Append raw text, optionally followed by a line ending."""
        self._buffer += text
        return self.add_eol() if add_eol else self

    def add_eol(self) -> Summary:
        """Append the platform line ending."""
        self._buffer += EOL
        return self