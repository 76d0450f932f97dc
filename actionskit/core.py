"""Core workflow helpers: inputs, exit codes and secret masking."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .command import issue_command


@dataclass
class InputOptions:
    """Options for reading an action input."""

    required: bool | None = None
    trim_whitespace: bool | None = None


class ExitCode(IntEnum):
    """Process exit codes for an action."""

    SUCCESS = 0
    FAILURE = 1


def set_secret(secret: str) -> None:
    """Register a value to be masked in the log."""
    issue_command("add-mask", {}, secret)