"""Issuing workflow commands on standard output."""

from __future__ import annotations

import sys
from typing import Any, Mapping

from .utils import to_command_value

EOL = "\r\n" if sys.platform == "win32" else "\n"

_CMD_STRING = "::"

_DATA_ESCAPES = str.maketrans({"%": "%25", "\r": "%0D", "\n": "%0A"})
_PROPERTY_ESCAPES = str.maketrans(
    {"%": "%25", "\r": "%0D", "\n": "%0A", ":": "%3A", ",": "%2C"}
)


def _escape_data(value: Any) -> str:
    return to_command_value(value).translate(_DATA_ESCAPES)


def _escape_property(value: Any) -> str:
    return to_command_value(value).translate(_PROPERTY_ESCAPES)


def _format_command(command: str, properties: Mapping[str, Any] | None, message: Any) -> str:
    text = _CMD_STRING + (command or "missing.command")
    if properties:
        pairs = ",".join(
            f"{key}={_escape_property(value)}"
            for key, value in properties.items()
            if value is not None
        )
        text += " " + pairs
    return text + _CMD_STRING + _escape_data(message)


def issue_command(command: str, properties: Mapping[str, Any] | None = None, message: Any = "") -> None:
    """Write a ``::command key=value::message`` line to standard output."""
    sys.stdout.write(_format_command(command, properties, message) + EOL)


def issue(name: str, message: str | None = None) -> None:
    """Issue a command with no properties."""
    issue_command(name, {}, message if message is not None else "")