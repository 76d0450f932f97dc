"""Conversion helpers shared by workflow commands."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass
class AnnotationProperties:
    """Optional location and title details attached to an annotation."""

    title: str | None = None
    file: str | None = None
    start_line: str | None = None
    end_line: str | None = None
    start_column: str | None = None
    end_column: str | None = None


def to_command_value(value: Any) -> str:
    """Render a value as a command string.

    ``None`` becomes the empty string, strings are returned unchanged and
    anything else is encoded as compact JSON.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def to_command_properties(properties: AnnotationProperties) -> dict[str, str | None]:
    """Map annotation properties to the property names used by commands."""
    fields = {
        "title": properties.title,
        "file": properties.file,
        "startLine": properties.start_line,
        "endLine": properties.end_line,
        "startColumn": properties.start_column,
        "endColumn": properties.end_column,
    }
    if all(value is None for value in fields.values()):
        return {}
    return fields