"""Tool release manifest records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass
class ToolReleaseFile:
    """One downloadable file of a tool release."""

    filename: str = ""
    platform: str = ""
    arch: str = ""
    download_url: str = ""
    platform_version: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ToolReleaseFile:
        """Build a file record from its manifest mapping."""
        return cls(
            filename=data.get("filename", ""),
            platform=data.get("platform", ""),
            arch=data.get("arch", ""),
            download_url=data.get("download_url", ""),
            platform_version=data.get("platform_version"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the manifest mapping, omitting an unset platform version."""
        result: dict[str, Any] = {
            "filename": self.filename,
            "platform": self.platform,
        }
        if self.platform_version is not None:
            result["platform_version"] = self.platform_version
        result["arch"] = self.arch
        result["download_url"] = self.download_url
        return result


@dataclass
class ToolRelease:
    """A released version of a tool and its files."""

    version: str = ""
    stable: bool = False
    release_url: str = ""
    files: list[ToolReleaseFile] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ToolRelease:
        """Build a release record from its manifest mapping."""
        return cls(
            version=data.get("version", ""),
            stable=bool(data.get("stable", False)),
            release_url=data.get("release_url", ""),
            files=[ToolReleaseFile.from_dict(item) for item in data.get("files") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the manifest mapping."""
        return {
            "version": self.version,
            "stable": self.stable,
            "release_url": self.release_url,
            "files": [item.to_dict() for item in self.files],
        }