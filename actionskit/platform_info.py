"""Details about the operating system and architecture of the runner."""

from __future__ import annotations

import platform as _platform
import re
import subprocess
import sys
from dataclasses import dataclass


def _go_style_platform(name: str) -> str:
    if name in ("win32", "cygwin", "msys"):
        return "windows"
    for prefix in ("linux", "darwin", "freebsd", "openbsd", "netbsd", "aix"):
        if name.startswith(prefix):
            return prefix
    return name


_ARCH_ALIASES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "x64": "amd64",
    "i386": "386",
    "i486": "386",
    "i586": "386",
    "i686": "386",
    "x86": "386",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv6l": "arm",
    "armv7l": "arm",
    "armv8l": "arm",
    "arm": "arm",
    "ppc64le": "ppc64le",
    "ppc64": "ppc64",
    "s390x": "s390x",
    "riscv64": "riscv64",
}


def _go_style_arch(machine: str) -> str:
    machine = machine.lower()
    return _ARCH_ALIASES.get(machine, machine)


PLATFORM = _go_style_platform(sys.platform)
ARCH = _go_style_arch(_platform.machine())
IS_WINDOWS = PLATFORM == "windows"
IS_MACOS = PLATFORM == "darwin"
IS_LINUX = PLATFORM == "linux"


@dataclass(frozen=True)
class OSInfo:
    """Name and version of the operating system."""

    name: str = ""
    version: str = ""


@dataclass(frozen=True)
class PlatformDetails:
    """Operating system name and version together with platform facts."""

    name: str
    platform: str
    arch: str
    version: str
    is_windows: bool
    is_macos: bool
    is_linux: bool


def _output(*args: str) -> str:
    return subprocess.run(args, capture_output=True, check=True, text=True).stdout


def _windows_info() -> OSInfo:
    version = _output(
        "powershell",
        "-command",
        "(Get-CimInstance -ClassName Win32_OperatingSystem).Version",
    )
    name = _output(
        "powershell",
        "-command",
        "(Get-CimInstance -ClassName Win32_OperatingSystem).Caption",
    )
    return OSInfo(name=name.strip(), version=version.strip())


_MAC_VERSION = re.compile(r"ProductVersion:\s*(.+)")
_MAC_NAME = re.compile(r"ProductName:\s*(.+)")


def _macos_info() -> OSInfo:
    out = _output("sw_vers")
    version = _MAC_VERSION.search(out)
    name = _MAC_NAME.search(out)
    return OSInfo(
        name=name.group(1) if name else "",
        version=version.group(1) if version else "",
    )


def _linux_info() -> OSInfo:
    out = _output("lsb_release", "-i", "-r", "-s")
    lines = out.strip().split("\n")
    if len(lines) < 2:
        return OSInfo()
    return OSInfo(name=lines[0].strip(), version=lines[1].strip())


def get_details() -> PlatformDetails:
    """Query the operating system for its name and version.

    Raises ``subprocess.CalledProcessError`` or ``OSError`` when the
    system tool used for the query fails or is missing.
    """
    if IS_WINDOWS:
        info = _windows_info()
    elif IS_MACOS:
        info = _macos_info()
    else:
        info = _linux_info()
    return PlatformDetails(
        name=info.name,
        platform=PLATFORM,
        arch=ARCH,
        version=info.version,
        is_windows=IS_WINDOWS,
        is_macos=IS_MACOS,
        is_linux=IS_LINUX,
    )