"""
Platform detection and release asset resolution
"""

import sys
import platform as _platform
from typing import Dict, Optional, Tuple

from .constants import (
    ASSET_PREFIX,
    BINARY_NAME,
    RELEASE_BASE_URL,
    WINDOWS_PLATFORM,
)
from .exceptions import UnsupportedPlatformError

# Asset filename suffix for every supported (platform, arch) pair
ASSET_SUFFIXES: Dict[Tuple[str, str], str] = {
    ("windows", "x64"): "-x86_64-pc-windows-msvc.zip",
    ("linux", "x64"): "-x86_64-unknown-linux-musl.tar.gz",
    ("darwin", "x64"): "-x86_64-apple-darwin.tar.gz",
    ("darwin", "arm64"): "-aarch64-apple-darwin.tar.gz",
}

_OS_ALIASES = {
    "win32": "windows",
    "cygwin": "windows",
    "linux": "linux",
    "darwin": "darwin",
}

_ARCH_ALIASES = {
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "arm64": "arm64",
    "aarch64": "arm64",
}


def normalize_platform(name: str) -> str:
    """Map a sys.platform style name onto the release naming"""
    name = name.lower()
    if name.startswith("linux"):
        return "linux"
    return _OS_ALIASES.get(name, name)


def normalize_arch(machine: str) -> str:
    """Map a platform.machine() style name onto the release naming"""
    machine = machine.lower()
    return _ARCH_ALIASES.get(machine, machine)


def current_platform() -> Tuple[str, str]:
    """Return the (platform, arch) pair of the running interpreter.

    Unknown values are passed through untouched so that
    resolve_download_url() can report the exact combination.
    """
    return normalize_platform(sys.platform), normalize_arch(_platform.machine())


def binary_name(platform: Optional[str] = None) -> str:
    """Name of the installed executable for a platform"""
    if platform is None:
        platform = current_platform()[0]
    if platform == WINDOWS_PLATFORM:
        return BINARY_NAME + ".exe"
    return BINARY_NAME


def asset_filename(platform: str, arch: str, version: str) -> str:
    """Release archive filename for a platform/arch pair"""
    suffix = ASSET_SUFFIXES.get((platform, arch))
    if suffix is None:
        raise UnsupportedPlatformError(f"{platform}-{arch}")
    return ASSET_PREFIX.format(version=version) + suffix


def resolve_download_url(platform: str, arch: str, version: str) -> str:
    """Build the release download URL for a platform/arch pair and version"""
    return RELEASE_BASE_URL.format(version=version) + asset_filename(platform, arch, version)
