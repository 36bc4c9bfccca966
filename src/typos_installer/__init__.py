"""
typos-installer: fetch the prebuilt typos spell checker for this platform
"""

from .__version__ import __version__

__author__ = "Your Name"
__email__ = "your.email@example.com"

from .installer import TyposInstaller, install
from .exceptions import (
    InstallationError,
    UnsupportedPlatformError,
    DownloadError,
    UnsupportedArchiveFormatError,
    ExtractionError,
    PermissionError,
    FileSystemError,
)

__all__ = [
    "TyposInstaller",
    "install",
    "InstallationError",
    "UnsupportedPlatformError",
    "DownloadError",
    "UnsupportedArchiveFormatError",
    "ExtractionError",
    "PermissionError",
    "FileSystemError",
]
