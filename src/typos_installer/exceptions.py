"""
Custom exceptions for the typos installer
"""


class InstallationError(Exception):
    """Base exception for installation errors"""
    pass


class UnsupportedPlatformError(InstallationError):
    """Raised when no release asset exists for a platform/arch pair"""

    def __init__(self, platform_arch: str) -> None:
        super().__init__(f"Unsupported platform: {platform_arch}")
        self.platform_arch = platform_arch


class DownloadError(InstallationError):
    """Raised when the release archive cannot be downloaded"""
    pass


class UnsupportedArchiveFormatError(InstallationError):
    """Raised when an archive has no matching extraction strategy"""
    pass


class ExtractionError(InstallationError):
    """Raised when extracting an archive fails"""
    pass


class PermissionError(InstallationError):
    """Raised when permission operations fail"""
    pass


class FileSystemError(InstallationError):
    """Raised when creating, writing or deleting files fails"""
    pass
