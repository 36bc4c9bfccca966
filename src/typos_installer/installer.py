"""
Main installer functionality for the typos binary
"""

import os
from pathlib import Path
from typing import Optional, Union
from urllib.parse import urlparse

import requests

from .__version__ import __version__
from .constants import (
    CHUNK_SIZE,
    DEFAULT_INSTALL_DIR,
    EXECUTABLE_BITS,
    WINDOWS_PLATFORM,
)
from .exceptions import (
    DownloadError,
    FileSystemError,
    PermissionError,
)
from .extractors import get_extractor
from .marker import VersionMarker
from .platforms import binary_name, current_platform, resolve_download_url


class TyposInstaller:
    """Fetch, unpack and version-stamp the prebuilt typos binary"""

    def __init__(self, install_dir: Union[str, Path] = DEFAULT_INSTALL_DIR,
                 version: Optional[str] = None,
                 platform: Optional[str] = None,
                 arch: Optional[str] = None,
                 in_process: bool = False,
                 timeout: Optional[float] = None) -> None:
        if version is None:
            version = __version__
        detected_platform, detected_arch = current_platform()

        self.install_dir = Path(install_dir)
        self.version = version
        self.platform = platform or detected_platform
        self.arch = arch or detected_arch
        self.in_process = in_process
        self.timeout = timeout
        self.marker = VersionMarker(self.install_dir)

    @property
    def binary_path(self) -> Path:
        return self.install_dir / binary_name(self.platform)

    def is_up_to_date(self) -> bool:
        """Check the binary exists and the version marker matches"""
        return self.binary_path.is_file() and self.marker.matches(self.version)

    def create_install_dir(self) -> None:
        """Ensure the installation directory exists"""
        try:
            if not self.install_dir.exists():
                print(f"Creating directory: {self.install_dir}")
                self.install_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            if e.errno == 13:  # EACCES
                raise PermissionError(f"Permission denied creating directory: {e}")
            elif e.errno == 28:  # ENOSPC
                raise FileSystemError("No space left on device")
            else:
                raise FileSystemError(f"Failed to create directory {self.install_dir}: {e}")

    def download_url(self) -> str:
        return resolve_download_url(self.platform, self.arch, self.version)

    def download(self, url: str, dest_path: Path) -> None:
        """Stream a URL to dest_path"""
        print(f"Downloading typos from {url}")
        try:
            response = requests.get(url, stream=True, timeout=self.timeout)
        except requests.RequestException as e:
            raise DownloadError(f"Failed to download {url}: {e}")

        try:
            if not response.ok:
                raise DownloadError(
                    f"Failed to download {url}: {response.status_code} {response.reason}"
                )
            with open(dest_path, 'wb') as f:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        f.write(chunk)
        except requests.RequestException as e:
            raise DownloadError(f"Failed to download {url}: {e}")
        except OSError as e:
            if e.errno == 28:  # ENOSPC
                raise FileSystemError("No space left on device")
            raise FileSystemError(f"Cannot write {dest_path}: {e}")
        finally:
            response.close()

    def extract(self, archive_path: Path, dest_dir: Optional[Path] = None) -> None:
        """Unpack an archive with the strategy matching its suffix"""
        archive_path = Path(archive_path)
        extractor = get_extractor(archive_path, in_process=self.in_process)
        print(f"Extracting {archive_path}")
        extractor.extract(archive_path, Path(dest_dir) if dest_dir else self.install_dir)

    def make_executable(self, path: Path) -> None:
        """Add execute permission bits to path"""
        try:
            mode = path.stat().st_mode
            path.chmod(mode | EXECUTABLE_BITS)
        except OSError as e:
            raise PermissionError(f"Failed to make {path} executable: {e}")
        print(f"Made {path} executable")

    def remove_archive(self, archive_path: Path) -> None:
        try:
            archive_path.unlink()
        except OSError as e:
            raise FileSystemError(f"Failed to delete {archive_path}: {e}")

    def install(self, force: bool = False) -> bool:
        """Install the binary unless the current copy is up to date.

        Returns True when a download and extraction happened and False when
        the existing installation was kept. Any failure raises an
        InstallationError subclass; nothing is rolled back, the next run
        sees a stale marker and starts over.
        """
        self.create_install_dir()

        if not force and self.is_up_to_date():
            print(f"typos binary version {self.version} already exists and is up to date. "
                  "Skipping download and extraction.")
            return False

        url = self.download_url()
        archive_path = self.install_dir / os.path.basename(urlparse(url).path)

        self.download(url, archive_path)
        self.extract(archive_path)
        self.remove_archive(archive_path)
        self.marker.write(self.version)

        if self.platform == WINDOWS_PLATFORM:
            print(f"✓ typos version {self.version} downloaded and extracted")
        else:
            self.make_executable(self.binary_path)
            print(f"✓ typos version {self.version} downloaded, extracted, and made executable")
        return True


def install(install_dir: Union[str, Path], platform: str, arch: str,
            version: str, **kwargs) -> bool:
    """Convenience wrapper around TyposInstaller.install()"""
    installer = TyposInstaller(install_dir, version=version, platform=platform,
                               arch=arch, **kwargs)
    return installer.install()


__all__ = ["TyposInstaller", "install"]
