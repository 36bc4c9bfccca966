"""
Version marker management for installation tracking
"""

import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from .constants import VERSION_FILE_NAME
from .exceptions import FileSystemError, PermissionError


class VersionMarker:
    """Read and write the marker recording which version is installed"""

    def __init__(self, install_dir: Union[str, Path]) -> None:
        self.path = Path(install_dir) / VERSION_FILE_NAME

    def read(self) -> Optional[str]:
        """Return the trimmed marker contents, or None when there is no marker"""
        if not self.path.is_file():
            return None
        try:
            return self.path.read_text(encoding='utf-8').strip()
        except OSError as e:
            raise FileSystemError(f"Cannot read version marker {self.path}: {e}")

    def matches(self, version: str) -> bool:
        return self.read() == version

    def write(self, version: str) -> None:
        """Write the marker atomically so readers never see a partial value"""
        try:
            temp_fd, temp_path = tempfile.mkstemp(
                dir=self.path.parent,
                prefix=".version_",
                suffix=".tmp"
            )

            try:
                with os.fdopen(temp_fd, 'w', encoding='utf-8') as f:
                    f.write(version)
                    f.flush()
                    os.fsync(f.fileno())

                os.replace(temp_path, self.path)

            except Exception:
                # Clean up temp file on error
                try:
                    os.unlink(temp_path)
                except OSError:
                    pass
                raise

        except OSError as e:
            if e.errno == 28:  # ENOSPC
                raise FileSystemError("No space left on device")
            elif e.errno == 13:  # EACCES
                raise PermissionError(f"Permission denied writing version marker: {e}")
            else:
                raise FileSystemError(f"Failed to write version marker {self.path}: {e}")
