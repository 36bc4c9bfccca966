"""
Archive extraction strategies, selected by archive filename suffix
"""

import tarfile
import zipfile
import subprocess
from pathlib import Path
from typing import List, Tuple, Type, Union

from .exceptions import ExtractionError, UnsupportedArchiveFormatError


class Extractor:
    """Base class for extraction strategies"""

    suffixes: Tuple[str, ...] = ()

    def handles(self, archive_path: Union[str, Path]) -> bool:
        return Path(archive_path).name.lower().endswith(self.suffixes)

    def extract(self, archive_path: Path, dest_dir: Path) -> None:
        raise NotImplementedError


class CommandExtractor(Extractor):
    """Extract by running an external archive tool"""

    tool = ""

    def build_command(self, archive_path: Path, dest_dir: Path) -> List[str]:
        raise NotImplementedError

    def extract(self, archive_path: Path, dest_dir: Path) -> None:
        command = self.build_command(archive_path, dest_dir)
        hint = (f"Please make sure `{self.tool}` is installed and available "
                f"in your PATH.")
        try:
            subprocess.run(command, check=True, capture_output=True)
        except FileNotFoundError:
            raise ExtractionError(f"Cannot run `{self.tool}` to extract {archive_path.name}. {hint}")
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or b"").decode('utf-8', errors='ignore').strip()
            detail = f": {stderr}" if stderr else ""
            raise ExtractionError(
                f"Failed to extract {archive_path.name} "
                f"(`{self.tool}` exited with {e.returncode}){detail}. {hint}"
            )


class TarCommandExtractor(CommandExtractor):
    suffixes = ('.tar.gz', '.tgz')
    tool = "tar"

    def build_command(self, archive_path: Path, dest_dir: Path) -> List[str]:
        return [self.tool, "-xzf", str(archive_path), "-C", str(dest_dir)]


class UnzipCommandExtractor(CommandExtractor):
    suffixes = ('.zip',)
    tool = "unzip"

    def build_command(self, archive_path: Path, dest_dir: Path) -> List[str]:
        return [self.tool, "-o", str(archive_path), "-d", str(dest_dir)]


def _check_member(dest_dir: Path, name: str) -> None:
    """Reject archive members that would land outside dest_dir"""
    target = (dest_dir / name).resolve()
    root = dest_dir.resolve()
    if target != root and root not in target.parents:
        raise ExtractionError(f"Archive member {name} is outside {dest_dir}")


class TarFileExtractor(Extractor):
    """Extract gzip-compressed tarballs with the tarfile module"""

    suffixes = ('.tar.gz', '.tgz')

    def extract(self, archive_path: Path, dest_dir: Path) -> None:
        try:
            with tarfile.open(archive_path, "r:gz") as tar:
                members = tar.getmembers()
                for member in members:
                    _check_member(dest_dir, member.name)
                    if member.issym() or member.islnk():
                        raise ExtractionError(f"Archive member {member.name} is a link")
                tar.extractall(dest_dir, members=members)
        except (tarfile.TarError, OSError) as e:
            raise ExtractionError(f"Failed to extract {archive_path.name}: {e}")


class ZipFileExtractor(Extractor):
    """Extract zip archives with the zipfile module"""

    suffixes = ('.zip',)

    def extract(self, archive_path: Path, dest_dir: Path) -> None:
        try:
            with zipfile.ZipFile(archive_path, 'r') as zip_ref:
                for name in zip_ref.namelist():
                    _check_member(dest_dir, name)
                zip_ref.extractall(dest_dir)
        except (zipfile.BadZipFile, OSError) as e:
            raise ExtractionError(f"Failed to extract {archive_path.name}: {e}")


COMMAND_EXTRACTORS: List[Type[Extractor]] = [TarCommandExtractor, UnzipCommandExtractor]
IN_PROCESS_EXTRACTORS: List[Type[Extractor]] = [TarFileExtractor, ZipFileExtractor]


def get_extractor(archive_path: Union[str, Path], in_process: bool = False) -> Extractor:
    """Pick the extraction strategy for an archive by its filename suffix"""
    candidates = IN_PROCESS_EXTRACTORS if in_process else COMMAND_EXTRACTORS
    for extractor_class in candidates:
        extractor = extractor_class()
        if extractor.handles(archive_path):
            return extractor
    raise UnsupportedArchiveFormatError(
        f"Unsupported file extension: {Path(archive_path).name}"
    )
