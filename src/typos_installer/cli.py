"""
Command-line interface for the typos installer
"""

import sys
import argparse
import subprocess
from pathlib import Path
from typing import List, Optional

from .__version__ import __version__
from .constants import DEFAULT_INSTALL_DIR
from .exceptions import InstallationError
from .installer import TyposInstaller

# Where the `typos` runner keeps its own copy of the binary
PACKAGE_BIN_DIR = Path(__file__).resolve().parent / "bin"


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser"""
    parser = argparse.ArgumentParser(
        description="Download the prebuilt typos binary for this platform",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Install typos into ./bin
  typos-install

  # Install a specific release somewhere else
  typos-install --typos-version 1.31.1 --install-dir ~/.local/bin

  # Fetch the macOS arm64 build from a Linux host
  typos-install --platform darwin --arch arm64

  # Hosts without tar/unzip
  typos-install --in-process
        """
    )

    parser.add_argument(
        "--install-dir", "-d",
        default=DEFAULT_INSTALL_DIR,
        help=f"Installation directory (default: ./{DEFAULT_INSTALL_DIR})"
    )

    parser.add_argument(
        "--typos-version", "-V",
        dest="target_version",
        default=__version__,
        help=f"typos release to install (default: {__version__})"
    )

    parser.add_argument(
        "--platform",
        help="Target platform: windows, linux or darwin (default: detected)"
    )

    parser.add_argument(
        "--arch",
        help="Target architecture: x64 or arm64 (default: detected)"
    )

    parser.add_argument(
        "--in-process",
        action="store_true",
        help="Extract with Python's tarfile/zipfile instead of tar/unzip"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        help="Download timeout in seconds (default: wait indefinitely)"
    )

    parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Reinstall even if the installed version is up to date"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for CLI"""
    parser = create_parser()
    args = parser.parse_args(argv)

    installer = TyposInstaller(
        args.install_dir,
        version=args.target_version,
        platform=args.platform,
        arch=args.arch,
        in_process=args.in_process,
        timeout=args.timeout,
    )

    try:
        installer.install(force=args.force)
    except InstallationError as e:
        print(f"✗ Installation failed: {e}")
        sys.exit(1)

    sys.exit(0)


def run_typos() -> None:
    """Run the typos binary, installing it on first use"""
    installer = TyposInstaller(PACKAGE_BIN_DIR)

    if not installer.is_up_to_date():
        try:
            installer.install()
        except InstallationError as e:
            print(f"✗ Failed to install typos: {e}", file=sys.stderr)
            sys.exit(1)

    result = subprocess.run([str(installer.binary_path), *sys.argv[1:]], check=False)
    sys.exit(result.returncode)


if __name__ == "__main__":
    main()
