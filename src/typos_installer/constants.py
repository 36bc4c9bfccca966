"""
Constants used throughout the typos installer
"""

# Release server
RELEASE_HOST = "https://github.com"
RELEASE_PROJECT = "crate-ci/typos"
RELEASE_BASE_URL = RELEASE_HOST + "/" + RELEASE_PROJECT + "/releases/download/v{version}/"
ASSET_PREFIX = "typos-v{version}"

# Directory constants
DEFAULT_INSTALL_DIR = "bin"
VERSION_FILE_NAME = ".version"
BINARY_NAME = "typos"

# File operation constants
EXECUTABLE_BITS = 0o111
CHUNK_SIZE = 4096

# Platform naming
WINDOWS_PLATFORM = "windows"
