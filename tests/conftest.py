"""
Shared fixtures for the typos installer tests
"""

import io
import tarfile
import zipfile
from unittest.mock import MagicMock

import pytest


def build_tarball(files):
    """Return gzip-compressed tar bytes holding {name: content}"""
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w:gz") as tar:
        for name, content in files.items():
            info = tarfile.TarInfo(name)
            info.size = len(content)
            info.mode = 0o644
            tar.addfile(info, io.BytesIO(content))
    return buf.getvalue()


def build_zip(files):
    """Return zip bytes holding {name: content}"""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        for name, content in files.items():
            zf.writestr(name, content)
    return buf.getvalue()


@pytest.fixture
def tarball_bytes():
    return build_tarball({"typos": b"#!/bin/sh\necho typos\n"})


@pytest.fixture
def zip_bytes():
    return build_zip({"typos.exe": b"MZ fake windows binary"})


@pytest.fixture
def fake_response():
    """Factory for objects shaped like a streaming requests.Response"""
    def _make(data=b"", ok=True, status_code=200, reason="OK"):
        response = MagicMock()
        response.ok = ok
        response.status_code = status_code
        response.reason = reason
        response.iter_content.return_value = [data[i:i + 1024] for i in range(0, len(data), 1024)]
        return response
    return _make


@pytest.fixture
def make_tarball():
    return build_tarball


@pytest.fixture
def make_zip():
    return build_zip
