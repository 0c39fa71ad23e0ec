"""Pytest configuration and fixtures."""

import shutil
import tempfile
from pathlib import Path

import pytest

from findrr.core.models import FileCandidate


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def sample_tree(temp_dir):
    """Root with a 10-byte foo.txt and a 200-byte sub/bar.txt."""
    root = temp_dir / "root"
    sub = root / "sub"
    sub.mkdir(parents=True)
    (root / "foo.txt").write_bytes(b"x" * 10)
    (sub / "bar.txt").write_bytes(b"y" * 200)
    return root


@pytest.fixture
def make_candidate():
    """Factory for FileCandidate objects with sensible defaults."""

    def _make(name="a.txt", size=0, inode=1, nlinks=1, path=None):
        return FileCandidate(
            name=name,
            path=path or f"/tmp/{name}",
            inode=inode,
            size=size,
            nlinks=nlinks,
        )

    return _make


@pytest.fixture
def script(temp_dir):
    """Write an executable shell script and return its path."""

    def _script(body: str, name: str = "hook.sh") -> Path:
        path = temp_dir / name
        path.write_text(f"#!/bin/sh\n{body}\n")
        path.chmod(0o755)
        return path

    return _script
