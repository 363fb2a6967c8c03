"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable
from pathlib import Path

import pytest

# Wide console so Rich never wraps long tmp_path lines in CLI output.
os.environ["COLUMNS"] = "200"

KIB = 1024


def write_file(path: Path, size: int) -> Path:
    """Create a file of exactly ``size`` bytes, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def make_file() -> Callable[[Path, int], Path]:
    """Factory fixture creating files of a given size."""
    return write_file


@pytest.fixture
def recovery_tree(tmp_path: Path) -> Path:
    """A small file-recovery dump with project infrastructure mixed in.

    Layout (sizes in bytes)::

        recup_dir.1/f0001.jpg        30720
        recup_dir.1/f0002.txt          100
        recup_dir.2/f0001.jpg        40960   same name as recup_dir.1
        recup_dir.2/deep/clip.MKV    25600
        recup_dir.2/deep/notes       20480   exactly at threshold, no extension
        .git/objects/ab/cdef            10
        node_modules/pkg/index.js       50
        src/main.rs                     80
        Cargo.toml                      12
    """
    write_file(tmp_path / "recup_dir.1" / "f0001.jpg", 30 * KIB)
    write_file(tmp_path / "recup_dir.1" / "f0002.txt", 100)
    write_file(tmp_path / "recup_dir.2" / "f0001.jpg", 40 * KIB)
    write_file(tmp_path / "recup_dir.2" / "deep" / "clip.MKV", 25 * KIB)
    write_file(tmp_path / "recup_dir.2" / "deep" / "notes", 20 * KIB)
    write_file(tmp_path / ".git" / "objects" / "ab" / "cdef", 10)
    write_file(tmp_path / "node_modules" / "pkg" / "index.js", 50)
    write_file(tmp_path / "src" / "main.rs", 80)
    write_file(tmp_path / "Cargo.toml", 12)
    return tmp_path
