"""Working root resolution and path helpers.

recsort always operates on the process's current working directory.
The root is resolved once per operation and every other path is
derived from it.
"""

import os
from pathlib import Path

from recsort.core.errors import RootResolutionError


def resolve_root() -> Path:
    """Resolve the working root directory.

    Returns:
        Absolute path of the current working directory.

    Raises:
        RootResolutionError: If the current directory cannot be determined
            (e.g. it was deleted or is no longer accessible).
    """
    try:
        root = Path.cwd()
    except OSError as e:
        raise RootResolutionError(f"Failed to get current directory: {e}") from e

    if not root.is_dir():
        raise RootResolutionError(f"Working directory is not a directory: {root}")

    return root


def path_depth(path: Path) -> int:
    """Number of components in a path, used to order directory cleanup."""
    return len(path.parts)


def display_text(text: str) -> str:
    """Make text derived from file names safe to print.

    Bytes in a file name that are not valid UTF-8 reach Python as lone
    surrogates, which cannot be written to a UTF-8 stream. They are
    rendered as ``\\xNN`` escapes instead, e.g. a name holding the byte
    0xFF prints as ``f\\xff01.jpg``.

    Args:
        text: Path or message text.

    Returns:
        Printable text; valid UTF-8 passes through unchanged.
    """
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")


def display_path(path: Path | str) -> str:
    """Format a path for console output."""
    return display_text(os.fspath(path))


def relative_display(path: Path, root: Path) -> str:
    """Format a path relative to the root for console output.

    Args:
        path: Path to format.
        root: Working root directory.

    Returns:
        Root-relative path string, or the absolute path if outside root.
    """
    try:
        return display_path(path.relative_to(root))
    except ValueError:
        return display_path(path)
