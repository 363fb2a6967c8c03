"""Collision-free destination naming.

When a file of the same name already sits in the destination folder,
an incrementing ``_<n>`` suffix is appended to the stem (keeping the
extension) until a free name is found.
"""

import os
from pathlib import Path

from recsort.core.errors import NameCollisionError

# Upper bound on suffixed names tried for a single file.
MAX_NAME_ATTEMPTS: int = 10_000


def disambiguated_name(filename: str, counter: int) -> str:
    """Build the n-th disambiguated variant of a file name.

    Args:
        filename: Original file name, e.g. ``photo.png``.
        counter: Suffix number, starting at 1.

    Returns:
        Name with the suffix inserted before the extension,
        e.g. ``photo_1.png``. Names without an extension get the
        suffix appended.
    """
    path = Path(filename)
    return f"{path.stem}_{counter}{path.suffix}"


def free_destination(
    directory: Path,
    filename: str,
    max_attempts: int = MAX_NAME_ATTEMPTS,
) -> Path:
    """Find a destination path in directory that does not exist yet.

    Existence is checked without following symlinks, so a dangling
    link still counts as taken.

    Args:
        directory: Destination folder.
        filename: Desired file name.
        max_attempts: Maximum number of suffixed names to try.

    Returns:
        ``directory / filename`` if free, otherwise the first free
        ``directory / <stem>_<n><suffix>``.

    Raises:
        NameCollisionError: If no free name is found within max_attempts.
    """
    candidate = directory / filename
    if not os.path.lexists(candidate):
        return candidate

    for counter in range(1, max_attempts + 1):
        candidate = directory / disambiguated_name(filename, counter)
        if not os.path.lexists(candidate):
            return candidate

    raise NameCollisionError(str(directory), filename, max_attempts)
