"""Tree traversal with exclusion rules.

Wraps ``os.walk`` so that protected directories are pruned before they
are entered, and directory read failures are collected as ItemResults
instead of being dropped.
"""

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from recsort.organizer.models import ActionKind, ItemResult
from recsort.organizer.protected import ProtectedPathSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WalkStep:
    """One directory visited during traversal.

    Attributes:
        directory: Absolute path of the visited directory.
        subdirs: Child directories that will be entered next.
        files: Non-directory entries in the directory.
    """

    directory: Path
    subdirs: tuple[Path, ...]
    files: tuple[Path, ...]


def walk_tree(
    root: Path,
    protected: ProtectedPathSet,
    errors: list[ItemResult],
) -> Iterator[WalkStep]:
    """Walk the tree below root top-down, skipping protected directories.

    The root itself is visited so that its files and subdirectories are
    reported, but it is never treated as a candidate. Entries are
    visited in sorted order so runs are reproducible. Symlinked
    directories are listed as subdirectories but not followed.

    Args:
        root: Directory to walk.
        protected: Directories that must not be entered.
        errors: List that receives a failed READ result for each
            directory that could not be listed.

    Yields:
        WalkStep for each visited directory.
    """

    def _on_error(exc: OSError) -> None:
        failed = Path(exc.filename) if exc.filename else root
        logger.warning("Cannot read directory %s: %s", failed, exc.strerror or exc)
        errors.append(
            ItemResult(kind=ActionKind.READ, path=failed, success=False, error=str(exc))
        )

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        directory = Path(dirpath)

        # Prune in place so os.walk never descends into protected directories
        dirnames[:] = sorted(d for d in dirnames if not protected.is_skipped_dir(directory / d))

        yield WalkStep(
            directory=directory,
            subdirs=tuple(directory / d for d in dirnames),
            files=tuple(directory / f for f in sorted(filenames)),
        )
