"""Protected paths that must never be deleted, moved or removed.

A ProtectedPathSet is built fresh for each operation. It combines the
infrastructure directory names skipped at any depth with a set of
absolute directories (the category folders, for the organizer) that
are protected only at their exact location.
"""

from dataclasses import dataclass
from pathlib import Path

from recsort.core.config import RecsortConfig


@dataclass(frozen=True, slots=True)
class ProtectedPathSet:
    """Immutable set of protected directories for one run.

    Attributes:
        root: Working root directory.
        ignored_names: Directory names protected at any depth below root.
        paths: Absolute directories protected at their exact location.
    """

    root: Path
    ignored_names: frozenset[str]
    paths: frozenset[Path]

    @classmethod
    def for_pruner(cls, root: Path, config: RecsortConfig) -> "ProtectedPathSet":
        """Build the protected set used when pruning small files."""
        return cls(
            root=root,
            ignored_names=config.ignored_dirs,
            paths=frozenset(root / name for name in config.ignored_dirs),
        )

    @classmethod
    def for_organizer(cls, root: Path, config: RecsortConfig) -> "ProtectedPathSet":
        """Build the protected set used when organizing.

        Adds every category folder under root to the infrastructure set,
        so organized files are never re-scanned and empty category
        folders are never removed.
        """
        paths = {root / name for name in config.ignored_dirs}
        paths.update(root / name for name in config.category_names)
        return cls(root=root, ignored_names=config.ignored_dirs, paths=frozenset(paths))

    def is_skipped_dir(self, path: Path) -> bool:
        """Check if traversal must not enter this directory.

        Args:
            path: Absolute directory path below root.

        Returns:
            True if the directory is ignored by name or protected by path.
        """
        return path.name in self.ignored_names or path in self.paths

    def is_protected(self, path: Path) -> bool:
        """Check if a path is, or lies inside, a protected directory.

        Args:
            path: Absolute path to check.

        Returns:
            True if the path or any ancestor up to root is protected.
            The root itself is never protected.
        """
        try:
            relative = path.relative_to(self.root)
        except ValueError:
            # Outside the working root is never ours to touch.
            return True

        current = self.root
        for part in relative.parts:
            current = current / part
            if part in self.ignored_names or current in self.paths:
                return True
        return False
