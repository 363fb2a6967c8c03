"""Extension-based organizer.

Sorts every file under the working root into category folders directly
below it, then removes the directories the move left empty. The run is
split into four phases that each finish before the next one starts:

1. provision - create the category folders
2. scan      - collect a MoveTask for every file, without touching the tree
3. move      - rename each file into its folder under a free name
4. cleanup   - remove empty directories, deepest first

Every filesystem failure is recorded as a failed ItemResult and the
phase moves on to the next item.
"""

import logging
from pathlib import Path

from recsort.core.config import RecsortConfig
from recsort.core.errors import NameCollisionError
from recsort.core.paths import path_depth
from recsort.organizer.models import ActionKind, ItemResult, MoveTask, OrganizeReport
from recsort.organizer.naming import MAX_NAME_ATTEMPTS, free_destination
from recsort.organizer.protected import ProtectedPathSet
from recsort.organizer.walker import walk_tree

logger = logging.getLogger(__name__)


def order_deepest_first(directories: list[Path]) -> list[Path]:
    """Order directories so children are always checked before parents.

    Uses a stable sort on path depth, so directories at the same depth
    keep their traversal order.

    Args:
        directories: Directories to order.

    Returns:
        New list sorted by depth, deepest first.
    """
    return sorted(directories, key=path_depth, reverse=True)


class Organizer:
    """Moves files into extension folders and prunes emptied directories.

    Attributes:
        _config: Run configuration (classification table and ignore lists).
        _max_name_attempts: Bound on suffixed names tried per file.
    """

    def __init__(self, config: RecsortConfig, max_name_attempts: int = MAX_NAME_ATTEMPTS) -> None:
        """Initialize the Organizer.

        Args:
            config: Immutable run configuration.
            max_name_attempts: Maximum suffixed names tried per file.
        """
        self._config = config
        self._max_name_attempts = max_name_attempts

    def run(self, root: Path) -> OrganizeReport:
        """Run all four phases against root.

        Args:
            root: Absolute working root directory.

        Returns:
            OrganizeReport covering every phase.
        """
        protected = ProtectedPathSet.for_organizer(root, self._config)
        report = OrganizeReport(root=root)

        logger.info("Organizing files by extension under %s", root)

        report.provisioned = self.provision(root)
        report.tasks = self.scan(root, protected, report.scan_errors)
        logger.info("Found %d file(s) to organize", len(report.tasks))
        report.moves = self.move(root, report.tasks)
        report.cleanup = self.cleanup(root, protected)

        logger.info(
            "Moved %d file(s), skipped %d, removed %d empty director(ies)",
            report.moved_count,
            report.skipped_count,
            report.removed_dirs_count,
        )
        return report

    def provision(self, root: Path) -> list[ItemResult]:
        """Ensure every category folder exists directly under root.

        Args:
            root: Absolute working root directory.

        Returns:
            One CREATE result per category folder.
        """
        results: list[ItemResult] = []

        for name in self._config.category_names:
            folder = root / name
            try:
                folder.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                logger.warning("Cannot create category folder %s: %s", folder, e)
                results.append(
                    ItemResult(kind=ActionKind.CREATE, path=folder, success=False, error=str(e))
                )
                continue
            results.append(ItemResult(kind=ActionKind.CREATE, path=folder, success=True))

        return results

    def scan(
        self,
        root: Path,
        protected: ProtectedPathSet,
        errors: list[ItemResult],
    ) -> list[MoveTask]:
        """Collect a MoveTask for every file that needs organizing.

        The root itself is never classified, only its descendants.
        Ignored directories and the category folders are not entered,
        so a second run over an organized tree finds nothing to do.

        Args:
            root: Absolute working root directory.
            protected: Directories that must not be entered.
            errors: List receiving directory read failures.

        Returns:
            Move tasks in traversal order.
        """
        tasks: list[MoveTask] = []

        for step in walk_tree(root, protected, errors):
            for path in step.files:
                if path.name in self._config.ignored_files:
                    continue
                tasks.append(MoveTask(source=path, category=self._config.classify(path.name)))

        return tasks

    def move(self, root: Path, tasks: list[MoveTask]) -> list[ItemResult]:
        """Move each task's file into its category folder.

        Args:
            root: Absolute working root directory.
            tasks: Tasks produced by :meth:`scan`.

        Returns:
            One MOVE result per task, in task order.
        """
        return [self._move_single(root, task) for task in tasks]

    def cleanup(self, root: Path, protected: ProtectedPathSet) -> list[ItemResult]:
        """Remove directories left empty under root, deepest first.

        Ignored directories and category folders are neither entered nor
        removed. A directory is removed only if it has no entries at the
        moment it is checked, so a parent becomes eligible once all of
        its children have been handled.

        Args:
            root: Absolute working root directory.
            protected: Directories that must not be entered or removed.

        Returns:
            REMOVE_DIR results for removals and their failures, plus READ
            results for directories that could not be listed.
        """
        results: list[ItemResult] = []
        directories: list[Path] = []

        for step in walk_tree(root, protected, results):
            directories.extend(d for d in step.subdirs if not d.is_symlink())

        for directory in order_deepest_first(directories):
            if protected.is_protected(directory):
                continue

            try:
                is_empty = next(directory.iterdir(), None) is None
            except OSError as e:
                logger.warning("Cannot read directory %s: %s", directory, e)
                results.append(
                    ItemResult(kind=ActionKind.READ, path=directory, success=False, error=str(e))
                )
                continue

            if not is_empty:
                continue

            try:
                directory.rmdir()
            except OSError as e:
                logger.warning("Error removing %s: %s", directory, e)
                results.append(
                    ItemResult(
                        kind=ActionKind.REMOVE_DIR, path=directory, success=False, error=str(e)
                    )
                )
                continue

            logger.debug("Removed empty directory %s", directory)
            results.append(ItemResult(kind=ActionKind.REMOVE_DIR, path=directory, success=True))

        return results

    def _move_single(self, root: Path, task: MoveTask) -> ItemResult:
        """Move one file under a collision-free name.

        Args:
            root: Absolute working root directory.
            task: The move to perform.

        Returns:
            ItemResult with the final destination on success.
        """
        folder = root / task.category

        if not folder.is_dir():
            return ItemResult(
                kind=ActionKind.MOVE,
                path=task.source,
                success=False,
                error=f"Category folder does not exist: {folder}",
            )

        try:
            destination = free_destination(folder, task.source.name, self._max_name_attempts)
            task.source.rename(destination)
        except NameCollisionError as e:
            logger.warning("Cannot move %s: %s", task.source, e)
            return ItemResult(kind=ActionKind.MOVE, path=task.source, success=False, error=str(e))
        except OSError as e:
            logger.warning("Error moving %s: %s", task.source, e)
            return ItemResult(kind=ActionKind.MOVE, path=task.source, success=False, error=str(e))

        logger.debug("Moved %s -> %s", task.source, destination)
        return ItemResult(
            kind=ActionKind.MOVE,
            path=task.source,
            success=True,
            destination=destination,
        )


def organize_files(root: Path, config: RecsortConfig) -> OrganizeReport:
    """Convenience wrapper running an Organizer once.

    Args:
        root: Absolute working root directory.
        config: Run configuration.

    Returns:
        OrganizeReport for the run.
    """
    return Organizer(config).run(root)
