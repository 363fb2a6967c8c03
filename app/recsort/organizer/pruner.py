"""Small-file pruner.

Walks the working tree and deletes every regular file smaller than the
configured threshold, skipping ignored directories and file names.
Failures are recorded per file and never stop the walk.
"""

import logging
import stat
from collections.abc import Iterator
from pathlib import Path

from recsort.core.config import RecsortConfig
from recsort.organizer.models import ActionKind, FileEntry, ItemResult, PruneReport
from recsort.organizer.protected import ProtectedPathSet
from recsort.organizer.walker import walk_tree

logger = logging.getLogger(__name__)


class Pruner:
    """Deletes files below a size threshold.

    Attributes:
        _config: Run configuration (threshold and ignore lists).
    """

    def __init__(self, config: RecsortConfig) -> None:
        """Initialize the Pruner.

        Args:
            config: Immutable run configuration.
        """
        self._config = config

    def run(self, root: Path) -> PruneReport:
        """Prune every small file under root.

        Files exactly at the threshold are kept. Directories are never
        removed, even when pruning leaves them empty.

        Args:
            root: Absolute working root directory.

        Returns:
            PruneReport with one result per deletion or failure.
        """
        protected = ProtectedPathSet.for_pruner(root, self._config)
        report = PruneReport(root=root, threshold=self._config.min_size_bytes)

        logger.info("Pruning files smaller than %d bytes under %s", report.threshold, root)

        for entry in self._iter_files(root, protected, report.results):
            if entry.size_bytes < report.threshold:
                report.results.append(self._delete(entry, protected))

        logger.info(
            "Pruned %d file(s), %d bytes freed, %d error(s)",
            report.removed_count,
            report.bytes_freed,
            report.error_count,
        )
        return report

    def _iter_files(
        self,
        root: Path,
        protected: ProtectedPathSet,
        results: list[ItemResult],
    ) -> Iterator[FileEntry]:
        """Yield every regular, non-ignored file with its size.

        Metadata read failures are appended to results as failed READs.
        """
        for step in walk_tree(root, protected, results):
            for path in step.files:
                if path.name in self._config.ignored_files:
                    continue

                try:
                    st = path.lstat()
                except OSError as e:
                    logger.warning("Error reading metadata for %s: %s", path, e)
                    results.append(
                        ItemResult(kind=ActionKind.READ, path=path, success=False, error=str(e))
                    )
                    continue

                if not stat.S_ISREG(st.st_mode):
                    logger.debug("Skipping non-regular file: %s", path)
                    continue

                yield FileEntry(path=path, size_bytes=st.st_size)

    def _delete(self, entry: FileEntry, protected: ProtectedPathSet) -> ItemResult:
        """Delete a single file.

        Args:
            entry: File to delete.
            protected: Protected set checked before deleting.

        Returns:
            ItemResult indicating success or failure.
        """
        if protected.is_protected(entry.path):
            return ItemResult(
                kind=ActionKind.DELETE,
                path=entry.path,
                success=False,
                error=f"Protected path cannot be deleted: {entry.path}",
                size_bytes=entry.size_bytes,
            )

        try:
            entry.path.unlink()
        except OSError as e:
            logger.warning("Error removing %s: %s", entry.path, e)
            return ItemResult(
                kind=ActionKind.DELETE,
                path=entry.path,
                success=False,
                error=str(e),
                size_bytes=entry.size_bytes,
            )

        logger.debug("Removed %s (%d bytes)", entry.path, entry.size_bytes)
        return ItemResult(
            kind=ActionKind.DELETE,
            path=entry.path,
            success=True,
            size_bytes=entry.size_bytes,
        )


def prune_small_files(root: Path, config: RecsortConfig) -> PruneReport:
    """Convenience wrapper running a Pruner once.

    Args:
        root: Absolute working root directory.
        config: Run configuration.

    Returns:
        PruneReport for the run.
    """
    return Pruner(config).run(root)
