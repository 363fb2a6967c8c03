"""Domain models for prune and organize runs.

This module defines the transient records produced while walking a
tree (file entries, move tasks) and the per-item results and run
reports handed back to the caller.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class ActionKind(str, Enum):
    """Kind of filesystem action recorded in an ItemResult.

    Attributes:
        DELETE: Delete a file below the size threshold.
        CREATE: Create a category folder.
        MOVE: Move a file into its category folder.
        REMOVE_DIR: Remove an empty directory.
        READ: Read metadata or list a directory.
    """

    DELETE = "delete"
    CREATE = "create"
    MOVE = "move"
    REMOVE_DIR = "remove_dir"
    READ = "read"


@dataclass(frozen=True, slots=True)
class FileEntry:
    """A regular file discovered during traversal.

    Attributes:
        path: Absolute path of the file.
        size_bytes: File length in bytes.
    """

    path: Path
    size_bytes: int


@dataclass(frozen=True, slots=True)
class MoveTask:
    """A file scheduled to be moved into a category folder.

    Attributes:
        source: Absolute path of the file to move.
        category: Name of the destination category folder.
    """

    source: Path
    category: str

    def __post_init__(self) -> None:
        """Validate move task data after initialization."""
        if not self.category:
            msg = "Category cannot be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ItemResult:
    """Outcome of a single filesystem action.

    Attributes:
        kind: What was attempted.
        path: Path that was operated on.
        success: Whether the action completed.
        error: Error text if the action failed, None otherwise.
        destination: Final path for moves.
        size_bytes: File size for deletions.
    """

    kind: ActionKind
    path: Path
    success: bool
    error: str | None = None
    destination: Path | None = None
    size_bytes: int | None = None

    @property
    def failed(self) -> bool:
        """Check if the action failed."""
        return not self.success


@dataclass(slots=True)
class PruneReport:
    """Summary of a prune run.

    Attributes:
        root: Directory that was pruned.
        threshold: Size floor in bytes used for the run.
        results: Deletions and failures in traversal order.
    """

    root: Path
    threshold: int
    results: list[ItemResult] = field(default_factory=list)

    @property
    def removed(self) -> list[ItemResult]:
        return [r for r in self.results if r.kind == ActionKind.DELETE and r.success]

    @property
    def errors(self) -> list[ItemResult]:
        return [r for r in self.results if r.failed]

    @property
    def removed_count(self) -> int:
        return len(self.removed)

    @property
    def bytes_freed(self) -> int:
        return sum(r.size_bytes or 0 for r in self.removed)

    @property
    def kib_freed(self) -> float:
        """Bytes freed in KiB, rounded to two decimals."""
        return round(self.bytes_freed / 1024, 2)

    @property
    def error_count(self) -> int:
        return len(self.errors)


@dataclass(slots=True)
class OrganizeReport:
    """Summary of an organize run.

    Each list holds the results of one phase, in processing order.

    Attributes:
        root: Directory that was organized.
        provisioned: Category folder creation results.
        scan_errors: Directory read failures hit while scanning.
        tasks: Move tasks collected by the scan phase.
        moves: Move results, one per task.
        cleanup: Directory removal and read failure results.
    """

    root: Path
    provisioned: list[ItemResult] = field(default_factory=list)
    scan_errors: list[ItemResult] = field(default_factory=list)
    tasks: list[MoveTask] = field(default_factory=list)
    moves: list[ItemResult] = field(default_factory=list)
    cleanup: list[ItemResult] = field(default_factory=list)

    @property
    def moved_count(self) -> int:
        return sum(1 for r in self.moves if r.success)

    @property
    def skipped_count(self) -> int:
        return sum(1 for r in self.moves if r.failed)

    @property
    def removed_dirs(self) -> list[ItemResult]:
        return [r for r in self.cleanup if r.kind == ActionKind.REMOVE_DIR and r.success]

    @property
    def removed_dirs_count(self) -> int:
        return len(self.removed_dirs)

    @property
    def errors(self) -> list[ItemResult]:
        """Every failed action across all phases."""
        return [
            r
            for r in (*self.provisioned, *self.scan_errors, *self.moves, *self.cleanup)
            if r.failed
        ]
