"""Prune and organize operations on the working tree.

This module provides the small-file pruner, the extension-based
organizer, the protected path set both of them honor, and the
models describing their results.
"""

from recsort.core.errors import NameCollisionError, RecsortError, RootResolutionError
from recsort.organizer.models import (
    ActionKind,
    FileEntry,
    ItemResult,
    MoveTask,
    OrganizeReport,
    PruneReport,
)
from recsort.organizer.naming import MAX_NAME_ATTEMPTS, free_destination
from recsort.organizer.organizer import Organizer, order_deepest_first, organize_files
from recsort.organizer.protected import ProtectedPathSet
from recsort.organizer.pruner import Pruner, prune_small_files

__all__ = [
    "MAX_NAME_ATTEMPTS",
    "ActionKind",
    "FileEntry",
    "ItemResult",
    "MoveTask",
    "NameCollisionError",
    "OrganizeReport",
    "Organizer",
    "ProtectedPathSet",
    "PruneReport",
    "Pruner",
    "RecsortError",
    "RootResolutionError",
    "free_destination",
    "order_deepest_first",
    "organize_files",
    "prune_small_files",
]
