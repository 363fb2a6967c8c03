"""Tests for tree traversal with exclusion rules."""

import errno
import os
from pathlib import Path
from unittest.mock import patch

from recsort.core.config import DEFAULT_CONFIG
from recsort.organizer.models import ActionKind, ItemResult
from recsort.organizer.protected import ProtectedPathSet
from recsort.organizer.walker import walk_tree


class TestWalkTree:
    """Tests for walk_tree."""

    def test_visits_root_first(self, recovery_tree: Path) -> None:
        """The first step is the root itself."""
        protected = ProtectedPathSet.for_pruner(recovery_tree, DEFAULT_CONFIG)
        steps = list(walk_tree(recovery_tree, protected, []))

        assert steps[0].directory == recovery_tree
        assert recovery_tree / "Cargo.toml" in steps[0].files

    def test_ignored_dirs_never_entered(self, recovery_tree: Path) -> None:
        """Ignored directories are not visited or listed as subdirs."""
        protected = ProtectedPathSet.for_pruner(recovery_tree, DEFAULT_CONFIG)
        steps = list(walk_tree(recovery_tree, protected, []))

        visited = {step.directory for step in steps}
        assert recovery_tree / ".git" not in visited
        assert recovery_tree / "node_modules" / "pkg" not in visited
        assert recovery_tree / "src" not in steps[0].subdirs
        assert recovery_tree / "recup_dir.2" / "deep" in visited

    def test_nested_ignored_dir_pruned(self, tmp_path: Path, make_file) -> None:
        """An ignored name deep in the tree is pruned too."""
        make_file(tmp_path / "a" / "target" / "debug" / "x.o", 1)
        protected = ProtectedPathSet.for_pruner(tmp_path, DEFAULT_CONFIG)

        files = [f for step in walk_tree(tmp_path, protected, []) for f in step.files]

        assert files == []

    def test_sorted_order(self, tmp_path: Path, make_file) -> None:
        """Files and directories are visited in sorted order."""
        for name in ("c.jpg", "a.jpg", "b.jpg"):
            make_file(tmp_path / "d" / name, 1)
        protected = ProtectedPathSet.for_pruner(tmp_path, DEFAULT_CONFIG)

        steps = list(walk_tree(tmp_path, protected, []))

        assert [f.name for f in steps[1].files] == ["a.jpg", "b.jpg", "c.jpg"]

    def test_read_errors_collected(self, tmp_path: Path) -> None:
        """Directory listing failures become failed READ results."""
        protected = ProtectedPathSet.for_pruner(tmp_path, DEFAULT_CONFIG)
        errors: list[ItemResult] = []
        failure = PermissionError(errno.EACCES, "Permission denied", str(tmp_path / "locked"))

        def _fake_walk(top: object, onerror: object = None, **_kwargs: object):
            assert callable(onerror)
            onerror(failure)
            yield (str(tmp_path), [], [])

        with patch("recsort.organizer.walker.os.walk", side_effect=_fake_walk):
            steps = list(walk_tree(tmp_path, protected, errors))

        assert len(steps) == 1
        assert len(errors) == 1
        assert errors[0].kind == ActionKind.READ
        assert errors[0].path == tmp_path / "locked"
        assert "Permission denied" in (errors[0].error or "")

    def test_symlinked_dir_not_followed(self, tmp_path: Path, make_file) -> None:
        """A symlink to a directory is listed but not descended into."""
        make_file(tmp_path / "real" / "a.jpg", 1)
        os.symlink(tmp_path / "real", tmp_path / "link")
        protected = ProtectedPathSet.for_pruner(tmp_path, DEFAULT_CONFIG)

        steps = list(walk_tree(tmp_path, protected, []))

        visited = {step.directory for step in steps}
        assert tmp_path / "link" not in visited
        assert tmp_path / "link" in steps[0].subdirs
