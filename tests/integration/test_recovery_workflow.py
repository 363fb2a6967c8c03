"""Integration tests for a full cleanup of a recovery dump.

These tests run the CLI against a realistic PhotoRec-style tree and
verify the final layout after pruning, organizing, and re-running.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from recsort.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()

KIB = 1024


@pytest.fixture
def photorec_dump(
    tmp_path: Path,
    make_file: Callable[[Path, int], Path],
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """A recovery dump with numbered folders, duplicates and fragments."""
    for n in range(1, 4):
        folder = tmp_path / f"recup_dir.{n}"
        make_file(folder / "photo.png", 64 * KIB)
        make_file(folder / f"f{n:07d}.jpg", 50 * KIB)
        make_file(folder / f"f{n:07d}.txt", 200)
        make_file(folder / f"f{n:07d}.Mp3", 3 * 1024 * KIB)
    make_file(tmp_path / "recup_dir.3" / "nested" / "deeper" / "archive.ZIP", 90 * KIB)
    make_file(tmp_path / "recup_dir.3" / "nested" / "deeper" / "frag.bin", 5)
    make_file(tmp_path / "target" / "debug" / "tiny", 1)
    make_file(tmp_path / "Cargo.lock", 3)
    (tmp_path / "empty" / "tree").mkdir(parents=True)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _files(root: Path) -> set[str]:
    return {str(p.relative_to(root)) for p in root.rglob("*") if p.is_file()}


class TestRecoveryWorkflow:
    """End-to-end runs of recsort all."""

    def test_full_cleanup(self, photorec_dump: Path) -> None:
        """Small files are gone and everything else is sorted by extension."""
        result = runner.invoke(app, ["all"])

        assert result.exit_code == 0
        assert _files(photorec_dump) == {
            "png/photo.png",
            "png/photo_1.png",
            "png/photo_2.png",
            "jpg/f0000001.jpg",
            "jpg/f0000002.jpg",
            "jpg/f0000003.jpg",
            "mp3/f0000001.Mp3",
            "mp3/f0000002.Mp3",
            "mp3/f0000003.Mp3",
            "zip/archive.ZIP",
            "target/debug/tiny",
            "Cargo.lock",
        }
        for name in ("recup_dir.1", "recup_dir.2", "recup_dir.3", "empty"):
            assert not (photorec_dump / name).exists()

    def test_category_folders_survive_empty(self, photorec_dump: Path) -> None:
        """Unused category folders are created and kept."""
        runner.invoke(app, ["all"])

        for name in ("jpeg", "gif", "mov", "mp4", "mkv", "others"):
            folder = photorec_dump / name
            assert folder.is_dir()
            assert not any(folder.iterdir())

    def test_second_run_changes_nothing(self, photorec_dump: Path) -> None:
        """Running again over an organized tree is a no-op."""
        runner.invoke(app, ["all"])
        before = _files(photorec_dump)

        result = runner.invoke(app, ["--quiet", "all"])

        assert result.exit_code == 0
        assert "Found 0 files to organize" in result.output
        assert _files(photorec_dump) == before
