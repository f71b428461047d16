"""Tests for collision-free path resolution."""

from pathlib import Path

import pytest

from verificile.core.errors import PathExhaustedError
from verificile.core.paths import (
    MAX_SUFFIX_ATTEMPTS,
    resolve_fix_target,
    resolve_unique_path,
    split_name,
)


def test_split_name():
    assert split_name("image.jpg") == ("image", ".jpg")
    assert split_name("archive.tar.gz") == ("archive.tar", ".gz")
    assert split_name("README") == ("README", "")
    assert split_name(".bashrc") == (".bashrc", "")
    assert split_name(".config.json") == (".config", ".json")


def test_resolve_unique_path_returns_free_path(temp_dir: Path):
    target = temp_dir / "report.tsv"

    assert resolve_unique_path(target) == target


def test_resolve_unique_path_skips_taken_suffixes(temp_dir: Path):
    for name in ("report.tsv", "report_001.tsv", "report_002.tsv", "report_003.tsv"):
        (temp_dir / name).touch()

    assert resolve_unique_path(temp_dir / "report.tsv") == temp_dir / "report_004.tsv"


def test_resolve_unique_path_without_extension(temp_dir: Path):
    (temp_dir / "notes").touch()

    assert resolve_unique_path(temp_dir / "notes") == temp_dir / "notes_001"


def test_resolve_unique_path_exhausted(temp_dir: Path):
    (temp_dir / "full.txt").touch()
    for counter in range(1, MAX_SUFFIX_ATTEMPTS + 1):
        (temp_dir / f"full_{counter:03d}.txt").touch()

    with pytest.raises(PathExhaustedError) as excinfo:
        resolve_unique_path(temp_dir / "full.txt")

    assert excinfo.value.attempts == MAX_SUFFIX_ATTEMPTS


def test_resolve_fix_target_free(temp_dir: Path):
    original = temp_dir / "image.jpg"
    original.touch()

    assert resolve_fix_target(original, "png") == temp_dir / "image.png"


def test_resolve_fix_target_accepts_original(temp_dir: Path):
    original = temp_dir / "image.png"
    original.touch()

    assert resolve_fix_target(original, "png") == original


def test_resolve_fix_target_suffixes_on_collision(temp_dir: Path):
    original = temp_dir / "image.jpg"
    original.touch()
    (temp_dir / "image.png").touch()
    (temp_dir / "image_001.png").touch()

    assert resolve_fix_target(original, "png") == temp_dir / "image_002.png"


def test_find_files_skips_symlinks_and_excluded(temp_dir: Path):
    from verificile.utils.paths import find_files

    (temp_dir / "nested").mkdir()
    (temp_dir / "b.txt").write_text("b")
    (temp_dir / "a.txt").write_text("a")
    (temp_dir / "nested" / "c.txt").write_text("c")
    (temp_dir / "skip.tsv").write_text("report")
    (temp_dir / "link.txt").symlink_to(temp_dir / "a.txt")

    shallow = find_files(temp_dir, recursive=False, exclude={temp_dir / "skip.tsv"})
    deep = find_files(temp_dir, exclude={temp_dir / "skip.tsv"})

    assert [p.name for p in shallow] == ["a.txt", "b.txt"]
    assert [p.relative_to(temp_dir).as_posix() for p in deep] == [
        "a.txt",
        "b.txt",
        "nested/c.txt",
    ]
