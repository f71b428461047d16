"""Path utilities for directory and file operations."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path


def get_config_home() -> Path:
    """Get XDG_CONFIG_HOME directory, defaulting to ~/.config."""
    xdg_config = os.getenv("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def find_files(
    root: Path,
    recursive: bool = True,
    exclude: Iterable[Path] | None = None,
) -> list[Path]:
    """Find regular files in directory, sorted by path. Symlinks are skipped."""
    if not root.is_dir():
        return []

    excluded = {path.resolve() for path in exclude} if exclude else set()

    if recursive:
        matches = root.rglob("*")
    else:
        matches = root.glob("*")

    files = []
    for path in matches:
        if path.is_symlink():
            continue

        if not path.is_file():
            continue

        if excluded and path.resolve() in excluded:
            continue

        files.append(path)

    return sorted(files)
