"""Collision-free target path resolution."""

from __future__ import annotations

from pathlib import Path

from verificile.core.errors import PathExhaustedError

MAX_SUFFIX_ATTEMPTS = 999


def split_name(name: str) -> tuple[str, str]:
    """Split ``name`` into ``(stem, ".ext")`` on the final dot.

    A hidden file without a further dot (``.bashrc``) has no extension.
    """
    if name.startswith(".") and "." not in name[1:]:
        return name, ""
    if "." in name:
        stem, ext = name.rsplit(".", 1)
        return stem, f".{ext}"
    return name, ""


def _numbered(directory: Path, stem: str, ext: str, counter: int) -> Path:
    return directory / f"{stem}_{counter:03d}{ext}"


def resolve_unique_path(path: Path) -> Path:
    """Return ``path`` or the first free ``name_NNN.ext`` sibling.

    Raises:
        PathExhaustedError: If ``_001`` through ``_999`` are all taken.
    """
    if not path.exists():
        return path

    stem, ext = split_name(path.name)
    for counter in range(1, MAX_SUFFIX_ATTEMPTS + 1):
        candidate = _numbered(path.parent, stem, ext, counter)
        if not candidate.exists():
            return candidate

    raise PathExhaustedError(path, MAX_SUFFIX_ATTEMPTS)


def resolve_fix_target(original: Path, extension: str) -> Path:
    """Find a free path for ``original`` re-extensioned to ``extension``.

    The first candidate is ``{stem}.{extension}``. It is accepted when it is
    free or when it is ``original`` itself. Otherwise numbered suffixes are
    tried as in :func:`resolve_unique_path`.

    Raises:
        PathExhaustedError: If no numbered candidate is free.
    """
    stem, _ = split_name(original.name)
    ext = f".{extension}" if extension else ""

    candidate = original.parent / f"{stem}{ext}"
    if not candidate.exists() or candidate == original:
        return candidate

    for counter in range(1, MAX_SUFFIX_ATTEMPTS + 1):
        candidate = _numbered(original.parent, stem, ext, counter)
        if not candidate.exists():
            return candidate

    raise PathExhaustedError(original.parent / f"{stem}{ext}", MAX_SUFFIX_ATTEMPTS)
