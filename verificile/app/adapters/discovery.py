"""Filesystem discovery adapter."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from verificile.app.ports import DiscoveryPort
from verificile.core.errors import MissingDirectoryError
from verificile.utils.paths import find_files

logger = logging.getLogger(__name__)


class FileSystemDiscoveryAdapter(DiscoveryPort):
    """Stream regular files under a root directory in sorted order.

    Symlinks are not followed, matching ``find -type f`` semantics.
    """

    def discover(
        self,
        root: Path,
        *,
        recursive: bool = False,
        exclude: set[Path] | None = None,
    ) -> Iterator[Path]:
        if not root.is_dir():
            raise MissingDirectoryError(root)

        resolved_root = root.resolve()
        files = find_files(resolved_root, recursive=recursive, exclude=exclude)
        logger.debug("Discovered %d files under %s", len(files), resolved_root)
        yield from files
