"""Discovery port interface for file enumeration."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol


class DiscoveryPort(Protocol):
    """Port interface for streaming file discovery.

    Implementations yield regular files only, in a deterministic order.
    """

    def discover(
        self,
        root: Path,
        *,
        recursive: bool = False,
        exclude: set[Path] | None = None,
    ) -> Iterator[Path]:
        """Yield absolute file paths under ``root``.

        Raises:
            MissingDirectoryError: If ``root`` is not an existing directory.
        """
        ...
