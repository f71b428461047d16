"""Detection port interface for content-type sniffing."""

from pathlib import Path
from typing import Protocol


class DetectorPort(Protocol):
    """Port interface for content-based type detection.

    Side effects: Reads file bytes (offline).
    """

    def detect(self, path: Path) -> str:
        """Return the content type of ``path`` (e.g. ``image/png``).

        An empty string means the type could not be recognised.

        Raises:
            DetectionError: If the file cannot be read.
        """
        ...
