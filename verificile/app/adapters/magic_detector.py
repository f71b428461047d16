"""Content-type detection adapter backed by libmagic."""

from __future__ import annotations

from pathlib import Path

import magic

from verificile.app.ports import DetectorPort
from verificile.core.errors import DetectionError


class MagicDetectorAdapter(DetectorPort):
    """Detect MIME types from file signatures using python-magic.

    This reads the same magic database as ``file --mime-type``.
    """

    def __init__(self, detector: magic.Magic | None = None) -> None:
        """Create the libmagic instance (MIME mode) unless one is supplied."""
        self._magic = detector if detector is not None else magic.Magic(mime=True)

    def detect(self, path: Path) -> str:
        try:
            result = self._magic.from_file(str(path))
        except magic.MagicException as exc:
            raise DetectionError(f"libmagic failed on {path}: {exc}") from exc
        except OSError as exc:
            raise DetectionError(f"Cannot read {path}: {exc}") from exc

        return (result or "").strip()
