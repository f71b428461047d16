"""Match/anomaly decision logic for detected content types."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from verificile.core.paths import split_name
from verificile.core.registry import TypeRegistry


class Classification(str, Enum):
    """Outcome of comparing a file's extension against its detected type."""

    MATCH = "match"
    ANOMALY = "anomaly"
    UNKNOWN_SUGGESTED = "unknown_suggested"
    UNKNOWN_IGNORED = "unknown_ignored"


class FileRecord(BaseModel):
    """A single file under evaluation."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Absolute path to the file")
    basename: str = Field(..., description="Final path component")
    content_type: str = Field(..., description="Content type reported by the detector")
    actual_extension: str = Field(..., description="Lowercased extension, empty when absent")
    expected: tuple[str, ...] = Field(
        default=(), description="Accepted extensions for the content type (empty when unknown)"
    )

    @property
    def expected_joined(self) -> str:
        return ",".join(self.expected)

    @property
    def primary_extension(self) -> str | None:
        return self.expected[0] if self.expected else None


def extract_extension(basename: str) -> str:
    """Return the lowercased extension of ``basename``.

    Only the text after the last dot counts. A leading dot marks a hidden file
    rather than an extension, so ``.bashrc`` and ``.png`` have none while
    ``.config.json`` has ``json``.

    >>> extract_extension("photo.JPG")
    'jpg'
    >>> extract_extension(".bashrc")
    ''
    """
    _, ext = split_name(basename)
    return ext[1:].lower()


def classify(registry: TypeRegistry, content_type: str, actual_extension: str) -> Classification:
    """Decide whether ``actual_extension`` is acceptable for ``content_type``."""

    expected = registry.lookup(content_type)
    extension = actual_extension.lower()

    if expected:
        return Classification.MATCH if extension in expected else Classification.ANOMALY

    if extension:
        return Classification.UNKNOWN_SUGGESTED
    return Classification.UNKNOWN_IGNORED


def build_file_record(path: Path, content_type: str, registry: TypeRegistry) -> FileRecord:
    """Assemble a :class:`FileRecord` for ``path`` using ``registry``."""

    basename = path.name
    return FileRecord(
        path=str(path),
        basename=basename,
        content_type=content_type,
        actual_extension=extract_extension(basename),
        expected=registry.lookup(content_type),
    )
