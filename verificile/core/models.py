"""Records produced while scanning and remediating files."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from verificile.core.classifier import FileRecord

RENAME_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class AnomalyRecord(BaseModel):
    """A file whose extension disagrees with its detected content type."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Absolute path to the file")
    content_type: str = Field(..., description="Detected content type")
    actual_extension: str = Field(..., description="Extension found on disk (may be empty)")
    expected_extensions: str = Field(..., description="Accepted extensions, comma-joined")

    @classmethod
    def from_file(cls, record: FileRecord) -> AnomalyRecord:
        return cls(
            path=record.path,
            content_type=record.content_type,
            actual_extension=record.actual_extension,
            expected_extensions=record.expected_joined,
        )

    def to_row(self) -> list[str]:
        """Return the report columns in order."""

        return [self.path, self.content_type, self.actual_extension, self.expected_extensions]


class SuggestionRecord(BaseModel):
    """An unregistered content type seen with a plausible extension."""

    model_config = ConfigDict(frozen=True)

    content_type: str
    extension: str
    example_path: str

    @property
    def key(self) -> tuple[str, str]:
        return (self.content_type, self.extension)

    def format_line(self) -> str:
        """Render a registry entry that could be pasted into a types file."""

        example = Path(self.example_path).name
        return f'{self.content_type} -> extension "{self.extension}"  # example: {example}'


class RenameLogEntry(BaseModel):
    """A successful remediation rename."""

    model_config = ConfigDict(frozen=True)

    timestamp: str
    original_path: str
    new_path: str

    def format_line(self) -> str:
        return f"{self.timestamp} - {self.original_path} fixed by renaming to {self.new_path}"


class RunSummary(BaseModel):
    """Final statistics for one scan invocation."""

    anomalies_remaining: int = Field(..., ge=0)
    renames: int = Field(..., ge=0)
    found_anomalies: bool
    files_scanned: int = Field(default=0, ge=0)
    files_skipped: int = Field(default=0, ge=0)
    suggestions: list[SuggestionRecord] = Field(default_factory=list)
    report_path: str | None = Field(
        default=None, description="Anomaly report location, None when not retained"
    )
    rename_log_path: str | None = Field(
        default=None, description="Rename log location, None when nothing was renamed"
    )
    forensic: bool = False


class NotFixedReason(str, Enum):
    """Why an anomaly was left in place."""

    SKIPPED = "skipped"
    EMPTY_NAME = "empty_name"
    INVALID_NAME = "invalid_name"
    INVALID_CHOICE = "invalid_choice"
    UNCHANGED = "unchanged"
    CANCELLED = "cancelled"
    UNRESOLVABLE_COLLISION = "unresolvable_collision"
    PATH_EXHAUSTED = "path_exhausted"
    RENAME_FAILED = "rename_failed"
    FORENSIC = "forensic"


@dataclass(frozen=True, slots=True)
class Fixed:
    """The file was renamed to ``new_path``."""

    new_path: Path

    @property
    def fixed(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class NotFixed:
    """The file was left untouched."""

    reason: NotFixedReason
    detail: str | None = None

    @property
    def fixed(self) -> bool:
        return False


ResolutionOutcome = Fixed | NotFixed
