"""Report port interfaces for anomaly reports and rename logs."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from verificile.core.models import AnomalyRecord, RenameLogEntry


class ReportSinkPort(Protocol):
    """Port interface for the tabular anomaly report.

    Side effects: Writes report files (offline), unless the sink is a no-op.
    """

    @property
    def path(self) -> Path | None:
        """Location of the persisted report, or None when nothing is persisted."""
        ...

    def open(self) -> None:
        """Prepare the report (header lines) before the first row."""
        ...

    def write(self, record: AnomalyRecord) -> None:
        """Append one anomaly row."""
        ...

    def count(self) -> int:
        """Return the number of anomaly rows currently held by the report."""
        ...

    def discard(self) -> None:
        """Remove the report artifact."""
        ...


class RenameLogPort(Protocol):
    """Port interface for the append-only rename log."""

    @property
    def path(self) -> Path | None:
        """Location of the log, or None when nothing is persisted."""
        ...

    @property
    def count(self) -> int:
        """Number of entries appended during this run."""
        ...

    def append(self, original: Path, new: Path) -> RenameLogEntry:
        """Record a successful rename."""
        ...
