"""Report sink adapters: TSV anomaly report and text rename log."""

from __future__ import annotations

import csv
import getpass
import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from verificile.app.ports import RenameLogPort, ReportSinkPort
from verificile.core.models import RENAME_TIMESTAMP_FORMAT, AnomalyRecord, RenameLogEntry

logger = logging.getLogger(__name__)

REPORT_HEADER = ["File Path", "Detected Type", "Actual Extension", "Expected Extensions"]
REPORT_BASENAME = "verificile_anomalies_{stamp}.tsv"
RENAME_LOG_BASENAME = "verificile_renamed_{stamp}.log"
FILE_STAMP_FORMAT = "%Y%m%d_%H%M%S"


def current_user() -> str:
    """Return the login name, or ``unknown`` when it cannot be determined."""
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "unknown"


class TsvAnomalyReport(ReportSinkPort):
    """Tab-separated anomaly report with one metadata line and a header row."""

    def __init__(
        self,
        path: Path,
        *,
        user: str | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._path = path
        self._user = user or current_user()
        self._clock = clock

    @property
    def path(self) -> Path | None:
        return self._path

    def open(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        generated = self._clock().strftime(RENAME_TIMESTAMP_FORMAT)
        with self._path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(f"# Generated by Verificile on {generated} by {self._user}\n")
            writer = csv.writer(handle, delimiter="\t", lineterminator="\n")
            writer.writerow(REPORT_HEADER)

    def write(self, record: AnomalyRecord) -> None:
        with self._path.open("a", encoding="utf-8", newline="") as handle:
            writer = csv.writer(handle, delimiter="\t", lineterminator="\n")
            writer.writerow(record.to_row())

    def count(self) -> int:
        """Count data rows on disk, ignoring the metadata and header lines."""
        if not self._path.exists():
            return 0

        with self._path.open("r", encoding="utf-8", newline="") as handle:
            rows = csv.reader(
                (line for line in handle if not line.startswith("#")), delimiter="\t"
            )
            return sum(1 for row in rows if row and row != REPORT_HEADER)

    def discard(self) -> None:
        self._path.unlink(missing_ok=True)


class TextRenameLog(RenameLogPort):
    """Append-only rename log, created on the first successful rename."""

    def __init__(self, path: Path, *, clock: Callable[[], datetime] = datetime.now) -> None:
        self._path = path
        self._clock = clock
        self._count = 0

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def count(self) -> int:
        return self._count

    def append(self, original: Path, new: Path) -> RenameLogEntry:
        entry = RenameLogEntry(
            timestamp=self._clock().strftime(RENAME_TIMESTAMP_FORMAT),
            original_path=str(original),
            new_path=str(new),
        )
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(entry.format_line() + "\n")
        self._count += 1
        return entry


class NullReport(ReportSinkPort):
    """Report sink for forensic mode: keeps rows in memory, writes nothing."""

    def __init__(self) -> None:
        self.records: list[AnomalyRecord] = []

    @property
    def path(self) -> Path | None:
        return None

    def open(self) -> None:
        return None

    def write(self, record: AnomalyRecord) -> None:
        self.records.append(record)

    def count(self) -> int:
        return len(self.records)

    def discard(self) -> None:
        return None


class NullRenameLog(RenameLogPort):
    """Rename log that records entries in memory only."""

    def __init__(self, *, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock
        self.entries: list[RenameLogEntry] = []

    @property
    def path(self) -> Path | None:
        return None

    @property
    def count(self) -> int:
        return len(self.entries)

    def append(self, original: Path, new: Path) -> RenameLogEntry:
        entry = RenameLogEntry(
            timestamp=self._clock().strftime(RENAME_TIMESTAMP_FORMAT),
            original_path=str(original),
            new_path=str(new),
        )
        self.entries.append(entry)
        return entry
