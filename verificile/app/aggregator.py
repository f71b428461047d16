"""Run-level accumulation of anomalies, suggestions, and renames."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from verificile.app.ports import RenameLogPort, ReportSinkPort
from verificile.core.classifier import FileRecord
from verificile.core.models import AnomalyRecord, RunSummary, SuggestionRecord

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RunState:
    """Mutable aggregate for a single invocation."""

    anomalies: list[AnomalyRecord] = field(default_factory=list)
    suggestions: list[SuggestionRecord] = field(default_factory=list)
    suggestion_keys: set[tuple[str, str]] = field(default_factory=set)
    found_anomalies: bool = False
    rename_count: int = 0
    files_scanned: int = 0
    files_skipped: int = 0


class RunAggregator:
    """Own the :class:`RunState` and decide what survives into the report.

    The ``found_anomalies`` flag is raised as soon as any anomaly is seen and is
    not lowered by later fixes. :meth:`finalize` then recounts the rows the
    report actually holds; when that count is zero the flag is forced back to
    False and the report artifact is discarded.
    """

    def __init__(
        self,
        report: ReportSinkPort,
        rename_log: RenameLogPort,
        *,
        forensic: bool = False,
    ) -> None:
        self.report = report
        self.rename_log = rename_log
        self.forensic = forensic
        self.state = RunState()
        self._finalized = False

    def record_scanned(self) -> None:
        self.state.files_scanned += 1

    def record_skipped(self) -> None:
        self.state.files_skipped += 1

    def mark_anomaly_found(self) -> None:
        """Raise the found-anomalies flag (never lowered before finalization)."""

        self.state.found_anomalies = True

    def record_anomaly(self, record: FileRecord) -> AnomalyRecord:
        """Persist ``record`` as an unresolved anomaly."""

        anomaly = AnomalyRecord.from_file(record)
        self.mark_anomaly_found()
        self.state.anomalies.append(anomaly)
        self.report.write(anomaly)
        return anomaly

    def record_suggestion(self, record: FileRecord) -> SuggestionRecord | None:
        """Add a suggestion for an unregistered type, once per (type, extension)."""

        key = (record.content_type, record.actual_extension)
        if key in self.state.suggestion_keys:
            return None

        suggestion = SuggestionRecord(
            content_type=record.content_type,
            extension=record.actual_extension,
            example_path=record.path,
        )
        self.state.suggestion_keys.add(key)
        self.state.suggestions.append(suggestion)
        logger.debug("New suggestion %s", suggestion.format_line())
        return suggestion

    def record_rename(self) -> None:
        self.state.rename_count += 1

    def finalize(self) -> RunSummary:
        """Recount persisted anomalies and build the final summary."""

        if self._finalized:
            raise RuntimeError("Run has already been finalized")
        self._finalized = True

        remaining = self.report.count()
        report_path = self.report.path
        if remaining == 0:
            self.state.found_anomalies = False
            if report_path is not None:
                logger.debug("No anomalies remain; discarding report %s", report_path)
            self.report.discard()
            report_path = None

        rename_log_path = self.rename_log.path if self.rename_log.count else None

        return RunSummary(
            anomalies_remaining=remaining,
            renames=self.state.rename_count,
            found_anomalies=self.state.found_anomalies,
            files_scanned=self.state.files_scanned,
            files_skipped=self.state.files_skipped,
            suggestions=list(self.state.suggestions),
            report_path=str(report_path) if report_path is not None else None,
            rename_log_path=str(rename_log_path) if rename_log_path is not None else None,
            forensic=self.forensic,
        )
