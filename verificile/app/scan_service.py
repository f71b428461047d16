"""Batch scan orchestration over discovery, detection, and remediation ports."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from verificile.app.aggregator import RunAggregator
from verificile.app.ports import (
    DetectorPort,
    DiscoveryPort,
    PromptPort,
    RenameLogPort,
    ReportSinkPort,
)
from verificile.app.resolution import InteractiveResolver
from verificile.core.classifier import Classification, build_file_record, classify
from verificile.core.errors import DetectionError, MissingDirectoryError
from verificile.core.models import AnomalyRecord, RunSummary
from verificile.core.registry import TypeRegistry

logger = logging.getLogger(__name__)

AnomalyCallback = Callable[[AnomalyRecord], None]


class ScanService:
    """Classify every discovered file and route anomalies.

    Files are processed one at a time in discovery order. In interactive mode
    each anomaly is handed to the :class:`InteractiveResolver` before the next
    file is considered; otherwise it goes straight into the report.
    """

    def __init__(
        self,
        *,
        registry: TypeRegistry,
        discovery: DiscoveryPort,
        detector: DetectorPort,
        report: ReportSinkPort,
        rename_log: RenameLogPort,
        prompter: PromptPort,
        resolver: InteractiveResolver,
        interactive: bool = False,
        forensic: bool = False,
        recursive: bool = False,
    ) -> None:
        self.registry = registry
        self.discovery = discovery
        self.detector = detector
        self.report = report
        self.rename_log = rename_log
        self.prompter = prompter
        self.resolver = resolver
        self.interactive = interactive
        self.forensic = forensic
        self.recursive = recursive

    def run(
        self,
        roots: Iterable[Path],
        *,
        on_anomaly: AnomalyCallback | None = None,
    ) -> RunSummary:
        """Scan ``roots`` and return the finalized summary.

        Missing roots and unreadable files are skipped with a warning; the run
        itself always completes.
        """
        aggregator = RunAggregator(self.report, self.rename_log, forensic=self.forensic)
        self.report.open()

        exclude = {path.resolve() for path in (self.report.path, self.rename_log.path) if path}

        for root in roots:
            try:
                for path in self.discovery.discover(
                    root, recursive=self.recursive, exclude=exclude
                ):
                    self.process_file(path, aggregator, on_anomaly=on_anomaly)
            except MissingDirectoryError as exc:
                logger.warning("%s", exc)
                self.prompter.show(str(exc), style="warning")
                aggregator.record_skipped()

        return aggregator.finalize()

    def process_file(
        self,
        path: Path,
        aggregator: RunAggregator,
        *,
        on_anomaly: AnomalyCallback | None = None,
    ) -> Classification | None:
        """Classify a single file, returning None when it had to be skipped."""

        logger.debug("Processing file: %s", path)

        if not path.is_file():
            logger.warning("Skipping %s: file no longer exists", path)
            self.prompter.show(f"Warning: Skipping {path}: file no longer exists", style="warning")
            aggregator.record_skipped()
            return None

        try:
            content_type = self.detector.detect(path)
        except (DetectionError, OSError) as exc:
            logger.warning("Skipping %s: %s", path, exc)
            self.prompter.show(f"Warning: Skipping {path}: {exc}", style="warning")
            aggregator.record_skipped()
            return None

        aggregator.record_scanned()
        record = build_file_record(path, content_type, self.registry)
        result = classify(self.registry, record.content_type, record.actual_extension)
        logger.debug(
            "  type=%s ext=%r expected=%s -> %s",
            record.content_type,
            record.actual_extension,
            record.expected_joined,
            result.value,
        )

        if result is Classification.UNKNOWN_SUGGESTED:
            aggregator.record_suggestion(record)
            return result

        if result is not Classification.ANOMALY:
            return result

        aggregator.mark_anomaly_found()

        if not self.interactive:
            anomaly = aggregator.record_anomaly(record)
            if on_anomaly is not None:
                on_anomaly(anomaly)
            return result

        outcome = self.resolver.resolve(record)
        if outcome.fixed:
            aggregator.record_rename()
        elif path.exists():
            aggregator.record_anomaly(record)
        else:
            logger.warning("Anomalous file %s disappeared during resolution", path)
        return result
