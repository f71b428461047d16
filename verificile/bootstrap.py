"""Application bootstrap wiring ports, adapters, and services."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from verificile.app import InteractiveResolver, ScanService
from verificile.app.adapters import (
    FileSystemDiscoveryAdapter,
    NullRenameLog,
    NullReport,
    TerminalPrompter,
    TextRenameLog,
    TsvAnomalyReport,
)
from verificile.app.adapters.reports import (
    FILE_STAMP_FORMAT,
    RENAME_LOG_BASENAME,
    REPORT_BASENAME,
)
from verificile.app.ports import (
    DetectorPort,
    DiscoveryPort,
    PromptPort,
    RenameLogPort,
    ReportSinkPort,
)
from verificile.config import Settings, get_settings
from verificile.core.paths import resolve_unique_path
from verificile.core.registry import TypeRegistry, build_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ApplicationContainer:
    """Aggregates wired services and adapters for the CLI layer."""

    settings: Settings
    registry: TypeRegistry
    discovery_port: DiscoveryPort
    detector_port: DetectorPort
    prompter: PromptPort
    report: ReportSinkPort
    rename_log: RenameLogPort
    resolver: InteractiveResolver
    scan_service: ScanService


def _create_detector() -> DetectorPort:
    """Create the libmagic-backed detector (imported lazily)."""
    from verificile.app.adapters.magic_detector import MagicDetectorAdapter

    return MagicDetectorAdapter()


def _create_sinks(
    settings: Settings, clock: Callable[[], datetime]
) -> tuple[ReportSinkPort, RenameLogPort]:
    """Create report sinks; forensic runs get in-memory sinks only."""
    if settings.forensic:
        return NullReport(), NullRenameLog(clock=clock)

    report_dir = settings.get_report_dir()
    stamp = clock().strftime(FILE_STAMP_FORMAT)
    report_path = resolve_unique_path(report_dir / REPORT_BASENAME.format(stamp=stamp))
    rename_log_path = resolve_unique_path(report_dir / RENAME_LOG_BASENAME.format(stamp=stamp))
    logger.debug("Report: %s, rename log: %s", report_path, rename_log_path)
    return (
        TsvAnomalyReport(report_path, clock=clock),
        TextRenameLog(rename_log_path, clock=clock),
    )


def bootstrap_application(
    settings: Settings | None = None,
    *,
    registry: TypeRegistry | None = None,
    detector: DetectorPort | None = None,
    prompter: PromptPort | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> ApplicationContainer:
    """Create the application container with concrete adapters.

    Raises:
        TypesFileError: If the configured types file cannot be loaded.
        PathExhaustedError: If no free report filename exists.
    """
    active_settings = settings or get_settings()

    active_registry = registry or build_registry(active_settings.get_types_file())
    discovery_port = FileSystemDiscoveryAdapter()
    detector_port = detector or _create_detector()
    active_prompter = prompter or TerminalPrompter(color=active_settings.color)
    report, rename_log = _create_sinks(active_settings, clock)

    resolver = InteractiveResolver(
        active_prompter,
        rename_log,
        forensic=active_settings.forensic,
    )

    scan_service = ScanService(
        registry=active_registry,
        discovery=discovery_port,
        detector=detector_port,
        report=report,
        rename_log=rename_log,
        prompter=active_prompter,
        resolver=resolver,
        interactive=active_settings.interactive,
        forensic=active_settings.forensic,
        recursive=active_settings.recursive,
    )

    return ApplicationContainer(
        settings=active_settings,
        registry=active_registry,
        discovery_port=discovery_port,
        detector_port=detector_port,
        prompter=active_prompter,
        report=report,
        rename_log=rename_log,
        resolver=resolver,
        scan_service=scan_service,
    )
