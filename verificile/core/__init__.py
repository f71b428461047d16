"""Detection-and-classification engine.

Pure decision logic with no terminal or report I/O: the content-type registry,
the anomaly classifier, collision-free path resolution, and the records that
flow between them.
"""

__all__ = [
    "AnomalyRecord",
    "Classification",
    "FileRecord",
    "Fixed",
    "NotFixed",
    "NotFixedReason",
    "RenameLogEntry",
    "ResolutionOutcome",
    "RunSummary",
    "SuggestionRecord",
    "TypeRegistry",
    "build_file_record",
    "build_registry",
    "classify",
    "extract_extension",
    "resolve_fix_target",
    "resolve_unique_path",
]

from verificile.core.classifier import (
    Classification,
    FileRecord,
    build_file_record,
    classify,
    extract_extension,
)
from verificile.core.models import (
    AnomalyRecord,
    Fixed,
    NotFixed,
    NotFixedReason,
    RenameLogEntry,
    ResolutionOutcome,
    RunSummary,
    SuggestionRecord,
)
from verificile.core.paths import resolve_fix_target, resolve_unique_path
from verificile.core.registry import TypeRegistry, build_registry
