"""Application layer for Verificile.

This layer orchestrates the core decision logic without direct terminal or
report I/O. All side effects are delegated to adapters via port interfaces.
"""

__all__ = [
    "InteractiveResolver",
    "RunAggregator",
    "RunState",
    "ScanService",
]

from verificile.app.aggregator import RunAggregator, RunState
from verificile.app.resolution import InteractiveResolver
from verificile.app.scan_service import ScanService
