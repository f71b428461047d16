"""Port interfaces for the Verificile application layer.

These protocol interfaces define contracts for adapters.
Services depend on these ports, never on concrete implementations.
"""

__all__ = [
    "DetectorPort",
    "DiscoveryPort",
    "MessageStyle",
    "PromptPort",
    "RenameLogPort",
    "ReportSinkPort",
]

from verificile.app.ports.detection import DetectorPort
from verificile.app.ports.discovery import DiscoveryPort
from verificile.app.ports.prompt import MessageStyle, PromptPort
from verificile.app.ports.report import RenameLogPort, ReportSinkPort
