"""Concrete adapters wiring application ports to built-in implementations.

``MagicDetectorAdapter`` lives in :mod:`verificile.app.adapters.magic_detector`
and is imported on demand, since loading it requires the libmagic shared library.
"""

from __future__ import annotations

from .discovery import FileSystemDiscoveryAdapter
from .reports import NullRenameLog, NullReport, TextRenameLog, TsvAnomalyReport
from .terminal import TerminalPrompter

__all__ = [
    "FileSystemDiscoveryAdapter",
    "NullRenameLog",
    "NullReport",
    "TerminalPrompter",
    "TextRenameLog",
    "TsvAnomalyReport",
]
