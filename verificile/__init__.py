"""Verificile - verify that file extensions match their detected content types.

Scans directory trees, sniffs each file's real type from its bytes, and flags
files whose extension disagrees with what is inside them.
"""

__version__ = "1.0.0"
__author__ = "Verificile Contributors"

from verificile.config import Settings, get_settings

__all__ = ["Settings", "get_settings", "__version__"]
