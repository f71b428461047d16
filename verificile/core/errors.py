"""Exception hierarchy for the detection and remediation engine."""

from __future__ import annotations

from pathlib import Path


class VerificileError(Exception):
    """Base class for all Verificile errors."""


class PathExhaustedError(VerificileError):
    """Raised when no free numbered candidate exists for a target path."""

    def __init__(self, path: Path, attempts: int) -> None:
        self.path = path
        self.attempts = attempts
        super().__init__(f"No available filename for {path} after {attempts} attempts")


class RenameFailedError(VerificileError):
    """Raised when the filesystem refuses a rename."""

    def __init__(self, source: Path, target: Path, cause: OSError) -> None:
        self.source = source
        self.target = target
        self.cause = cause
        super().__init__(f"Failed to rename {source} to {target}: {cause}")


class UnresolvableCollisionError(VerificileError):
    """Raised when a custom rename target collides with an existing file."""

    def __init__(self, target: Path) -> None:
        self.target = target
        super().__init__(f"Target file already exists: {target}")


class MissingDirectoryError(VerificileError):
    """Raised when a requested scan root does not exist."""

    def __init__(self, root: Path) -> None:
        self.root = root
        super().__init__(f"Directory not found: {root}")


class DetectionError(VerificileError):
    """Raised when content-type detection cannot read a file."""


class TypesFileError(VerificileError):
    """Raised when a content-type mapping file cannot be loaded."""
