"""Content-type to extension registry."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from verificile.core.errors import TypesFileError

# Order matters: the first extension of each entry is the primary one used
# when fixing a file.
DEFAULT_TYPE_EXTENSIONS: dict[str, tuple[str, ...]] = {
    "audio/mpeg": ("mp3",),
    "audio/x-flac": ("flac",),
    "application/gzip": ("gz",),
    "application/pdf": ("pdf",),
    "application/x-7z-compressed": ("7z",),
    "application/x-rar": ("rar",),
    "application/x-tar": ("tar",),
    "application/zip": ("zip",),
    "image/bmp": ("bmp",),
    "image/gif": ("gif",),
    "image/jpeg": ("jpg", "jpeg"),
    "image/png": ("png",),
    "image/tiff": ("tiff", "tif"),
    "image/webp": ("webp",),
    "text/html": ("html", "htm"),
    "text/plain": ("txt", "lnk", "urls"),
    "video/3gpp": ("mp4",),
    "video/mp4": ("mp4",),
    "video/webm": ("webm",),
    "video/x-m4v": ("mp4",),
    "video/x-matroska": ("mkv",),
}


def normalize_extensions(value: str | Iterable[str]) -> tuple[str, ...]:
    """Normalize an extension list into an ordered, de-duplicated tuple.

    Accepts either a comma-separated string (``"jpg,jpeg"``) or an iterable of
    strings. Leading dots are stripped and entries are lowercased.

    Raises:
        ValueError: If no usable extension remains.
    """
    raw = value.split(",") if isinstance(value, str) else list(value)

    seen: dict[str, None] = {}
    for item in raw:
        if not isinstance(item, str):
            raise ValueError(f"Extension must be a string, got {type(item).__name__}")
        ext = item.strip().lstrip(".").lower()
        if ext:
            seen.setdefault(ext, None)

    if not seen:
        raise ValueError("Extension set must contain at least one extension")
    return tuple(seen)


@dataclass(frozen=True, slots=True)
class TypeRegistry:
    """Immutable lookup table from content type to acceptable extensions."""

    mappings: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: dict(DEFAULT_TYPE_EXTENSIONS)
    )

    def __post_init__(self) -> None:
        frozen = {
            content_type: normalize_extensions(extensions)
            for content_type, extensions in self.mappings.items()
        }
        object.__setattr__(self, "mappings", MappingProxyType(frozen))

    @classmethod
    def default(cls) -> TypeRegistry:
        """Return the built-in registry."""

        return cls(dict(DEFAULT_TYPE_EXTENSIONS))

    def lookup(self, content_type: str) -> tuple[str, ...]:
        """Return accepted extensions for ``content_type`` (empty when unknown)."""

        return self.mappings.get(content_type, ())

    def primary_extension(self, content_type: str) -> str | None:
        """Return the preferred extension for ``content_type``."""

        extensions = self.lookup(content_type)
        return extensions[0] if extensions else None

    def merged(self, overrides: Mapping[str, str | Iterable[str]]) -> TypeRegistry:
        """Return a new registry with ``overrides`` replacing matching entries."""

        combined: dict[str, Any] = dict(self.mappings)
        combined.update(overrides)
        return TypeRegistry(combined)

    def items(self) -> Iterator[tuple[str, tuple[str, ...]]]:
        return iter(sorted(self.mappings.items()))

    def __contains__(self, content_type: object) -> bool:
        return content_type in self.mappings

    def __len__(self) -> int:
        return len(self.mappings)


def load_types_file(path: Path) -> dict[str, tuple[str, ...]]:
    """Load extra content-type mappings from YAML.

    The file holds a mapping of content type to either a list of extensions or
    a comma-separated string::

        application/x-custom: [xyz]
        image/heic: "heic,heif"

    Raises:
        TypesFileError: If the file is unreadable or malformed.
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise TypesFileError(f"Failed to load types file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise TypesFileError(f"Types file {path} must contain a mapping of type to extensions")

    loaded: dict[str, tuple[str, ...]] = {}
    for content_type, extensions in data.items():
        if not isinstance(content_type, str) or not content_type.strip():
            raise TypesFileError(f"Invalid content type key in {path}: {content_type!r}")
        if not isinstance(extensions, (str, list, tuple)):
            raise TypesFileError(
                f"Extensions for {content_type} in {path} must be a list or comma-separated string"
            )
        try:
            loaded[content_type.strip()] = normalize_extensions(extensions)
        except ValueError as e:
            raise TypesFileError(f"Invalid extensions for {content_type} in {path}: {e}") from e

    return loaded


def build_registry(types_file: Path | None = None) -> TypeRegistry:
    """Build the registry, layering ``types_file`` entries over the defaults."""

    registry = TypeRegistry.default()
    if types_file is None:
        return registry
    return registry.merged(load_types_file(types_file))
