# src/extraction/extractor_factory.py — v1
"""Factory: instantiate extractor from file extension."""

from __future__ import annotations

from antiplag.extraction.base_extractor import BaseExtractor
from antiplag.extraction.docx_extractor import DocxExtractor
from antiplag.extraction.txt_extractor import TxtExtractor

# Registry maps extension -> extractor class.
_EXTRACTOR_REGISTRY: dict[str, type[BaseExtractor]] = {}


def _register_defaults() -> None:
    """Register built-in extractors."""
    for cls in [TxtExtractor, DocxExtractor]:
        instance = cls()
        for ext in instance.supported_extensions:
            _EXTRACTOR_REGISTRY[ext.lower()] = cls


_register_defaults()


class UnsupportedFormatError(ValueError):
    """Raised when no extractor is available for a format."""


def _normalize_extension(extension: str) -> str:
    ext = extension.lower()
    if not ext.startswith("."):
        ext = f".{ext}"
    return ext


def create_extractor(extension: str) -> BaseExtractor:
    """Create an extractor for the given file extension.

    Args:
        extension: File extension, with or without dot (".txt", "docx").

    Raises:
        UnsupportedFormatError: If no extractor is registered.
    """
    ext = _normalize_extension(extension)
    cls = _EXTRACTOR_REGISTRY.get(ext)
    if cls is None:
        raise UnsupportedFormatError(
            f"No extractor for format {ext!r}. "
            f"Supported: {', '.join(sorted(_EXTRACTOR_REGISTRY))}"
        )
    return cls()


def register_extractor(extension: str, cls: type[BaseExtractor]) -> None:
    """Register a custom extractor for an extension."""
    _EXTRACTOR_REGISTRY[_normalize_extension(extension)] = cls


def is_supported(extension: str) -> bool:
    """Whether an extractor is registered for the extension."""
    return _normalize_extension(extension) in _EXTRACTOR_REGISTRY


def supported_extensions() -> list[str]:
    """Return list of supported file extensions."""
    return sorted(_EXTRACTOR_REGISTRY.keys())
