# src/extraction/base_extractor.py — v1
"""Abstract extractor interface for document formats.

The similarity core only sees extracted text; format handling lives here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class BaseExtractor(ABC):
    """Unified interface for document text extractors."""

    @property
    @abstractmethod
    def supported_extensions(self) -> list[str]:
        """File extensions this extractor handles (e.g., ['.txt'])."""

    @abstractmethod
    async def extract(self, content: bytes | str | Path) -> str:
        """Extract raw text from a document path or its bytes."""
