# src/extraction/txt_extractor.py — v1
"""Plain text extractor: passthrough decode."""

from __future__ import annotations

from pathlib import Path

from antiplag.extraction.base_extractor import BaseExtractor


class TxtExtractor(BaseExtractor):
    """Extractor for plain text files (.txt)."""

    @property
    def supported_extensions(self) -> list[str]:
        return [".txt"]

    async def extract(self, content: bytes | str | Path) -> str:
        """Return the file's text, decoded as UTF-8."""
        if isinstance(content, Path):
            return content.read_text(encoding="utf-8", errors="replace")
        if isinstance(content, bytes):
            return content.decode("utf-8", errors="replace")
        # str: a file path, or already the text itself
        p = Path(content)
        try:
            is_file = p.is_file()
        except (OSError, ValueError):
            is_file = False
        if is_file:
            return p.read_text(encoding="utf-8", errors="replace")
        return content
