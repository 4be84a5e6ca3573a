# src/extraction/docx_extractor.py — v1
"""DOCX extractor using python-docx.

Collects paragraph text and table row text in body order. Requires the
'python-docx' package. Legacy binary .doc files are not supported.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any

from antiplag.extraction.base_extractor import BaseExtractor

logger = logging.getLogger(__name__)


class DocxExtractor(BaseExtractor):
    """Extractor for Word documents (.docx)."""

    @property
    def supported_extensions(self) -> list[str]:
        return [".docx"]

    async def extract(self, content: bytes | str | Path) -> str:
        """Extract paragraph and table text from a DOCX document."""
        try:
            import docx
        except ImportError as e:
            raise ImportError(
                "python-docx package required for DOCX extraction: "
                "pip install python-docx"
            ) from e

        from docx.table import Table

        doc = self._open_document(content, docx)

        # Body order matters: shingles span the boundary between blocks
        text_parts: list[str] = []
        table_cells = 0
        for block in doc.iter_inner_content():
            if isinstance(block, Table):
                for row in block.rows:
                    cells = [c.text.strip() for c in row.cells if c.text.strip()]
                    table_cells += len(cells)
                    if cells:
                        text_parts.append(" ".join(cells))
            elif block.text.strip():
                text_parts.append(block.text)

        logger.debug(
            "DOCX extracted: %d text blocks (%d table cells)",
            len(text_parts), table_cells,
        )
        return "\n\n".join(text_parts)

    @staticmethod
    def _open_document(content: bytes | str | Path, docx_module: Any) -> Any:
        """Open DOCX from a path or raw bytes."""
        if isinstance(content, Path):
            return docx_module.Document(str(content))
        if isinstance(content, str):
            p = Path(content)
            if p.exists() and p.is_file():
                return docx_module.Document(content)
            raise FileNotFoundError(f"DOCX file not found: {content}")
        return docx_module.Document(io.BytesIO(content))
