# src/batch/loader.py — v1
"""Directory loader: file discovery and concurrent text extraction.

Scans a directory for supported formats, extracts every file's text and
returns a complete ``(identifier, text)`` collection. Files with an
unsupported extension are ignored; files that fail extraction are logged
and listed as skipped so the rest of the collection can still be scored.
"""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path

from antiplag.batch.models import LoadResult, ScanEntry
from antiplag.extraction.extractor_factory import create_extractor, is_supported
from antiplag.logging.context import set_document_context

logger = logging.getLogger(__name__)


class DocumentLoader:
    """Discover documents in a directory and extract their text.

    Workflow:
        1. List files with a registered extractor (recursive if enabled)
        2. Extract all files concurrently
        3. Return texts in scan order, plus the files that failed
    """

    def scan(
        self,
        scan_root: Path,
        recursive: bool = False,
        formats_filter: list[str] | None = None,
    ) -> list[ScanEntry]:
        """Discover all supported files in a directory, sorted by path.

        Args:
            scan_root: Root directory to scan.
            recursive: If True, scan subdirectories recursively.
            formats_filter: If provided, only include these formats ("txt").

        Returns:
            ScanEntry list; identifiers are paths relative to ``scan_root``.

        Raises:
            ValueError: If ``scan_root`` is not a directory.
        """
        if not scan_root.is_dir():
            msg = f"Scan root is not a directory: {scan_root}"
            raise ValueError(msg)

        allowed_formats = set(formats_filter) if formats_filter else None
        entries: list[ScanEntry] = []

        pattern_fn = scan_root.rglob if recursive else scan_root.glob
        for path in sorted(pattern_fn("*")):
            if not path.is_file():
                continue
            fmt = path.suffix.lower().lstrip(".")
            if not fmt or not is_supported(fmt):
                continue
            if allowed_formats and fmt not in allowed_formats:
                continue

            entries.append(
                ScanEntry(
                    file_path=str(path.resolve()),
                    identifier=path.relative_to(scan_root).as_posix(),
                    format=fmt,
                    size_bytes=path.stat().st_size,
                )
            )

        logger.info(
            "Scanned %s: found %d supported files (recursive=%s)",
            scan_root, len(entries), recursive,
        )
        return entries

    async def load(
        self,
        scan_root: Path,
        recursive: bool = False,
        formats_filter: list[str] | None = None,
    ) -> LoadResult:
        """Scan a directory and extract the text of every supported file."""
        t0 = time.perf_counter()
        entries = self.scan(scan_root, recursive, formats_filter)

        texts = await asyncio.gather(*(self._extract(e) for e in entries))

        documents: list[tuple[str, str]] = []
        skipped: list[str] = []
        for entry, text in zip(entries, texts):
            if text is None:
                skipped.append(entry.identifier)
            else:
                documents.append((entry.identifier, text))

        return LoadResult(
            scan_root=str(scan_root),
            documents=documents,
            skipped=skipped,
            duration_seconds=round(time.perf_counter() - t0, 2),
        )

    async def _extract(self, entry: ScanEntry) -> str | None:
        """Extract one file; None when extraction fails."""
        set_document_context(entry.identifier)
        try:
            text = await create_extractor(entry.format).extract(Path(entry.file_path))
        except Exception:
            logger.exception("Failed to extract %s", entry.identifier)
            return None
        logger.debug(
            "Extracted %s (%s, %d bytes, %d chars)",
            entry.identifier, entry.format, entry.size_bytes, len(text),
        )
        return text
