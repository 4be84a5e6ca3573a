# src/report/writer.py — v1
"""Persist rendered reports to the local filesystem."""

from __future__ import annotations

import logging
from pathlib import Path

from antiplag.core.models import CheckReport
from antiplag.report.renderer import render

logger = logging.getLogger(__name__)


class ReportWriter:
    """Write reports under an optional base directory."""

    def __init__(self, base_path: str | Path | None = None) -> None:
        """Initialize with optional base path.

        Args:
            base_path: Root directory for relative paths. If None, paths
                are used as given.
        """
        self._base = Path(base_path) if base_path else None

    def _resolve(self, path: str | Path) -> Path:
        if self._base is not None:
            return self._base / path
        return Path(path)

    async def write(
        self,
        report: CheckReport,
        path: str | Path,
        fmt: str = "text",
        sort_matches: bool = False,
    ) -> Path:
        """Render ``report`` and write it as UTF-8, creating parent dirs.

        Returns:
            The path written to.
        """
        p = self._resolve(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(render(report, fmt, sort_matches), encoding="utf-8")
        logger.info("Report saved to %s", p)
        return p
