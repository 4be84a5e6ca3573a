# src/batch/models.py — v1
"""Directory loading models: ScanEntry, LoadResult."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ScanEntry(BaseModel):
    """A supported file discovered during a directory scan."""

    file_path: str
    identifier: str
    format: str
    size_bytes: int


class LoadResult(BaseModel):
    """Texts extracted from a directory, ready for the similarity engine."""

    scan_root: str
    documents: list[tuple[str, str]] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def total_files_found(self) -> int:
        return len(self.documents) + len(self.skipped)
