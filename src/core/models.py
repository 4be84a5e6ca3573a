# src/core/models.py — v1
"""Shared Pydantic domain models used across modules.

No module redefines these types; all imports come from core.models.
All models are frozen: results are recomputed on every run, never mutated.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# === DOCUMENTS ===


class Document(BaseModel):
    """A document prepared for comparison."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    raw_text: str
    normalized_text: str
    shingles: frozenset[str] = Field(default_factory=frozenset)


# === RESULTS ===


class Match(BaseModel):
    """Overlap of the scored document with one other document."""

    model_config = ConfigDict(frozen=True)

    source_identifier: str
    common_shingle_count: int = Field(ge=0)
    similarity_percent: int = Field(ge=0, le=100)


class DocumentResult(BaseModel):
    """Scoring outcome for one document against the rest of the collection.

    ``originality`` is ``max(0, 100 - sum of match percents)``. It is not a
    probability: a document that overlaps several sources is penalised once
    per source, and can reach 0 even though no single match did.
    """

    model_config = ConfigDict(frozen=True)

    identifier: str
    total_shingle_count: int = Field(ge=0)
    matches: list[Match] = Field(default_factory=list)
    originality: int = Field(ge=0, le=100)


class CheckReport(BaseModel):
    """Results of one check run plus the parameters that produced them."""

    model_config = ConfigDict(frozen=True)

    run_id: str
    created_at: datetime
    n_gram_size: int
    min_similarity: float
    results: list[DocumentResult] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
