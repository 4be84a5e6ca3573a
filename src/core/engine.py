# src/core/engine.py — v1
"""Similarity engine: pairwise shingle overlap and originality scoring.

Every document is compared against every other document in the collection.
For a scored document ``d`` and another document ``o``:

    similarity(d -> o) = round(100 * |d ∩ o| / |d|)

The ratio is normalised by the scored document only, so it is asymmetric.
Matches at or above ``min_similarity`` are recorded in input order, and

    originality(d) = max(0, 100 - sum(similarity of recorded matches))

Summing per-source percentages penalises a document once per overlapping
source. The summed score is kept as is until the intended
semantics (union-based overlap vs. severity weighting) are settled.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence, Set
from typing import TYPE_CHECKING

from antiplag.core.errors import InvalidConfigurationError
from antiplag.core.models import Document, DocumentResult, Match
from antiplag.core.normalizer import normalize
from antiplag.core.shingles import DEFAULT_NGRAM_SIZE, build_shingles
from antiplag.core.tokenizer import Tokenizer, create_tokenizer

if TYPE_CHECKING:
    from antiplag.config.settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_MIN_SIMILARITY = 0.3


def count_common_shingles(scored: Set[str], other: Set[str]) -> int:
    """Count members of ``scored`` that also appear in ``other``."""
    return sum(1 for shingle in scored if shingle in other)


def similarity_percent(common: int, total: int) -> int:
    """Return ``round(100 * common / total)``, rounding halves up.

    A document without shingles has similarity 0 against everything.
    """
    if total == 0:
        return 0
    return math.floor(common / total * 100 + 0.5)


def _threshold_percent(min_similarity: float) -> float:
    # 0.3 * 100 == 30.000000000000004; strip float noise before comparing
    return round(min_similarity * 100, 9)


def _validate(n_gram_size: int | None, min_similarity: float) -> None:
    if n_gram_size is not None and n_gram_size < 1:
        raise InvalidConfigurationError(
            f"n_gram_size must be >= 1, got {n_gram_size}"
        )
    if not 0.0 <= min_similarity <= 1.0:
        raise InvalidConfigurationError(
            f"min_similarity must be within [0, 1], got {min_similarity}"
        )


def score(
    documents: Sequence[tuple[str, Set[str]]],
    min_similarity: float = DEFAULT_MIN_SIMILARITY,
) -> list[DocumentResult]:
    """Score every document against all the others.

    Args:
        documents: Ordered ``(identifier, shingle set)`` pairs.
        min_similarity: Inclusion threshold as a fraction in [0, 1].

    The threshold is applied to the rounded percentage, not the raw ratio:
    59 of 200 shingles (29.5%) rounds to 30 and is recorded at 0.3, where
    a raw-ratio comparison would reject it.

    Returns:
        One DocumentResult per input document, in input order. Matches
        inside each result follow the input order of the other documents.

    Raises:
        InvalidConfigurationError: If ``min_similarity`` is out of range.
    """
    _validate(None, min_similarity)
    threshold = _threshold_percent(min_similarity)

    results: list[DocumentResult] = []
    for i, (identifier, shingles) in enumerate(documents):
        total = len(shingles)
        matches: list[Match] = []

        if total:
            for j, (other_identifier, other_shingles) in enumerate(documents):
                if i == j:
                    continue
                common = count_common_shingles(shingles, other_shingles)
                percent = similarity_percent(common, total)
                if percent >= threshold:
                    matches.append(
                        Match(
                            source_identifier=other_identifier,
                            common_shingle_count=common,
                            similarity_percent=percent,
                        )
                    )

        originality = max(0, 100 - sum(m.similarity_percent for m in matches))
        logger.debug(
            "Scored %s: %d shingles, %d matches, originality %d%%",
            identifier, total, len(matches), originality,
        )
        results.append(
            DocumentResult(
                identifier=identifier,
                total_shingle_count=total,
                matches=matches,
                originality=originality,
            )
        )

    return results


class SimilarityEngine:
    """Normalize, shingle and score a collection of documents.

    Usage:
        engine = SimilarityEngine(n_gram_size=4, min_similarity=0.3)
        results = engine.check([("a.txt", text_a), ("b.txt", text_b)])
    """

    def __init__(
        self,
        n_gram_size: int = DEFAULT_NGRAM_SIZE,
        min_similarity: float = DEFAULT_MIN_SIMILARITY,
        tokenizer: Tokenizer | None = None,
    ) -> None:
        _validate(n_gram_size, min_similarity)
        self._n_gram_size = n_gram_size
        self._min_similarity = min_similarity
        self._tokenizer = tokenizer

    @classmethod
    def from_settings(cls, settings: Settings) -> SimilarityEngine:
        """Build an engine from application settings."""
        return cls(
            n_gram_size=settings.ngram_size,
            min_similarity=settings.min_similarity,
            tokenizer=create_tokenizer(settings.tokenizer),
        )

    @property
    def n_gram_size(self) -> int:
        return self._n_gram_size

    @property
    def min_similarity(self) -> float:
        return self._min_similarity

    def prepare(self, identifier: str, raw_text: str) -> Document:
        """Normalize and shingle one document."""
        normalized = normalize(raw_text)
        return Document(
            identifier=identifier,
            raw_text=raw_text,
            normalized_text=normalized,
            shingles=build_shingles(normalized, self._n_gram_size, self._tokenizer),
        )

    def compare(self, documents: Sequence[Document]) -> list[DocumentResult]:
        """Score already prepared documents."""
        return score(
            [(doc.identifier, doc.shingles) for doc in documents],
            min_similarity=self._min_similarity,
        )

    def check(self, pairs: Iterable[tuple[str, str]]) -> list[DocumentResult]:
        """Run the full flow on ``(identifier, raw text)`` pairs."""
        documents = [self.prepare(identifier, text) for identifier, text in pairs]
        results = self.compare(documents)
        logger.info(
            "Compared %d documents (n=%d, min_similarity=%.2f): %d matches",
            len(results), self._n_gram_size, self._min_similarity,
            sum(len(r.matches) for r in results),
        )
        return results
