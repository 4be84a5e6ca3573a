# src/core/shingles.py — v1
"""Word n-gram shingling over normalized text."""

from __future__ import annotations

from antiplag.core.errors import InvalidConfigurationError
from antiplag.core.tokenizer import Tokenizer, WhitespaceTokenizer

DEFAULT_NGRAM_SIZE = 4

_DEFAULT_TOKENIZER = WhitespaceTokenizer()


def build_shingles(
    normalized_text: str,
    n: int = DEFAULT_NGRAM_SIZE,
    tokenizer: Tokenizer | None = None,
) -> frozenset[str]:
    """Build the set of contiguous n-token sequences of a text.

    Args:
        normalized_text: Output of ``normalize()``.
        n: Shingle width in tokens.
        tokenizer: Tokenizer to split the text (whitespace if None).

    Returns:
        Deduplicated shingles, each made of ``n`` tokens joined by a space.
        Empty when the text has fewer than ``n`` tokens.

    Raises:
        InvalidConfigurationError: If ``n < 1``.
    """
    if n < 1:
        raise InvalidConfigurationError(f"n-gram size must be >= 1, got {n}")

    tokens = (tokenizer or _DEFAULT_TOKENIZER).tokenize(normalized_text)
    return frozenset(
        " ".join(tokens[i : i + n]) for i in range(len(tokens) - n + 1)
    )
