# src/core/tokenizer.py — v1
"""Pluggable tokenizers used by the shingle builder.

Any tokenizer that turns a string into a deterministic, order-preserving
token sequence can be used. Two are provided:

- whitespace (default): split on runs of whitespace
- word: split on runs of non-word characters, dropping empty tokens
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod


class Tokenizer(ABC):
    """Turn text into an ordered list of tokens."""

    name: str = ""

    @abstractmethod
    def tokenize(self, text: str) -> list[str]:
        """Return tokens in document order."""


class WhitespaceTokenizer(Tokenizer):
    """Split on whitespace. Suited to already-normalized text."""

    name = "whitespace"

    def tokenize(self, text: str) -> list[str]:
        return text.split()


class WordTokenizer(Tokenizer):
    """Split on any run of non-word characters."""

    name = "word"
    _SPLIT = re.compile(r"\W+")

    def tokenize(self, text: str) -> list[str]:
        return [t for t in self._SPLIT.split(text) if t]


_TOKENIZERS: dict[str, type[Tokenizer]] = {
    WhitespaceTokenizer.name: WhitespaceTokenizer,
    WordTokenizer.name: WordTokenizer,
}


def create_tokenizer(name: str) -> Tokenizer:
    """Create a tokenizer by name ("whitespace" or "word").

    Raises:
        ValueError: If the name is unknown.
    """
    cls = _TOKENIZERS.get(name.lower())
    if cls is None:
        raise ValueError(
            f"Unknown tokenizer {name!r}. "
            f"Available: {', '.join(sorted(_TOKENIZERS))}"
        )
    return cls()
