# src/core/normalizer.py — v1
"""Text normalization: lowercase, strip punctuation, collapse whitespace."""

from __future__ import annotations

import re

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize(raw_text: str) -> str:
    """Convert raw text to its canonical form.

    Punctuation is deleted, not replaced, so connectors vanish:
    ``"well-known"`` becomes ``"wellknown"`` and ``"don't"`` becomes
    ``"dont"``. Empty or whitespace-only input yields ``""``.
    """
    text = raw_text.lower()
    text = _NON_WORD.sub("", text)
    return _WHITESPACE.sub(" ", text).strip()
