# src/core/errors.py — v1
"""Errors raised by the similarity core."""

from __future__ import annotations


class InvalidConfigurationError(ValueError):
    """Raised when engine parameters are out of range (e.g. n-gram size < 1)."""
