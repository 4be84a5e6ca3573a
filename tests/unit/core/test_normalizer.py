# tests/unit/core/test_normalizer.py — v1
"""Tests for core/normalizer.py."""

from __future__ import annotations

import pytest

from antiplag.core.normalizer import normalize


class TestNormalize:
    def test_lowercases(self):
        assert normalize("Hello WORLD") == "hello world"

    def test_strips_punctuation(self):
        assert normalize("Hello, world! (Really?)") == "hello world really"

    def test_hyphen_deleted_not_spaced(self):
        assert normalize("a well-known fact") == "a wellknown fact"

    def test_contraction_collapsed(self):
        assert normalize("Don't stop") == "dont stop"

    def test_collapses_whitespace(self):
        assert normalize("  one \n\n two\tthree   ") == "one two three"

    def test_punctuation_between_spaces_leaves_single_space(self):
        assert normalize("one - two") == "one two"

    def test_keeps_digits_and_underscores(self):
        assert normalize("Version 2_0 released") == "version 2_0 released"

    def test_non_latin_letters_kept(self):
        assert normalize("Привет, Мир!") == "привет мир"

    @pytest.mark.parametrize("text", ["", "   ", "\n\t", "!!! ..."])
    def test_empty_results(self, text):
        assert normalize(text) == ""

    def test_idempotent(self):
        once = normalize("It's a well-known, widely-cited FACT.")
        assert normalize(once) == once
