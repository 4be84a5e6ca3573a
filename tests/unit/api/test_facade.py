# tests/unit/api/test_facade.py — v1
"""Tests for api/facade.py — end-to-end check runs."""

from __future__ import annotations

import re

import pytest

from antiplag.api.facade import check_directory, check_texts
from antiplag.config.settings import Settings
from antiplag.core.errors import InvalidConfigurationError
from antiplag.core.engine import SimilarityEngine
from antiplag.core.models import CheckReport
from antiplag.logging.context import get_context, set_run_context


class TestCheckTexts:
    def test_report_fields(self, settings):
        report = check_texts(
            [("A", "the quick brown fox jumps"), ("B", "the quick brown fox runs")],
            settings,
        )
        assert isinstance(report, CheckReport)
        assert re.fullmatch(r"\d{8}_\d{4}_[0-9a-f]{8}", report.run_id)
        assert report.n_gram_size == 4
        assert report.min_similarity == 0.3
        assert [r.originality for r in report.results] == [50, 50]

    def test_empty(self, settings):
        assert check_texts([], settings).results == []

    def test_skipped_carried(self, settings):
        report = check_texts([], settings, skipped=["x.docx"])
        assert report.skipped == ["x.docx"]

    def test_settings_applied(self):
        settings = Settings(_env_file=None, ngram_size=2, min_similarity=0.9)
        report = check_texts([("A", "a b c"), ("B", "a b d")], settings)
        assert report.n_gram_size == 2
        assert report.results[0].matches == []

    def test_run_context_set_during_run_only(self, settings, monkeypatch):
        seen: list[str | None] = []
        original_check = SimilarityEngine.check

        def _check(engine, pairs):
            seen.append(get_context().run_id)
            return original_check(engine, pairs)

        monkeypatch.setattr(SimilarityEngine, "check", _check)
        report = check_texts([("A", "a b c d")], settings)

        assert seen == [report.run_id]
        assert get_context().run_id is None

    def test_run_context_restored_after_run(self, settings):
        set_run_context("outer")
        check_texts([("A", "a b c d")], settings)
        assert get_context().run_id == "outer"

    def test_invalid_engine_config(self, settings):
        bad = settings.model_copy(update={"ngram_size": 0})
        with pytest.raises(InvalidConfigurationError):
            check_texts([("A", "text")], bad)


class TestCheckDirectory:
    @pytest.mark.asyncio
    async def test_scores_directory(self, documents_dir, settings):
        report = await check_directory(documents_dir, settings)
        by_id = {r.identifier: r for r in report.results}

        assert list(by_id) == ["a.txt", "b.txt", "c.txt"]
        assert by_id["a.txt"].matches[0].source_identifier == "b.txt"
        assert by_id["a.txt"].originality == 50
        assert by_id["c.txt"].originality == 100

    @pytest.mark.asyncio
    async def test_recursive_setting(self, documents_dir):
        settings = Settings(_env_file=None, scan_recursive=True)
        report = await check_directory(documents_dir, settings)
        assert "sub/d.txt" in {r.identifier for r in report.results}

    @pytest.mark.asyncio
    async def test_default_directory_from_settings(self, documents_dir):
        settings = Settings(_env_file=None, documents_dir=documents_dir)
        report = await check_directory(settings=settings)
        assert len(report.results) == 3

    @pytest.mark.asyncio
    async def test_skipped_files_reported(self, documents_dir, settings):
        (documents_dir / "broken.docx").write_bytes(b"garbage")
        report = await check_directory(documents_dir, settings)
        assert report.skipped == ["broken.docx"]
        assert len(report.results) == 3

    @pytest.mark.asyncio
    async def test_missing_directory(self, tmp_path, settings):
        with pytest.raises(ValueError):
            await check_directory(tmp_path / "nope", settings)
