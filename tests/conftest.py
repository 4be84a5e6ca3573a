# tests/conftest.py — v1
"""Shared test fixtures for unit tests.

Provides sample texts, a populated documents directory and a DOCX builder.
All file I/O happens under pytest's tmp_path.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from antiplag.config.settings import Settings
from antiplag.logging.context import clear_context


# === FIXTURES: Isolation ===


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop handlers installed by setup_logging() and clear log context."""
    yield
    logging.getLogger("antiplag").handlers.clear()
    clear_context()


@pytest.fixture
def settings() -> Settings:
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)


# === FIXTURES: Sample data ===


FOX_JUMPS = "the quick brown fox jumps"
FOX_RUNS = "the quick brown fox runs"
PANGRAM = "The quick brown fox jumps over the lazy dog."
LOREM = "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod."


@pytest.fixture
def make_docx(tmp_path: Path) -> Callable[..., Path]:
    """Build a .docx file from paragraphs and optional table rows."""
    import docx

    def _make(
        name: str,
        paragraphs: list[str],
        table: list[list[str]] | None = None,
        directory: Path | None = None,
    ) -> Path:
        document = docx.Document()
        for text in paragraphs:
            document.add_paragraph(text)
        if table:
            tbl = document.add_table(rows=len(table), cols=len(table[0]))
            for r, row in enumerate(table):
                for c, value in enumerate(row):
                    tbl.cell(r, c).text = value
        path = (directory or tmp_path) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        document.save(str(path))
        return path

    return _make


@pytest.fixture
def documents_dir(tmp_path: Path) -> Path:
    """Directory with two overlapping texts, one original text and noise."""
    root = tmp_path / "documents"
    root.mkdir()
    (root / "a.txt").write_text(FOX_JUMPS, encoding="utf-8")
    (root / "b.txt").write_text(FOX_RUNS, encoding="utf-8")
    (root / "c.txt").write_text(LOREM, encoding="utf-8")
    (root / "notes.pdf").write_bytes(b"%PDF-1.4 not scanned")
    (root / "sub").mkdir()
    (root / "sub" / "d.txt").write_text(PANGRAM, encoding="utf-8")
    return root
