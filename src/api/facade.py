# src/api/facade.py — v1
"""Public API facade: run a plagiarism check on texts or a directory.

Usage:
    from antiplag.api.facade import check_directory
    report = await check_directory(Path("./documents"))
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path

from antiplag.batch.loader import DocumentLoader
from antiplag.config.settings import Settings
from antiplag.core.engine import SimilarityEngine
from antiplag.core.models import CheckReport
from antiplag.logging.context import reset_run_context, set_run_context

logger = logging.getLogger(__name__)


def check_texts(
    pairs: Iterable[tuple[str, str]],
    settings: Settings | None = None,
    skipped: list[str] | None = None,
) -> CheckReport:
    """Score ``(identifier, raw text)`` pairs against each other.

    Args:
        pairs: Documents in the order results should be reported.
        settings: Detection settings. Loaded from .env if None.
        skipped: Identifiers that could not be loaded, carried into the report.

    Raises:
        InvalidConfigurationError: If settings describe an invalid engine.
    """
    settings = settings or Settings()
    engine = SimilarityEngine.from_settings(settings)

    run_id = _generate_run_id()
    token = set_run_context(run_id)
    try:
        logger.info("Starting check run %s", run_id)
        results = engine.check(pairs)
    finally:
        reset_run_context(token)

    return CheckReport(
        run_id=run_id,
        created_at=datetime.now(timezone.utc),
        n_gram_size=engine.n_gram_size,
        min_similarity=engine.min_similarity,
        results=results,
        skipped=list(skipped or []),
    )


async def check_directory(
    directory: Path | None = None,
    settings: Settings | None = None,
    loader: DocumentLoader | None = None,
) -> CheckReport:
    """Load every supported document in a directory and check it.

    Args:
        directory: Directory to scan. Defaults to ``settings.documents_dir``.
        settings: Global settings. Loaded from .env if None.
        loader: Document loader (a default one if None).

    Raises:
        ValueError: If the directory does not exist.
    """
    settings = settings or Settings()
    directory = directory or settings.documents_dir
    loader = loader or DocumentLoader()

    loaded = await loader.load(
        directory,
        recursive=settings.scan_recursive,
        formats_filter=settings.scan_formats_list,
    )
    if loaded.skipped:
        logger.warning(
            "%d of %d files could not be read",
            len(loaded.skipped), loaded.total_files_found,
        )

    return check_texts(loaded.documents, settings, skipped=loaded.skipped)


def _generate_run_id() -> str:
    """Generate a run ID: {yyyymmdd_hhmm}_{uuid8}."""
    now = datetime.now(timezone.utc)
    return f"{now.strftime('%Y%m%d_%H%M')}_{uuid.uuid4().hex[:8]}"
