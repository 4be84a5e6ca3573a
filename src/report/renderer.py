# src/report/renderer.py — v1
"""Stateless projections of a CheckReport into text or JSON."""

from __future__ import annotations

from antiplag.core.models import CheckReport, DocumentResult

REPORT_TITLE = "PLAGIARISM CHECK REPORT"


def render_text(report: CheckReport, sort_matches: bool = False) -> str:
    """Render a human-readable report.

    Args:
        report: Results of a check run.
        sort_matches: List sources by descending similarity instead of
            input order.
    """
    lines = [REPORT_TITLE, ""]
    for result in report.results:
        lines.extend(_render_result(result, sort_matches))
        lines.append("")

    if report.skipped:
        lines.append("Skipped (could not be read):")
        lines.extend(f"- {name}" for name in report.skipped)
        lines.append("")

    return "\n".join(lines)


def _render_result(result: DocumentResult, sort_matches: bool) -> list[str]:
    lines = [
        f"Document: {result.identifier}",
        f"Originality: {result.originality}%",
    ]
    if not result.matches:
        lines.append("No borrowings found.")
        return lines

    matches = result.matches
    if sort_matches:
        matches = sorted(matches, key=lambda m: m.similarity_percent, reverse=True)

    lines.append("Borrowings found from:")
    for match in matches:
        lines.append(
            f"- {match.source_identifier}: {match.similarity_percent}% match "
            f"({match.common_shingle_count} n-grams)"
        )
    return lines


def render_json(report: CheckReport) -> str:
    """Serialize the full report as indented JSON."""
    return report.model_dump_json(indent=2)


def render(
    report: CheckReport, fmt: str = "text", sort_matches: bool = False,
) -> str:
    """Render in the named format ("text" or "json")."""
    if fmt == "json":
        return render_json(report)
    if fmt == "text":
        return render_text(report, sort_matches=sort_matches)
    raise ValueError(f"Unknown report format {fmt!r}. Use 'text' or 'json'.")
