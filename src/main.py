# src/main.py — v1
"""CLI entry point.

Usage:
    antiplag check [directory] [options]
    antiplag --version
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from antiplag.config.settings import Settings, load_settings
from antiplag.logging.logger import setup_logging
from antiplag.version import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        settings = _load_settings(args)
    except Exception as exc:
        setup_logging(level="INFO", log_format="text")
        logger.error("Invalid configuration: %s", exc)
        return 1

    setup_logging(
        level=settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )

    try:
        return asyncio.run(args.func(args, settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="antiplag",
        description=f"antiplag v{__version__}: n-gram plagiarism checker",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    p_check = subparsers.add_parser(
        "check", help="Compare all documents in a directory",
    )
    p_check.add_argument(
        "directory", type=Path, nargs="?", default=None,
        help="Directory with .txt/.docx documents (default: ANTIPLAG_DOCUMENTS_DIR)",
    )
    p_check.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Also save the report to this file",
    )
    p_check.add_argument(
        "-f", "--format", dest="report_format", choices=["text", "json"],
        default=None, help="Report format (default: text)",
    )
    p_check.add_argument(
        "-n", "--ngram-size", type=int, default=None,
        help="Shingle width in words (default: 4)",
    )
    p_check.add_argument(
        "-m", "--min-similarity", type=float, default=None,
        help="Minimum similarity fraction to report a source (default: 0.3)",
    )
    p_check.add_argument(
        "-r", "--recursive", action="store_true",
        help="Scan subdirectories",
    )
    p_check.add_argument(
        "--sort", action="store_true",
        help="List sources by descending similarity in the text report",
    )
    p_check.set_defaults(func=_cmd_check)

    return parser


def _load_settings(args: argparse.Namespace) -> Settings:
    """Settings from .env/environment, overridden by explicit CLI flags."""
    overrides: dict[str, object] = {}
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    if getattr(args, "ngram_size", None) is not None:
        overrides["ngram_size"] = args.ngram_size
    if getattr(args, "min_similarity", None) is not None:
        overrides["min_similarity"] = args.min_similarity
    if getattr(args, "report_format", None) is not None:
        overrides["report_format"] = args.report_format
    if getattr(args, "output", None) is not None:
        overrides["report_file"] = args.output
    if getattr(args, "recursive", False):
        overrides["scan_recursive"] = True
    return load_settings(**overrides)


async def _cmd_check(args: argparse.Namespace, settings: Settings) -> int:
    """Run a plagiarism check over a directory."""
    from antiplag.api.facade import check_directory
    from antiplag.report.renderer import render
    from antiplag.report.writer import ReportWriter

    directory: Path = args.directory or settings.documents_dir
    if not directory.is_dir():
        logger.error("Not a directory: %s", directory)
        return 1

    report = await check_directory(directory, settings)

    print(render(report, settings.report_format, sort_matches=args.sort))

    if settings.report_file is not None:
        await ReportWriter().write(
            report, settings.report_file, settings.report_format,
            sort_matches=args.sort,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
