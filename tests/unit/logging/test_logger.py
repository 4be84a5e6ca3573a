# tests/unit/logging/test_logger.py — v1
"""Tests for logging/logger.py — formatters and setup."""

from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler

from antiplag.logging.context import set_document_context, set_run_context
from antiplag.logging.logger import JsonFormatter, TextFormatter, setup_logging


def _record(msg: str = "Hello", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="antiplag.test", level=level, pathname="", lineno=0,
        msg=msg, args=(), exc_info=None,
    )


class TestJsonFormatter:
    def test_format_basic(self):
        parsed = json.loads(JsonFormatter().format(_record()))
        assert parsed["level"] == "INFO"
        assert parsed["message"] == "Hello"
        assert parsed["logger"] == "antiplag.test"
        assert "timestamp" in parsed
        assert "context" not in parsed

    def test_format_with_context(self):
        set_run_context("run1")
        set_document_context("a.txt")
        parsed = json.loads(JsonFormatter().format(_record()))
        assert parsed["context"] == {"run_id": "run1", "document_id": "a.txt"}

    def test_format_with_data(self):
        record = _record()
        record.data = {"documents": 3}
        parsed = json.loads(JsonFormatter().format(record))
        assert parsed["data"] == {"documents": 3}

    def test_format_exception(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            import sys

            record = logging.LogRecord(
                name="antiplag.test", level=logging.ERROR, pathname="", lineno=0,
                msg="failed", args=(), exc_info=sys.exc_info(),
            )
        parsed = json.loads(JsonFormatter().format(record))
        assert "RuntimeError: boom" in parsed["exception"]


class TestTextFormatter:
    def test_format_basic(self):
        output = TextFormatter().format(_record("Hello text"))
        assert "Hello text" in output
        assert "INFO" in output

    def test_document_context_shown(self):
        set_document_context("b.docx")
        assert "[b.docx]" in TextFormatter().format(_record())


class TestSetupLogging:
    def test_level_and_handler(self):
        setup_logging(level="DEBUG", log_format="json")
        root = logging.getLogger("antiplag")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_no_duplicate_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("antiplag").handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "antiplag.log"
        setup_logging(log_file=log_file, rotation="1MB", retention=2)
        handlers = logging.getLogger("antiplag").handlers
        rotating = [h for h in handlers if isinstance(h, RotatingFileHandler)]
        assert len(rotating) == 1
        assert rotating[0].maxBytes == 1024 * 1024

        logging.getLogger("antiplag.core").warning("to file")
        rotating[0].flush()
        assert "to file" in log_file.read_text(encoding="utf-8")
        rotating[0].close()
