"""Tests for the structured logger and execution-time decorator."""

import json
import logging

import pytest

from rpncalc.logger import StructuredLogger, session_logger
from rpncalc.logger.decorators import log_execution_time
from rpncalc.logger.structured_logger import JsonFormatter, TextFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("rpncalc", logging.INFO, __file__, 1, "evaluated", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestFormatters:
    def test_json_formatter(self):
        data = json.loads(JsonFormatter().format(_record(session_id="abc", expression="1+2")))
        assert data["message"] == "evaluated"
        assert data["level"] == "INFO"
        assert data["session_id"] == "abc"
        assert data["expression"] == "1+2"

    def test_text_formatter_appends_extras(self):
        text = TextFormatter("%(message)s").format(_record(session_id="abc", result=3.0))
        assert text == "evaluated result=3.0"


class TestStructuredLogger:
    def test_session_id(self):
        logger = StructuredLogger(name="rpncalc.test.session")
        assert len(logger.get_session_id()) == 8

    def test_writes_log_file(self, tmp_path):
        log_file = tmp_path / "rpncalc.log"
        logger = StructuredLogger(name="rpncalc.test.file", log_file=str(log_file), json_format=True)

        logger.info("Expression evaluated", result=11.0, name="shadowed")

        for handler in logging.getLogger("rpncalc.test.file").handlers:
            handler.flush()
        data = json.loads(log_file.read_text().strip())
        assert data["message"] == "Expression evaluated"
        assert data["result"] == 11.0
        assert data["_name"] == "shadowed"

    def test_reinitializing_does_not_duplicate_handlers(self):
        StructuredLogger(name="rpncalc.test.dup")
        StructuredLogger(name="rpncalc.test.dup", log_file=None)
        assert len(logging.getLogger("rpncalc.test.dup").handlers) == 1


class TestLogExecutionTime:
    def test_returns_result(self):
        @log_execution_time
        def add(a, b):
            return a + b

        assert add(1, 2) == 3
        assert add.__name__ == "add"

    def test_reraises(self, monkeypatch):
        messages = []
        monkeypatch.setattr(session_logger, "error", lambda message, **kwargs: messages.append((message, kwargs)))

        @log_execution_time
        def fail():
            raise ValueError("bad")

        with pytest.raises(ValueError, match="bad"):
            fail()
        assert messages[0][0] == "Failed fail"
        assert messages[0][1]["error_type"] == "ValueError"
