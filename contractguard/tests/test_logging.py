"""Tests for contractguard.core.logging — formatters and setup."""

from __future__ import annotations

import json
import logging
import sys

from contractguard.core.logging import DevFormatter, JSONFormatter, setup_logging


def _record(msg: str = "parsed", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="contractguard.analyzer.parser",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:

    def test_core_fields(self):
        entry = json.loads(JSONFormatter().format(_record()))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "contractguard.analyzer.parser"
        assert entry["message"] == "parsed"
        assert "timestamp" in entry

    def test_extra_fields(self):
        entry = json.loads(JSONFormatter().format(_record(contract_name="Vault", duration_ms=1.5)))
        assert entry["contract_name"] == "Vault"
        assert entry["duration_ms"] == 1.5
        assert "attempt" not in entry

    def test_exception_info(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()
        entry = json.loads(JSONFormatter().format(record))
        assert entry["exception"]["type"] == "ValueError"
        assert entry["exception"]["message"] == "boom"


class TestDevFormatter:

    def test_contract_prefix(self):
        line = DevFormatter().format(_record(contract_name="Vault"))
        assert "[Vault] parsed" in line
        assert "contractguard.analyzer.parser" in line

    def test_without_contract(self):
        line = DevFormatter().format(_record())
        assert line.endswith("contractguard.analyzer.parser: parsed")


class TestSetupLogging:

    def test_development_uses_dev_formatter(self):
        setup_logging("development", "DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, DevFormatter)
        assert root.handlers[0].stream is sys.stderr

    def test_production_uses_json(self):
        setup_logging("production", "warning")
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, JSONFormatter)

    def test_unknown_level_defaults_to_info(self):
        setup_logging("development", "chatty")
        assert logging.getLogger().level == logging.INFO

    def test_noisy_loggers_quietened(self):
        setup_logging("development", "DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("anthropic").level == logging.WARNING
