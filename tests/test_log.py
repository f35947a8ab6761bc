"""Tests for reprjson.core.log: logging setup, safe_print, and timing."""

from __future__ import annotations

import json
import logging
import sys
from logging.handlers import RotatingFileHandler

import pytest

from reprjson.core.log import StructuredFormatter, safe_print, setup_logging, timed


class TestSetupLogging:
    """Test the logging initialization."""

    def test_stream_handler_by_default(self, restore_root_logger):
        handler = setup_logging()
        assert type(handler) is logging.StreamHandler
        assert restore_root_logger.handlers == [handler]

    def test_file_handler_when_configured(self, tmp_path, monkeypatch, restore_root_logger):
        monkeypatch.setenv("LOG_FILE", str(tmp_path / "reprjson.log"))
        handler = setup_logging()
        assert isinstance(handler, RotatingFileHandler)

    def test_clears_existing_handlers(self, restore_root_logger):
        restore_root_logger.addHandler(logging.NullHandler())
        setup_logging()
        assert len(restore_root_logger.handlers) == 1

    def test_level_from_settings(self, monkeypatch, restore_root_logger):
        monkeypatch.setenv("LOG_LEVEL", "error")
        setup_logging()
        assert restore_root_logger.level == logging.ERROR

    def test_json_format(self, restore_root_logger):
        handler = setup_logging(json_format=True)
        assert isinstance(handler.formatter, StructuredFormatter)

    def test_writes_to_file(self, tmp_path, monkeypatch, restore_root_logger):
        log_file = tmp_path / "reprjson.log"
        monkeypatch.setenv("LOG_FILE", str(log_file))
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        handler = setup_logging(json_format=True)
        logging.getLogger("reprjson.test").info("hello", extra={"stage": "fast_path"})
        handler.flush()
        entry = json.loads(log_file.read_text(encoding="utf-8").strip())
        assert entry["message"] == "hello"
        assert entry["stage"] == "fast_path"


class TestStructuredFormatter:
    def _record(self, **extra):
        record = logging.LogRecord("reprjson.core", logging.DEBUG, __file__, 1, "msg %s", ("x",), None)
        for key, val in extra.items():
            setattr(record, key, val)
        return record

    def test_basic_fields(self):
        entry = json.loads(StructuredFormatter().format(self._record()))
        assert entry["level"] == "DEBUG"
        assert entry["logger"] == "reprjson.core"
        assert entry["message"] == "msg x"
        assert "timestamp" in entry

    def test_known_extras_included(self):
        entry = json.loads(StructuredFormatter().format(self._record(stage="validate", input_chars=12, error="bad")))
        assert entry["stage"] == "validate"
        assert entry["input_chars"] == 12
        assert entry["error"] == "bad"

    def test_unknown_extras_ignored(self):
        entry = json.loads(StructuredFormatter().format(self._record(secret="x")))
        assert "secret" not in entry

    def test_exception_included(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord("r", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
        entry = json.loads(StructuredFormatter().format(record))
        assert entry["exception"] == "boom"

    def test_non_ascii_kept(self):
        entry = StructuredFormatter().format(self._record(error="café"))
        assert "café" in entry


class TestSafePrint:
    def test_falls_back_to_stderr(self, capsys, restore_root_logger):
        for h in restore_root_logger.handlers[:]:
            restore_root_logger.removeHandler(h)
        safe_print("no handlers here")
        assert "no handlers here" in capsys.readouterr().err

    def test_uses_logging_when_configured(self, caplog):
        with caplog.at_level(logging.WARNING):
            safe_print("careful", logging.WARNING)
        assert "careful" in caplog.text


class TestTimed:
    def test_logs_duration(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="reprjson.timing"):
            with timed("convert", input_chars=3):
                pass
        record = caplog.records[-1]
        assert "[DONE] convert" in record.getMessage()
        assert record.stage == "convert"
        assert record.input_chars == 3
        assert record.duration_ms >= 0

    def test_logs_and_reraises_failure(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="reprjson.timing"):
            with pytest.raises(RuntimeError):
                with timed("convert"):
                    raise RuntimeError("x")
        assert any("[FAILED] convert" in r.getMessage() for r in caplog.records)
