"""Logging helpers for the converter and its command-line entry point.

``setup_logging()``  configures either a :class:`RotatingFileHandler`
(when ``LOG_FILE`` is set) or a stderr stream handler.  stdout is left
alone because the command-line tool writes its JSON result there.

``safe_print(msg, level)``  emits a log entry at the requested level.

``StructuredFormatter`` outputs JSON log lines for machine-readable logs.

``timed`` logs how long an operation took.
"""

from __future__ import annotations

import contextlib
import json
import logging
import sys
import time
from collections.abc import Generator
from logging.handlers import RotatingFileHandler
from typing import Any

from reprjson.config import get_settings

_EXTRA_FIELDS = ("duration_ms", "stage", "input_chars", "error")


# ── Structured JSON Formatter ───────────────────────────────────────────


class StructuredFormatter(logging.Formatter):
    """Emit each log record as a single JSON line.

    Fields: timestamp, level, logger, message, and any of the known extras
    passed via the ``extra`` kwarg on the logging call.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in _EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                log_entry[key] = val

        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = str(record.exc_info[1])

        return json.dumps(log_entry, ensure_ascii=False, default=str)


# ── Setup ───────────────────────────────────────────────────────────────


def setup_logging(*, json_format: bool = False) -> logging.Handler:
    """Initialise the root logger from the current settings.

    Args:
        json_format: If True, use StructuredFormatter (JSON lines).
                     If False (default), use the classic human-readable format.

    Returns the handler that was installed.
    """
    settings = get_settings()

    root = logging.getLogger()
    for h in root.handlers[:]:
        root.removeHandler(h)

    handler: logging.Handler
    if settings.log_file:
        handler = RotatingFileHandler(
            settings.log_file,
            mode="a",
            encoding="utf-8",
            maxBytes=settings.log_max_bytes,
            backupCount=settings.log_backup_count,
        )
    else:
        handler = logging.StreamHandler(sys.stderr)

    if json_format:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    root.addHandler(handler)
    root.setLevel(settings.log_level)
    return handler


def safe_print(text: str, level: int = logging.INFO) -> None:
    """Emit *text* through the logging system (or fallback to stderr)."""
    try:
        if logging.getLogger().handlers:
            logging.log(level, text)
        else:
            print(text, file=sys.stderr)
    except Exception:
        pass


# ── Observability helpers ───────────────────────────────────────────────


@contextlib.contextmanager
def timed(operation: str, **extra: Any) -> Generator[None, None, None]:
    """Context manager that logs the duration of an operation.

    Usage::

        with timed("convert", input_chars=len(text)):
            result = convert(text)

    Emits a DEBUG log with ``duration_ms`` at the end, or an ERROR log if
    the block raised.
    """
    logger = logging.getLogger("reprjson.timing")
    start = time.perf_counter()
    try:
        yield
    except Exception:
        elapsed = (time.perf_counter() - start) * 1000
        logger.error(
            f"[FAILED] {operation} after {elapsed:.0f}ms",
            extra={"duration_ms": round(elapsed), "stage": operation, **extra},
        )
        raise
    else:
        elapsed = (time.perf_counter() - start) * 1000
        logger.debug(
            f"[DONE] {operation} in {elapsed:.0f}ms",
            extra={"duration_ms": round(elapsed), "stage": operation, **extra},
        )
