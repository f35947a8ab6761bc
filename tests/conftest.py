"""Shared fixtures for reprjson tests."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Ensure project root is on path
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

# ── Environment isolation ───────────────────────────────────────────────
# Prevent tests from picking up a developer's .env or shell settings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Isolate every test from real env vars."""
    for name in ("INDENT", "ENSURE_ASCII", "LOG_LEVEL", "LOG_FILE", "LOG_MAX_BYTES", "LOG_BACKUP_COUNT"):
        monkeypatch.delenv(name, raising=False)

    # Clear the cached settings singleton so each test picks up monkeypatched env
    from reprjson.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logger():
    """Put the root logger's handlers and level back after a test reconfigures it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for h in root.handlers[:]:
        if h not in handlers:
            h.close()
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


# ── Reusable fixtures ──────────────────────────────────────────────────


@pytest.fixture
def debug_dump():
    """A dictionary as printed by a Python 2 scripting console."""
    return (
        "{u'tagPath': [default]Line1/Motor/Speed, u'quality': u'Good', "
        "u'value': 12.5, u'enabled': True, u'alarm': None, "
        "u'timestamp': Mon Jan 05 09:33:15 MST 2026, u'tags': [u'a', u'b',],}"
    )
