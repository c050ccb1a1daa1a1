"""Test configuration: importable package and per-test backup bookkeeping."""

from __future__ import annotations

import os
import sys

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from yabber.core.backup import reset_backup_state  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_backup_state(monkeypatch):
    for key in ("YABBER_GAME", "YABBER_NO_BACKUP", "YABBER_DESCRIPTOR_NAME", "YABBER_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    reset_backup_state()
    yield
    reset_backup_state()
