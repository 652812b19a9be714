from __future__ import annotations

import sys
from pathlib import Path

import pytest

SETTINGS_ENV = ("FRACTRAN_MAX_REGS", "FRACTRAN_NATIVE_BITS", "FRACTRAN_EXPONENT_BITS")


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


def _clear_caches() -> None:
    from fractran.config import runtime_settings
    from fractran.primes import allowed_primes

    runtime_settings.cache_clear()
    allowed_primes.cache_clear()


@pytest.fixture
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Default settings with the process-wide caches reset; set env vars on the result."""
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    _clear_caches()
    yield monkeypatch
    _clear_caches()
