# tests/conftest.py
"""
Root conftest - shared fixtures for contractfn tests.

Test Tiers:
- tier1: Critical path tests - pure logic, no I/O
         Run: pytest -m tier1
- tier2: Tests touching the filesystem or environment
         Run: pytest -m "tier1 or tier2"

Every test starts from the package default config, with no CONTRACTFN_*
environment variables set.
"""

from __future__ import annotations

import pytest

from contractfn import check, primitive, refine
from contractfn.config import reset_config
from contractfn.config.loader import CONFIG_PATH_ENV, MODE_ENV, STRICT_ENV

# =============================================================================
# Config isolation
# =============================================================================


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Start every test from the defaults and forget changes afterwards."""
    for name in (CONFIG_PATH_ENV, MODE_ENV, STRICT_ENV):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


# =============================================================================
# Demonstration schemas
# =============================================================================

INT = primitive(int)
EVEN = refine(INT, lambda x: x % 2 == 0, "should be even")
ODD = refine(INT, lambda x: not check(EVEN, x), "should be odd")


@pytest.fixture
def int_schema():
    return INT


@pytest.fixture
def even():
    return EVEN


@pytest.fixture
def odd():
    return ODD


class CallRecorder:
    """Callable that records every call before delegating."""

    def __init__(self, func):
        self.func = func
        self.calls = []

    def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        return self.func(*args, **kwargs)


@pytest.fixture
def recorder():
    return CallRecorder
