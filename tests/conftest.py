"""
Pytest configuration and shared fixtures for relaypost tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_fakes = importlib.import_module("fixtures.fakes")
_store_memory = importlib.import_module("core.store.memory")
_executor = importlib.import_module("core.engine.executor")
_relay = importlib.import_module("orchestrator.relay")

FakeClock = _fakes.FakeClock
FakeTransport = _fakes.FakeTransport
InMemoryRecordStore = _store_memory.InMemoryRecordStore
RequestExecutor = _executor.RequestExecutor
RelayService = _relay.RelayService


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """Keep tests away from the developer's env vars and config files."""
    for var in [
        "PORT",
        "DATABASE_URL",
        "RELAYPOST_HOST",
        "RELAYPOST_STORE_URL",
        "RELAYPOST_HISTORY_LIMIT",
        "RELAYPOST_TIMEOUT_MS",
        "RELAYPOST_VERIFY_TLS",
        "RELAYPOST_HTTP_PROXY",
        "RELAYPOST_LOG_LEVEL",
    ]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


@pytest.fixture
def clock():
    """Controllable clock."""
    return FakeClock()


@pytest.fixture
def transport(clock):
    """Scripted transport that advances the shared clock."""
    return FakeTransport(clock=clock, latency_ms=25)


@pytest.fixture
def executor(transport, clock):
    """RequestExecutor over the fake transport and clock."""
    return RequestExecutor(transport, clock=clock)


@pytest.fixture
def store():
    """Empty in-memory record store."""
    return InMemoryRecordStore()


@pytest.fixture
def service(executor, store):
    """RelayService over fakes."""
    return RelayService(executor, store)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
