"""
Shared test fixtures for superthread-cli tests.
Points the config file at a temp dir and clears SUPERTHREAD_* env vars
so tests never read the real user config or hit the network.
"""

import os

import pytest

from superthread_cli import config
from superthread_cli.client import SuperthreadClient


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch, tmp_path):
    """Ensure every test starts with a clean config state."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    for key in list(os.environ):
        if key.startswith("SUPERTHREAD_") or key == "NO_COLOR":
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config, "HTTP_LOG_ENABLED", False)
    monkeypatch.setattr(config, "HTTP_LOG_SAMPLE_RATE", 1.0)
    monkeypatch.setattr(config, "RUNTIME_QUIET", False)
    monkeypatch.setattr(config, "RUNTIME_NO_COLOR", False)


@pytest.fixture
def client():
    """A client with a fake key and default workspace; requests must be patched."""
    return SuperthreadClient(api_key="stk_test_key", workspace="ws1")
