"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from tests.fixtures.api_responses import make_client
from xrplsale.cli.context import CliContext
from xrplsale.core.config import Config
from xrplsale.core.credentials import CredentialStore


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Keep every test away from the real settings file and the real API."""
    monkeypatch.setenv("XRPLSALE_CONFIG_DIR", str(tmp_path / "xrplsale-config"))
    for name in ("XRPLSALE_CONFIG", "XRPLSALE_ENV", "XRPLSALE_API_URL", "XRPLSALE_API_KEY", "XRPLSALE_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DEBUG", "false")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")


@pytest.fixture
def config_file(temp_dir) -> Path:
    """Settings file location inside a temporary directory (not yet created)."""
    return temp_dir / "config.json"


@pytest.fixture
def store(config_file) -> CredentialStore:
    return CredentialStore(config_file)


@pytest.fixture
def api_client() -> MagicMock:
    """Fake ApiClient with one MagicMock per resource group."""
    return make_client()


@pytest.fixture
def session(config_file, api_client):
    """
    CliContext wired to the fake API client.

    `session.client_calls` records the use_override flag of every client
    the commands asked for.
    """
    config = Config.from_environment(config_file=config_file)
    calls = []

    def factory(ctx, use_override):
        calls.append(use_override)
        return api_client

    ctx = CliContext(config=config, store=CredentialStore(config_file), client_factory=factory)
    ctx.client_calls = calls
    return ctx


@pytest.fixture
def authed_session(session):
    """Session with a stored API key."""
    session.store.set("apiKey", "xs_test_1234567890abcdef")
    return session


@pytest.fixture
def wallet_session(session):
    """Session with a stored wallet login."""
    session.store.set("authToken", "jwt-token-abc")
    session.store.set("walletAddress", "rN7n7otQDd6FczFgLdSqtcsAUxDkw6fzRH")
    session.store.set("tokenExpiresAt", "2030-01-01T00:00:00Z")
    return session


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "auth: Tests for login flows and credential storage"
    )
    config.addinivalue_line(
        "markers", "projects: Tests for project commands and payloads"
    )
