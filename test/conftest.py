"""Root conftest.py — shared fixtures for the entire test suite."""

import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

# ---------------------------------------------------------------------------
# Make project modules importable, keep log files out of the repo
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("WC_MCP_LOG_DIR", tempfile.mkdtemp(prefix="wc_mcp_logs_"))

from wc_shared.constants import CREDENTIAL_ENV_VARS  # noqa: E402
from wc_tools import register_all  # noqa: E402
from wc_tools.client import WooClient  # noqa: E402
from wc_tools.registry import ToolRegistry  # noqa: E402
from wc_tools.session import Session  # noqa: E402

SITE_URL = "https://shop.example.com"
BASE_URL = "https://shop.example.com/wp-json/wc/v3"
CONSUMER_KEY = "ck_test_123"
CONSUMER_SECRET = "cs_test_secret_456"


# ---------------------------------------------------------------------------
# Common fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_credentials(monkeypatch):
    """No test sees credentials from the developer's shell or .env."""
    for name in CREDENTIAL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Set the three credential env vars to safe test values."""
    monkeypatch.setenv("WORDPRESS_SITE_URL", SITE_URL + "/")
    monkeypatch.setenv("WOOCOMMERCE_CONSUMER_KEY", CONSUMER_KEY)
    monkeypatch.setenv("WOOCOMMERCE_CONSUMER_SECRET", CONSUMER_SECRET)


@pytest.fixture
def session():
    """A session already configured against the test store."""
    s = Session()
    s.configure(site_url=SITE_URL, consumer_key=CONSUMER_KEY, consumer_secret=CONSUMER_SECRET)
    return s


@pytest.fixture
def mock_client(session):
    """WooClient stand-in whose HTTP verbs are AsyncMocks returning ``{}``."""
    client = MagicMock(spec=WooClient)
    client.session = session
    client.get = AsyncMock(return_value={})
    client.post = AsyncMock(return_value={})
    client.put = AsyncMock(return_value={})
    client.delete = AsyncMock(return_value={})
    return client


@pytest.fixture
def registry(mock_client):
    """Registry with every tool family, bound to ``mock_client``."""
    reg = ToolRegistry(client=mock_client)
    register_all(reg)
    return reg


@pytest.fixture
def recorded_requests():
    return []


@pytest.fixture
def make_transport(recorded_requests):
    """Factory for an ``httpx.MockTransport`` that records every request.

    ``respond`` is either a ready ``httpx.Response`` or a callable taking the
    request and returning one.
    """

    def _make(respond=None):
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if callable(respond):
                return respond(request)
            return respond if respond is not None else httpx.Response(200, json={})

        return httpx.MockTransport(handler)

    return _make
