"""Pytest configuration shared by unit and integration tests.

Provides:
1. Settings isolated from the developer's environment and .env file
2. A ready PackpinClient pointed at the default API host
3. Helpers for building Packpin response envelopes
"""

from typing import Any

import pytest

from packpin.core.config import Settings, get_settings
from packpin.infrastructure.packpin.packpin_client import PackpinClient

TEST_API_KEY = "pk_test_123"
BASE_URL = "https://api.packpin.com:443/v2"


def envelope(status_code: int, body: Any = None) -> dict[str, Any]:
    """Build a Packpin response envelope.

    Args:
        status_code: Envelope statusCode.
        body: Envelope body; omitted from the envelope when None.

    Returns:
        Dict ready to pass as `json=` to httpx_mock.add_response.
    """
    data: dict[str, Any] = {"statusCode": status_code}
    if body is not None:
        data["body"] = body
    return data


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch):
    """Strip PACKPIN_* variables and reset the cached settings."""
    for name in (
        "PACKPIN_API_KEY",
        "PACKPIN_HOST",
        "PACKPIN_PORT",
        "PACKPIN_TIMEOUT",
        "PACKPIN_ENVIRONMENT",
        "PACKPIN_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def client(settings: Settings) -> PackpinClient:
    """PackpinClient against the default Packpin host."""
    return PackpinClient(TEST_API_KEY, settings=settings)
