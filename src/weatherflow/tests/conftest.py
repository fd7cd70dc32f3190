"""Shared fixtures: fresh settings and silent logging for every test."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import httpx
import pytest

from weatherflow.foundation.config import clear_settings_cache
from weatherflow.observability import configure_logging

SUNNY_PAYLOAD = b'{"type":"2","temperature":"21.5"}'


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Reset cached settings and silence logs around each test."""
    for key in ("WEATHERFLOW_ERROR_DOMAIN", "WEATHERFLOW_HTTP_BASE_URL", "WEATHERFLOW_HTTP_TIMEOUT",
                "WEATHERFLOW_LOG_LEVEL", "WEATHERFLOW_LOG_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    clear_settings_cache()
    configure_logging("none")
    yield
    clear_settings_cache()
    configure_logging("none")


@pytest.fixture
def make_client() -> Callable[..., httpx.Client]:
    """Build an httpx client backed by a canned handler."""
    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(handler))
    return factory


@pytest.fixture
def sunny_client(make_client: Callable[..., httpx.Client]) -> httpx.Client:
    return make_client(lambda request: httpx.Response(200, content=SUNNY_PAYLOAD))
