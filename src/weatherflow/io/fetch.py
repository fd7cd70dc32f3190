"""Network fetch collaborator for the echo weather endpoint.

The fetch runs on a background worker and hands its outcome to a completion
callback exactly once, as a `(data, response, error)` triple. Transport
failures are delivered as `error`, never raised. Redirects are not followed.

Example:
    >>> from weatherflow.io.fetch import build_url, fetch
    >>> future = fetch(build_url(), lambda data, response, error: print(response, error))
    >>> future.result()
"""

from __future__ import annotations

import random
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, NamedTuple, TypeVar

import httpx

from weatherflow.foundation.config import get_settings
from weatherflow.observability import get_logger

R = TypeVar("R")

Completion = Callable[[bytes | None, object | None, BaseException | None], R]

# Exceptions delivered through the outcome triple instead of propagating
_TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL)

CATEGORY_RANGE = range(0, 4)
TEMPERATURE_RANGE = range(-20, 30)

log = get_logger("weatherflow.fetch")


class FetchOutcome(NamedTuple):
    """What a completed fetch produced. `error` is set only on transport failure."""

    data: bytes | None
    response: object | None
    error: BaseException | None


def build_url(rng: random.Random | None = None, base_url: str | None = None) -> str:
    """Echo URL embedding a random category in [0, 4) and temperature in [-20, 30)."""
    r = rng or random
    base = (base_url or get_settings().http.base_url).rstrip("/")
    return f"{base}/type/{r.choice(CATEGORY_RANGE)}/temperature/{r.choice(TEMPERATURE_RANGE)}"


def _client_options() -> dict[str, object]:
    http = get_settings().http
    return {
        "follow_redirects": False,
        "timeout": http.timeout,
        "headers": {"User-Agent": http.user_agent},
    }


def _completed(url: str, response: httpx.Response) -> FetchOutcome:
    log.debug("request completed", url=url, status=response.status_code, size=len(response.content))
    return FetchOutcome(response.content, response, None)


def _failed(url: str, exc: BaseException) -> FetchOutcome:
    log.debug("request failed", url=url, error_type=type(exc).__name__, error=str(exc))
    return FetchOutcome(None, None, exc)


def get(url: str, *, client: httpx.Client | None = None) -> FetchOutcome:
    """Blocking GET returning the outcome triple."""
    if client is None:
        with httpx.Client(**_client_options()) as owned:  # type: ignore[arg-type]
            return get(url, client=owned)
    log.debug("request issued", url=url)
    try:
        response = client.get(url)
    except _TRANSPORT_ERRORS as e:
        return _failed(url, e)
    return _completed(url, response)


async def fetch_async(url: str, *, client: httpx.AsyncClient | None = None) -> FetchOutcome:
    """Async GET returning the outcome triple."""
    if client is None:
        async with httpx.AsyncClient(**_client_options()) as owned:  # type: ignore[arg-type]
            return await fetch_async(url, client=owned)
    log.debug("request issued", url=url)
    try:
        response = await client.get(url)
    except _TRANSPORT_ERRORS as e:
        return _failed(url, e)
    return _completed(url, response)


# ─────────────────────────────────────────────────────────────────────────────
# Background execution
# ─────────────────────────────────────────────────────────────────────────────

_default_executor: ThreadPoolExecutor | None = None
_executor_lock = threading.Lock()


def _get_default_executor() -> ThreadPoolExecutor:
    """Get or create the shared fetch pool."""
    global _default_executor
    if _default_executor is None:
        with _executor_lock:
            if _default_executor is None:
                _default_executor = ThreadPoolExecutor(thread_name_prefix="weatherflow-fetch-")
    return _default_executor


def fetch(
    url: str,
    completion: Completion[R],
    *,
    client: httpx.Client | None = None,
    executor: ThreadPoolExecutor | None = None,
) -> Future[R]:
    """Issue GET on a worker thread and call completion once with the outcome.

    The returned future resolves to whatever completion returns. There is no
    cancellation: once submitted the request runs to completion or failure.
    """
    def task() -> R:
        return completion(*get(url, client=client))

    return (executor or _get_default_executor()).submit(task)
