"""JSON over HTTP transport with retry and backoff."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from typing import Any

import requests

logger = logging.getLogger(__name__)

Sleeper = Callable[[float], None]

IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "PUT", "DELETE"})


class HttpRequestError(Exception):
    """Raised when a request fails or returns a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class JsonTransport:
    """Issue JSON requests through a shared `requests.Session`.

    Retry policy:
    - 429: honours Retry-After when present, otherwise exponential backoff.
    - connection failures: exponential backoff.
    - 5xx and read timeouts: exponential backoff for idempotent methods only.
    - other 4xx: fail immediately.
    """

    def __init__(
        self,
        *,
        headers: Mapping[str, str],
        auth: tuple[str, str] | None = None,
        session: requests.Session | None = None,
        timeout_seconds: int = 30,
        max_retries: int = 4,
        min_backoff_seconds: float = 0.8,
        max_backoff_seconds: float = 20.0,
        sleep: Sleeper | None = None,
    ) -> None:
        self._headers = dict(headers)
        self._auth = auth
        self._session = session or requests.Session()
        self._timeout_seconds = timeout_seconds
        self._max_retries = max_retries
        self._min_backoff_seconds = min_backoff_seconds
        self._max_backoff_seconds = max_backoff_seconds
        self._sleep = sleep or time.sleep

    def request_json(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        """Send one request and return the decoded JSON response body."""
        headers = dict(self._headers)
        if body is not None:
            headers["Content-Type"] = "application/json"
        idempotent = method.upper() in IDEMPOTENT_METHODS

        for attempt in range(self._max_retries + 1):
            logger.debug("%s %s params=%s attempt=%d", method, url, params, attempt)
            try:
                response = self._session.request(
                    method=method,
                    url=url,
                    params=params,
                    json=body,
                    headers=headers,
                    auth=self._auth,
                    timeout=self._timeout_seconds,
                )
            except requests.RequestException as exc:
                # ConnectionError (including ConnectTimeout) means nothing reached the server.
                retryable = idempotent or isinstance(exc, requests.ConnectionError)
                if not retryable or attempt >= self._max_retries:
                    raise HttpRequestError(f"{method} {url} failed: {exc}") from exc
                self._sleep(self._backoff(attempt))
                continue

            if 200 <= response.status_code < 300:
                return _decode(response) if response.content else None

            status = response.status_code
            if status == 429 or (idempotent and 500 <= status < 600):
                if attempt < self._max_retries:
                    self._sleep(self._retry_delay(response, attempt))
                    continue

            raise HttpRequestError(
                f"{method} {url} failed with status {response.status_code}: {response.text}",
                status_code=response.status_code,
                payload=_decode_or_none(response),
            )

        raise AssertionError("unreachable")  # pragma: no cover

    def _retry_delay(self, response: requests.Response, attempt: int) -> float:
        retry_after = response.headers.get("Retry-After")
        if retry_after:
            try:
                return float(retry_after)
            except ValueError:
                return self._min_backoff_seconds
        return self._backoff(attempt)

    def _backoff(self, attempt: int) -> float:
        base: float = min(self._max_backoff_seconds, self._min_backoff_seconds * (2**attempt))
        return base + (0.15 * base)


def _decode(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise HttpRequestError(
            f"Response from {response.url} is not valid JSON.",
            status_code=response.status_code,
        ) from exc


def _decode_or_none(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
