"""Asynchronous fetch-with-cache client for the Star Wars API.

This module provides :class:`AsyncClient`, which wraps
:class:`httpx.AsyncClient` and exposes a single high-level operation,
:meth:`AsyncClient.fetch`:

1. Consult the session cache; a hit returns immediately with no traffic.
2. Otherwise send one GET to ``base_url + endpoint`` bounded by the
   configured timeout (httpx aborts the in-flight request on expiry).
3. Map transport failures and error statuses to
   :class:`~swapidemo.exceptions.FetchError` subclasses.
4. Parse the JSON body, store it in the cache, and return it.

Failed fetches never write to the cache.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from swapidemo.cache import ResponseCache
from swapidemo.client.response import extract_response_data
from swapidemo.exceptions import ConnectionError_, HttpStatusError, TimeoutError_
from swapidemo.models import Settings
from swapidemo.output import get_output


class AsyncClient:
    """Asynchronous, cache-backed JSON fetcher.

    Must be used as an async context manager; the underlying
    :class:`httpx.AsyncClient` lives for the duration of the ``async with``
    block.

    Args:
        settings: Effective settings (``base_url``, ``timeout_ms``,
            ``verify_ssl``).
        cache: The response cache to consult and fill.
        transport: Optional :mod:`httpx` transport, e.g.
            :class:`httpx.MockTransport` in tests.

    Example::

        async with AsyncClient(settings, cache) as client:
            luke = await client.fetch("people/1")
    """

    def __init__(
        self,
        settings: Settings,
        cache: ResponseCache,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._cache = cache
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    # ------------------------------------------------------------------ #
    # Async context manager
    # ------------------------------------------------------------------ #

    async def __aenter__(self) -> AsyncClient:
        kwargs: dict[str, Any] = {
            "base_url": self._settings.base_url,
            "timeout": self._settings.timeout_seconds,
            "verify": self._settings.verify_ssl,
            "follow_redirects": True,
            "headers": {"Accept": "application/json"},
        }
        if self._transport is not None:
            kwargs["transport"] = self._transport
        self._client = httpx.AsyncClient(**kwargs)
        return self

    async def __aexit__(self, *args: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def cache(self) -> ResponseCache:
        return self._cache

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    async def fetch(self, endpoint: str) -> Any:
        """Return the parsed JSON body for *endpoint*, from cache if possible.

        Args:
            endpoint: Path relative to the base URL, appended verbatim
                (e.g. ``"people/1"`` or ``"planets/?page=1"``).

        Returns:
            The parsed JSON value.

        Raises:
            TimeoutError_: No response within the configured timeout.
            HttpStatusError: The status code is >= 400.
            ParseError: The body is not well-formed JSON.
            ConnectionError_: Any other network failure.
        """
        output = get_output()

        if endpoint in self._cache:
            output.debug(f"Using cached data for {endpoint}")
            return self._cache.get(endpoint)

        response = await self._send(endpoint)
        if response.status_code >= 400:
            raise HttpStatusError(response.status_code, endpoint=endpoint)

        payload = extract_response_data(response, endpoint)
        if not self._cache.set(endpoint, payload):
            # An overlapping run stored this endpoint first; its value wins.
            return self._cache.get(endpoint)

        output.debug(f"Successfully fetched data for {endpoint}")
        output.debug(f"Cache Size: {len(self._cache)}")
        return payload

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    async def _send(self, endpoint: str) -> httpx.Response:
        """Send one GET for *endpoint*, mapping transport failures."""
        assert self._client is not None, "Client not initialised -- use as async context manager"

        try:
            return await self._client.get(endpoint)
        except httpx.TimeoutException as exc:
            raise TimeoutError_(f"Request timeout for {endpoint}", endpoint=endpoint) from exc
        except httpx.TransportError as exc:
            raise ConnectionError_(
                f"Request failed for {endpoint}: {exc}", endpoint=endpoint,
            ) from exc
