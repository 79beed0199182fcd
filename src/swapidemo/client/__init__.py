"""HTTP client module for swapidemo.

Provides :class:`AsyncClient`, a non-blocking fetcher that wraps
:class:`httpx.AsyncClient` with a per-session response cache, a
per-request timeout, JSON parsing, and typed error mapping.  There are
no retries: each uncached endpoint costs exactly one outbound attempt.

Example::

    from swapidemo.cache import ResponseCache
    from swapidemo.client import AsyncClient

    async with AsyncClient(settings, ResponseCache()) as client:
        films = await client.fetch("films/")
"""

from swapidemo.client.async_client import AsyncClient

__all__ = ["AsyncClient"]
