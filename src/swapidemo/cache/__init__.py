"""In-memory response caching for swapidemo.

This package provides :class:`ResponseCache`, a process-local map from
endpoint path to the parsed JSON body fetched for it.  Entries never
expire; an optional capacity bounds the map with first-in, first-out
eviction.

The cache is owned by a :class:`~swapidemo.session.Session` and consulted
by :class:`~swapidemo.client.async_client.AsyncClient` before every
outbound request.
"""

from swapidemo.cache.cache import ResponseCache

__all__ = ["ResponseCache"]
