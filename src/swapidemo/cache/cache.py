"""In-memory cache of parsed GET responses keyed by endpoint path.

Only successfully parsed bodies are stored; failed fetches never reach the
cache.  A key, once written, keeps its first value: a late write for the
same endpoint (e.g. from a concurrent orchestrator run that missed the
cache) is ignored, so re-fetching always returns the cached value.

See Also:
    :attr:`~swapidemo.models.Settings.cache_capacity` -- the optional bound.
"""

from __future__ import annotations

from collections import OrderedDict
from typing import Any, Optional


class ResponseCache:
    """Endpoint-keyed store for parsed JSON payloads.

    Args:
        capacity: Maximum number of entries.  ``None`` keeps every entry
            for the life of the process.  When set, the oldest entry is
            evicted once the capacity is reached.

    Example::

        cache = ResponseCache()
        cache.set("films/", {"count": 6, "results": []})
        hit = cache.get("films/")
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is not None and capacity <= 0:
            raise ValueError("capacity must be a positive integer or None")
        self._capacity = capacity
        self._entries: OrderedDict[str, Any] = OrderedDict()

    def get(self, endpoint: str) -> Optional[Any]:
        """Return the cached payload for *endpoint*, or ``None`` on a miss."""
        return self._entries.get(endpoint)

    def set(self, endpoint: str, payload: Any) -> bool:
        """Store *payload* under *endpoint* unless the key is already present.

        Returns:
            ``True`` if the entry was written, ``False`` if an entry for
            *endpoint* already existed and was left untouched.
        """
        if endpoint in self._entries:
            return False
        if self._capacity is not None:
            while len(self._entries) >= self._capacity:
                self._entries.popitem(last=False)
        self._entries[endpoint] = payload
        return True

    def __contains__(self, endpoint: object) -> bool:
        return endpoint in self._entries

    def __len__(self) -> int:
        return len(self._entries)
