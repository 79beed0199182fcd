"""Per-process session state: cache, counters, fetcher, and task list.

A :class:`Session` is the explicit context object every orchestrator run
operates on.  The server owns exactly one for its lifetime; tests create
isolated instances.  Counters are plain integers: runs interleave only at
network awaits on a single event loop, so no locking is needed unless
``serialize_runs`` is enabled.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import httpx

from swapidemo.cache import ResponseCache
from swapidemo.client import AsyncClient
from swapidemo.models import Settings, Stats
from swapidemo.orchestrator import Task, build_tasks
from swapidemo.output import get_output


class Session:
    """Shared state for fetch runs within one process.

    Args:
        settings: Effective settings for the client and the run guard.
        transport: Optional :mod:`httpx` transport forwarded to the
            fetcher (used by tests to stub the upstream API).

    Example::

        async with Session(settings) as session:
            await orchestrator.run(session)
            print(session.stats())
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings
        self.cache = ResponseCache(settings.cache_capacity)
        self.client = AsyncClient(settings, self.cache, transport=transport)

        self.api_calls = 0
        self.errors = 0
        self.data_size = 0
        self.character_id = 1

        # Fixed at startup; only the vehicle step follows the cursor.
        self.tasks: list[Task] = build_tasks(self.character_id)
        self.run_lock: Optional[asyncio.Lock] = (
            asyncio.Lock() if settings.serialize_runs else None
        )

    async def __aenter__(self) -> Session:
        await self.client.__aenter__()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.client.__aexit__(*args)

    # ------------------------------------------------------------------ #
    # Counters
    # ------------------------------------------------------------------ #

    def record_run(self) -> None:
        self.api_calls += 1

    def add_data_size(self, size: int) -> None:
        self.data_size += size

    def has_vehicle_step(self) -> bool:
        """Whether the rotating vehicle ID is still within its ceiling."""
        return self.character_id <= self.settings.max_character_id

    def advance_character(self) -> None:
        self.character_id += 1

    def handle_error(self, message: str) -> None:
        """Count a failed run and report *message* on stderr."""
        self.errors += 1
        get_output().error(message)

    def stats(self) -> Stats:
        """Return a snapshot of the counters."""
        return Stats(
            api_calls=self.api_calls,
            cache_size=len(self.cache),
            data_size=self.data_size,
            errors=self.errors,
            debug=self.settings.debug,
            timeout=self.settings.timeout_ms,
        )
