"""Sequential fetch-and-display run over the fixed task list.

:func:`run` awaits each task's endpoint in order (no parallel fan-out),
hands the parsed payload to the paired display handler, and accumulates
the serialized size into the session.  A rotating vehicle step follows
while the session's character cursor is within its ceiling.

Any failure, whether a :class:`~swapidemo.exceptions.FetchError` or a
display handler choking on an unexpected payload shape, aborts the
remaining steps of that run and goes through :meth:`Session.handle_error`;
statistics already accumulated are kept.
"""

from __future__ import annotations

import contextlib
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from swapidemo.client.response import payload_size
from swapidemo.display import (
    display_character_details,
    display_films_chronologically,
    display_large_planets,
    display_starships,
    display_vehicle,
)
from swapidemo.output import get_output

if TYPE_CHECKING:
    from swapidemo.session import Session

Handler = Callable[[Any], None]


@dataclass(frozen=True)
class Task:
    """One step of a run: an endpoint and the handler that displays it."""

    endpoint: str
    handler: Handler


def build_tasks(character_id: int) -> list[Task]:
    """Return the fixed task list, with the character at *character_id*."""
    return [
        Task(f"people/{character_id}", display_character_details),
        Task("starships/?page=1", display_starships),
        Task("planets/?page=1", display_large_planets),
        Task("films/", display_films_chronologically),
    ]


def vehicle_endpoint(vehicle_id: int) -> str:
    return f"vehicles/{vehicle_id}"


async def _fetch_and_display(session: Session, endpoint: str, handler: Handler) -> None:
    payload = await session.client.fetch(endpoint)
    session.add_data_size(payload_size(payload))
    handler(payload)


async def run(session: Session) -> None:
    """Execute one full run against *session*.

    Never raises for a failed step: the error is counted and logged. When
    the session was created with ``serialize_runs`` the whole run holds
    the session's run lock.
    """
    guard = session.run_lock if session.run_lock is not None else contextlib.nullcontext()
    async with guard:
        await _run(session)


async def _run(session: Session) -> None:
    output = get_output()
    try:
        output.debug("Starting data fetch...")
        session.record_run()

        for task in session.tasks:
            await _fetch_and_display(session, task.endpoint, task.handler)

        if session.has_vehicle_step():
            await _fetch_and_display(
                session, vehicle_endpoint(session.character_id), display_vehicle,
            )
            session.advance_character()

        stats = session.stats()
        output.debug("Stats:")
        output.debug(f"API Calls: {stats.api_calls}")
        output.debug(f"Cache Size: {stats.cache_size}")
        output.debug(f"Total Data Size: {stats.data_size} bytes")
        output.debug(f"Error Count: {stats.errors}")

    except Exception as exc:
        session.handle_error(str(exc) or type(exc).__name__)
