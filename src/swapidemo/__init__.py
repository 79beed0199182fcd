"""swapidemo -- a demonstration client for the Star Wars API (swapi.dev).

The package fetches a fixed sequence of resources (a character, the first
page of starships and planets, the film list, and a rotating vehicle),
prints human-readable summaries, and serves the same functionality behind
a small FastAPI front door.

Typical usage::

    swapidemo                      # start the server on $PORT or 3000
    swapidemo --no-debug fetch     # one run in the terminal

Modules:
    app: Typer application and CLI entry point.
    client: Cache-backed async fetcher built on httpx.
    orchestrator: Sequential fetch-and-display runs.
    session: Explicit per-process state (cache, counters).
    server: FastAPI application factory.
    config: XDG-aware settings resolution.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"
