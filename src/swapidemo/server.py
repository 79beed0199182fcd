"""FastAPI front door: home page, fire-and-forget trigger, stats.

Routes (GET only):

* ``/`` and ``/index.html`` -- HTML home page with a live stats footer.
* ``/api`` -- schedules an orchestrator run as a background task and
  answers immediately with a plain-text acknowledgement.  The caller never
  learns whether the run succeeded; failures land in the error counter.
* ``/stats`` -- the session's counters as JSON.

Everything else is answered with a plain-text ``404 Not Found``.  The app
owns its :class:`~swapidemo.session.Session`: the lifespan opens the
session's HTTP client on startup and closes it on shutdown.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import BackgroundTasks, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from swapidemo import orchestrator
from swapidemo.output import get_output
from swapidemo.pages import render_home_page
from swapidemo.session import Session

ACKNOWLEDGEMENT = "Check server console for results"


def create_app(session: Session) -> FastAPI:
    """Build the ASGI application bound to *session*.

    Args:
        session: The session whose cache and counters every route shares.

    Returns:
        A configured :class:`fastapi.FastAPI` instance.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        output = get_output()
        settings = session.settings
        async with session:
            output.info(f"Server running at http://localhost:{settings.port}")
            output.info(
                "Open the URL in your browser and click the button to fetch Star Wars data"
            )
            output.debug("Debug mode: ON")
            output.debug(f"Timeout: {settings.timeout_ms} ms")
            yield

    app = FastAPI(
        title="Star Wars API Demo",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.session = session

    @app.get("/", response_class=HTMLResponse)
    @app.get("/index.html", response_class=HTMLResponse)
    async def home() -> HTMLResponse:
        return HTMLResponse(render_home_page(session.stats()))

    @app.get("/api", response_class=PlainTextResponse)
    async def trigger_fetch(background_tasks: BackgroundTasks) -> PlainTextResponse:
        background_tasks.add_task(orchestrator.run, session)
        return PlainTextResponse(ACKNOWLEDGEMENT)

    @app.get("/stats")
    async def stats() -> JSONResponse:
        return JSONResponse(session.stats().model_dump())

    @app.exception_handler(StarletteHTTPException)
    async def plain_http_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
        return PlainTextResponse(
            str(exc.detail), status_code=exc.status_code, headers=exc.headers,
        )

    return app
