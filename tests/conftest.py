"""Shared test fixtures for swapidemo.

Provides canned Star Wars API payloads, a :class:`FakeSwapi` upstream
served through :class:`httpx.MockTransport`, config isolation, and output
state management.  These fixtures are automatically discovered by pytest
and available to all test modules without explicit imports.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Union

import httpx
import pytest

from swapidemo.models import Settings
from swapidemo.output import OutputFormat, OutputManager, reset_output, set_output
from swapidemo.session import Session

BASE_URL = "https://swapi.test/api/"

Route = Union[dict, list, httpx.Response, Callable[[httpx.Request], httpx.Response]]


# ---------------------------------------------------------------------------
# Fake upstream
# ---------------------------------------------------------------------------


class FakeSwapi:
    """In-process stand-in for swapi.dev.

    ``routes`` maps an endpoint (path relative to :data:`BASE_URL`, query
    included) to a JSON payload, a ready :class:`httpx.Response`, or a
    callable receiving the request.  Unknown endpoints answer 404.  Every
    request is recorded in :attr:`calls`.
    """

    def __init__(self, routes: dict[str, Route] | None = None) -> None:
        self.routes: dict[str, Route] = dict(routes or {})
        self.calls: list[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        endpoint = str(request.url).removeprefix(BASE_URL)
        self.calls.append(endpoint)
        route = self.routes.get(endpoint)
        if route is None:
            return httpx.Response(404, json={"detail": "Not found"})
        if isinstance(route, httpx.Response):
            # Fresh copy so one canned response can answer repeated calls.
            return httpx.Response(
                route.status_code, headers=route.headers, content=route.content,
            )
        if callable(route):
            return route(request)
        return httpx.Response(200, json=route)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def raise_timeout(request: httpx.Request) -> httpx.Response:
    raise httpx.ReadTimeout("timed out", request=request)


def raise_connect_error(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


# ---------------------------------------------------------------------------
# Payload fixtures
# ---------------------------------------------------------------------------


def make_character() -> dict[str, Any]:
    return {
        "name": "Luke Skywalker",
        "height": "172",
        "mass": "77",
        "birth_year": "19BBY",
        "films": ["films/1/", "films/2/", "films/3/", "films/6/"],
    }


def make_starships() -> dict[str, Any]:
    return {
        "count": 36,
        "results": [
            {
                "name": "CR90 corvette",
                "model": "CR90 corvette",
                "manufacturer": "Corellian Engineering Corporation",
                "cost_in_credits": "3500000",
                "max_atmosphering_speed": "950",
                "hyperdrive_rating": "2.0",
                "pilots": [],
            },
            {
                "name": "Star Destroyer",
                "model": "Imperial I-class Star Destroyer",
                "manufacturer": "Kuat Drive Yards",
                "cost_in_credits": "150000000",
                "max_atmosphering_speed": "975",
                "hyperdrive_rating": "2.0",
                "pilots": [],
            },
            {
                "name": "Millennium Falcon",
                "model": "YT-1300 light freighter",
                "manufacturer": "Corellian Engineering Corporation",
                "cost_in_credits": "unknown",
                "max_atmosphering_speed": "1050",
                "hyperdrive_rating": "0.5",
                "pilots": ["people/13/", "people/14/"],
            },
            {
                "name": "Y-wing",
                "model": "BTL Y-wing",
                "manufacturer": "Koensayr Manufacturing",
                "cost_in_credits": "134999",
                "max_atmosphering_speed": "1000km",
                "hyperdrive_rating": "1.0",
                "pilots": [],
            },
        ],
    }


def make_planets() -> dict[str, Any]:
    return {
        "count": 60,
        "results": [
            {
                "name": "Tatooine",
                "population": "200000",
                "diameter": "10465",
                "climate": "arid",
                "films": ["films/1/"],
            },
            {
                "name": "Coruscant",
                "population": "1000000000000",
                "diameter": "12240",
                "climate": "temperate",
                "films": ["films/3/", "films/4/", "films/5/", "films/6/"],
            },
            {
                "name": "Kamino",
                "population": "1000000000",
                "diameter": "19720",
                "climate": "temperate",
                "films": ["films/5/"],
            },
            {
                "name": "Naboo",
                "population": "4500000000",
                "diameter": "12120",
                "climate": "temperate",
                "films": ["films/3/"],
            },
            {
                "name": "Yavin IV",
                "population": "1000",
                "diameter": "unknown",
                "climate": "temperate, tropical",
                "films": [],
            },
        ],
    }


def make_films(order: tuple[int, ...] = (1983, 1977, 1980)) -> dict[str, Any]:
    catalog = {
        1977: {"title": "A New Hope", "release_date": "1977-05-25", "director": "George Lucas"},
        1980: {"title": "The Empire Strikes Back", "release_date": "1980-05-17", "director": "Irvin Kershner"},
        1983: {"title": "Return of the Jedi", "release_date": "1983-05-25", "director": "Richard Marquand"},
    }
    results = []
    for year in order:
        film = dict(catalog[year])
        film.update(
            producer="Gary Kurtz, Rick McCallum",
            characters=["people/1/", "people/2/"],
            planets=["planets/1/"],
        )
        results.append(film)
    return {"count": len(results), "results": results}


def make_vehicle(vehicle_id: int = 4) -> dict[str, Any]:
    return {
        "name": f"Vehicle {vehicle_id}",
        "model": "Digger Crawler",
        "manufacturer": "Corellia Mining Corporation",
        "cost_in_credits": "150000",
        "length": "36.8",
        "crew": "46",
        "passengers": "30",
    }


def default_routes() -> dict[str, Route]:
    routes: dict[str, Route] = {
        "people/1": make_character(),
        "starships/?page=1": make_starships(),
        "planets/?page=1": make_planets(),
        "films/": make_films(),
    }
    for vehicle_id in range(1, 6):
        routes[f"vehicles/{vehicle_id}"] = make_vehicle(vehicle_id)
    return routes


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Points XDG_CONFIG_HOME and XDG_DATA_HOME at subdirectories of
    tmp_path and clears ``PORT`` and every ``SWAPIDEMO_*`` variable so
    tests never read real user settings.
    """
    monkeypatch.setattr("swapidemo.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    for var in ["PORT", "SWAPIDEMO_BASE_URL", "SWAPIDEMO_TIMEOUT_MS", "SWAPIDEMO_DEBUG"]:
        monkeypatch.delenv(var, raising=False)
    return tmp_path


@pytest.fixture(autouse=True)
def _quiet_output_between_tests():
    """Install a plain, colourless, non-debug output manager for every test."""
    set_output(OutputManager(format=OutputFormat.PLAIN, no_color=True))
    yield
    reset_output()


@pytest.fixture
def debug_output() -> OutputManager:
    """Install an output manager with debug diagnostics enabled."""
    output = OutputManager(format=OutputFormat.PLAIN, no_color=True, debug=True)
    set_output(output)
    return output


@pytest.fixture
def settings() -> Settings:
    return Settings(base_url=BASE_URL, timeout_ms=500, debug=False)


@pytest.fixture
def fake_swapi() -> FakeSwapi:
    return FakeSwapi(default_routes())


@pytest.fixture
def session(settings: Settings, fake_swapi: FakeSwapi) -> Session:
    """A session wired to :func:`fake_swapi`; enter it with ``async with``."""
    return Session(settings, transport=fake_swapi.transport)
