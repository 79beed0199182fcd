"""Console summaries for fetched Star Wars resources.

Each ``display_*`` function receives an already-parsed payload and writes
human-readable lines to stdout through :func:`~swapidemo.output.print_data`.
The filtering and ordering helpers are kept separate so they can be used
without printing.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Any

from swapidemo.output import print_data

MAX_STARSHIPS_DISPLAY = 3
PLANET_POPULATION_THRESHOLD = 1_000_000_000
PLANET_DIAMETER_THRESHOLD = 10_000

_UNKNOWN = "unknown"


# --- Planet filters ---


def _to_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool) or value == _UNKNOWN:
        return None
    try:
        number = float(value if isinstance(value, (int, float)) else str(value).strip())
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def has_large_population(planet: dict[str, Any]) -> bool:
    population = _to_number(planet.get("population"))
    return population is not None and population > PLANET_POPULATION_THRESHOLD


def has_large_diameter(planet: dict[str, Any]) -> bool:
    diameter = _to_number(planet.get("diameter"))
    return diameter is not None and diameter > PLANET_DIAMETER_THRESHOLD


def is_big_populated_planet(planet: dict[str, Any]) -> bool:
    """Both population and diameter must be known and above their thresholds."""
    return has_large_population(planet) and has_large_diameter(planet)


# --- Film ordering ---


def _release_key(film: dict[str, Any]) -> date:
    try:
        return date.fromisoformat(str(film.get("release_date", "")))
    except ValueError:
        return date.max


def sort_films_chronologically(films: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Return *films* ordered by ascending ``release_date``.

    Films with a missing or malformed date sort last; ties keep their
    input order.
    """
    return sorted(films, key=_release_key)


# --- Display handlers ---


def display_character_details(character: dict[str, Any]) -> None:
    print_data(f"Character: {character.get('name')}")
    print_data(f"Height: {character.get('height')}")
    print_data(f"Mass: {character.get('mass')}")
    print_data(f"Birthday: {character.get('birth_year')}")
    films = character.get("films") or []
    if films:
        print_data(f"Appears in {len(films)} films")


def display_starships(starships: dict[str, Any]) -> None:
    """Print the starship count and the first few starships in detail."""
    print_data()
    print_data(f"Total Starships: {starships.get('count')}")
    results = starships.get("results") or []
    for index, ship in enumerate(results[:MAX_STARSHIPS_DISPLAY], start=1):
        cost = ship.get("cost_in_credits")
        print_data()
        print_data(f"Starship {index}:")
        print_data(f"Name: {ship.get('name')}")
        print_data(f"Model: {ship.get('model')}")
        print_data(f"Manufacturer: {ship.get('manufacturer')}")
        print_data(f"Cost: {f'{cost} credits' if cost != _UNKNOWN else _UNKNOWN}")
        print_data(f"Speed: {ship.get('max_atmosphering_speed')}")
        print_data(f"Hyperdrive Rating: {ship.get('hyperdrive_rating')}")
        pilots = ship.get("pilots") or []
        if pilots:
            print_data(f"Pilots: {len(pilots)}")


def display_large_planets(planets: dict[str, Any]) -> None:
    """Print planets that are both very populous and very large."""
    print_data()
    print_data("Large populated planets:")
    for planet in filter(is_big_populated_planet, planets.get("results") or []):
        print_data(
            f"{planet.get('name')} - Pop: {planet.get('population')} - "
            f"Diameter: {planet.get('diameter')} - Climate: {planet.get('climate')}"
        )
        films = planet.get("films") or []
        if films:
            suffix = "s" if len(films) > 1 else ""
            print_data(f"  Appears in {len(films)} film{suffix}")


def display_films_chronologically(films: dict[str, Any]) -> None:
    print_data()
    print_data("Star Wars Films in chronological order:")
    ordered = sort_films_chronologically(films.get("results") or [])
    for i, film in enumerate(ordered, start=1):
        print_data(f"{i}. {film.get('title')} ({film.get('release_date')})")
        print_data(f"   Director: {film.get('director')}")
        print_data(f"   Producer: {film.get('producer')}")
        print_data(f"   Characters: {len(film.get('characters') or [])}")
        print_data(f"   Planets: {len(film.get('planets') or [])}")


def display_vehicle(vehicle: dict[str, Any]) -> None:
    print_data()
    print_data("Featured Vehicle:")
    print_data(f"Name: {vehicle.get('name')}")
    print_data(f"Model: {vehicle.get('model')}")
    print_data(f"Manufacturer: {vehicle.get('manufacturer')}")
    print_data(f"Cost: {vehicle.get('cost_in_credits')} credits")
    print_data(f"Length: {vehicle.get('length')}")
    print_data(f"Crew Required: {vehicle.get('crew')}")
    print_data(f"Passengers: {vehicle.get('passengers')}")
