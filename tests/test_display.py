"""Tests for console summaries of fetched resources."""

from __future__ import annotations

import pytest

from conftest import make_character, make_films, make_planets, make_starships, make_vehicle
from swapidemo.display import (
    display_character_details,
    display_films_chronologically,
    display_large_planets,
    display_starships,
    display_vehicle,
    has_large_diameter,
    has_large_population,
    is_big_populated_planet,
    sort_films_chronologically,
)


def _lines(capsys) -> list[str]:
    return capsys.readouterr().out.splitlines()


# ------------------------------------------------------------------ #
# Planet filters
# ------------------------------------------------------------------ #


class TestNumericFields:
    @pytest.mark.parametrize("value", ["2000000000", 2000000000, 1e12, " 2000000000 "])
    def test_numeric_population(self, value) -> None:
        assert has_large_population({"population": value})

    @pytest.mark.parametrize("value", ["unknown", "n/a", "2,000,000,000", "", None, True, "nan", "inf"])
    def test_non_numeric_population(self, value) -> None:
        assert not has_large_population({"population": value})


class TestPlanetFilters:
    def test_population_threshold_is_strict(self) -> None:
        assert not has_large_population({"population": "1000000000"})
        assert has_large_population({"population": "1000000001"})

    def test_diameter_threshold_is_strict(self) -> None:
        assert not has_large_diameter({"diameter": "10000"})
        assert has_large_diameter({"diameter": "10001"})

    def test_unknown_values_are_excluded(self) -> None:
        assert not is_big_populated_planet({"population": "unknown", "diameter": "50000"})
        assert not is_big_populated_planet({"population": "5000000000", "diameter": "unknown"})

    def test_missing_fields_are_excluded(self) -> None:
        assert not is_big_populated_planet({})

    def test_both_conditions_required(self) -> None:
        assert is_big_populated_planet({"population": "4500000000", "diameter": "12120"})
        assert not is_big_populated_planet({"population": "4500000000", "diameter": "9000"})


# ------------------------------------------------------------------ #
# Film ordering
# ------------------------------------------------------------------ #


class TestSortFilms:
    @pytest.mark.parametrize(
        "order",
        [(1977, 1980, 1983), (1983, 1980, 1977), (1980, 1983, 1977)],
    )
    def test_ascending_regardless_of_input_order(self, order) -> None:
        films = make_films(order)["results"]
        dates = [f["release_date"] for f in sort_films_chronologically(films)]
        assert dates == ["1977-05-25", "1980-05-17", "1983-05-25"]

    def test_input_not_mutated(self) -> None:
        films = make_films((1983, 1977))["results"]
        sort_films_chronologically(films)
        assert films[0]["release_date"] == "1983-05-25"

    def test_malformed_dates_sort_last(self) -> None:
        films = [{"title": "?", "release_date": "soon"}, {"title": "ANH", "release_date": "1977-05-25"}]
        assert [f["title"] for f in sort_films_chronologically(films)] == ["ANH", "?"]


# ------------------------------------------------------------------ #
# Display handlers
# ------------------------------------------------------------------ #


class TestDisplayCharacter:
    def test_details(self, capsys) -> None:
        display_character_details(make_character())
        assert _lines(capsys) == [
            "Character: Luke Skywalker",
            "Height: 172",
            "Mass: 77",
            "Birthday: 19BBY",
            "Appears in 4 films",
        ]

    def test_no_films_line_without_films(self, capsys) -> None:
        character = make_character()
        character["films"] = []
        display_character_details(character)
        assert not any("Appears in" in line for line in _lines(capsys))


class TestDisplayStarships:
    def test_only_first_three_shown(self, capsys) -> None:
        display_starships(make_starships())
        out = _lines(capsys)
        assert "Total Starships: 36" in out
        assert "Starship 3:" in out
        assert "Starship 4:" not in out
        assert "Name: Y-wing" not in out

    def test_cost_formatting(self, capsys) -> None:
        display_starships(make_starships())
        out = _lines(capsys)
        assert "Cost: 3500000 credits" in out
        assert "Cost: unknown" in out

    def test_pilot_count_only_when_present(self, capsys) -> None:
        display_starships(make_starships())
        out = _lines(capsys)
        assert out.count("Pilots: 2") == 1
        assert sum(1 for line in out if line.startswith("Pilots:")) == 1


class TestDisplayLargePlanets:
    def test_filters_and_formats(self, capsys) -> None:
        display_large_planets(make_planets())
        out = _lines(capsys)
        assert out[:2] == ["", "Large populated planets:"]
        planet_lines = [line for line in out if " - Pop: " in line]
        assert planet_lines == [
            "Coruscant - Pop: 1000000000000 - Diameter: 12240 - Climate: temperate",
            "Naboo - Pop: 4500000000 - Diameter: 12120 - Climate: temperate",
        ]

    def test_film_pluralisation(self, capsys) -> None:
        display_large_planets(make_planets())
        out = _lines(capsys)
        assert "  Appears in 4 films" in out
        assert "  Appears in 1 film" in out


class TestDisplayFilms:
    def test_chronological_order(self, capsys) -> None:
        display_films_chronologically(make_films((1983, 1977, 1980)))
        out = _lines(capsys)
        numbered = [line for line in out if line[:1].isdigit()]
        assert numbered == [
            "1. A New Hope (1977-05-25)",
            "2. The Empire Strikes Back (1980-05-17)",
            "3. Return of the Jedi (1983-05-25)",
        ]

    def test_film_details(self, capsys) -> None:
        display_films_chronologically(make_films((1977,)))
        out = _lines(capsys)
        assert "   Director: George Lucas" in out
        assert "   Characters: 2" in out
        assert "   Planets: 1" in out


class TestDisplayVehicle:
    def test_details(self, capsys) -> None:
        display_vehicle(make_vehicle(4))
        out = _lines(capsys)
        assert out[1] == "Featured Vehicle:"
        assert "Name: Vehicle 4" in out
        assert "Cost: 150000 credits" in out
        assert "Crew Required: 46" in out
        assert "Passengers: 30" in out
