"""Shared fixtures for the travel profile tests."""

from __future__ import annotations

import json

import pytest

from core.models import RankedCity, ReferenceData
from core.reference_data import clear_reference_cache


def _ranked(*cities: tuple[str, str]) -> list[RankedCity]:
    # Population descends with position so the list is already ranked.
    return [
        RankedCity(city=city, country=country, population=1_000_000 * (len(cities) - i))
        for i, (city, country) in enumerate(cities)
    ]


@pytest.fixture
def reference() -> ReferenceData:
    """A small, hand-checkable world."""
    return ReferenceData(
        continents_by_country={
            "US": "North America",
            "MX": "North America",
            "FR": "Europe",
            "ES": "Europe",
            "JP": "Asia",
            "PE": "South America",
        },
        country_names={
            "US": "United States",
            "MX": "Mexico",
            "FR": "France",
            "ES": "Spain",
            "JP": "Japan",
            "PE": "Peru",
        },
        top_cities_by_population=_ranked(
            ("Tokyo", "JP"),
            ("Mexico City", "MX"),
            ("New York", "US"),
            ("Paris", "FR"),
            ("Lima", "PE"),
            ("Madrid", "ES"),
        ),
        capital_cities=_ranked(
            ("Tokyo", "JP"),
            ("Mexico City", "MX"),
            ("Paris", "FR"),
            ("Lima", "PE"),
            ("Madrid", "ES"),
            ("Washington", "US"),
        ),
    )


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """An isolated TRAVEL_DATA_DIR with one reference file and one user."""
    (tmp_path / "users").mkdir()
    (tmp_path / "cities.json").write_text(json.dumps({
        "countryNames": {"US": "United States", "FR": "France"},
        "continentsByCountry": {"US": "North America", "FR": "Europe"},
        "topCitiesByPopulation": [
            {"city": "Paris", "country": "FR", "population": 11000000},
            {"city": "Boston", "country": "US", "population": 4900000},
        ],
        "capitalCities": [
            {"city": "Paris", "country": "FR", "population": 11000000},
        ],
    }), encoding="utf-8")
    (tmp_path / "users" / "test-user.json").write_text(json.dumps({
        "name": "Test User",
        "tagline": "Testing",
        "homeCountry": "US",
        "visitedCountries": ["US", "FR"],
        "visitedCities": [
            {"city": "Boston", "country": "US", "date": "2020-05-01"},
            {"city": "Paris", "country": "FR", "date": "2022-07-14"},
            {"city": "Nice", "country": "FR"},
        ],
    }), encoding="utf-8")

    monkeypatch.setenv("TRAVEL_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("TRAVEL_RANKED_CITY_LIST", raising=False)
    monkeypatch.delenv("TRAVEL_MOST_VISITED_DETAIL", raising=False)
    clear_reference_cache()
    yield tmp_path
    clear_reference_cache()
