"""Tests for core/reference_data.py"""

from __future__ import annotations

import json

import pytest

from core.models import RankedCity
from core.reference_data import clear_reference_cache, load_reference_data, parse_reference_data


class TestParseReferenceData:

    def test_converts_camel_case_document(self):
        ref = parse_reference_data({
            "countryNames": {"FR": "France"},
            "continentsByCountry": {"FR": "Europe"},
            "topCitiesByPopulation": [{"city": "Paris", "country": "FR", "population": "11000000"}],
            "capitalCities": [],
        })
        assert ref.country_names == {"FR": "France"}
        assert ref.continents_by_country == {"FR": "Europe"}
        assert ref.top_cities_by_population == (RankedCity("Paris", "FR", 11000000),)
        assert ref.capital_cities == ()

    def test_missing_sections_default_empty(self):
        ref = parse_reference_data({})
        assert ref.country_names == {}
        assert ref.top_cities_by_population == ()

    def test_country_name_fallback(self):
        ref = parse_reference_data({"countryNames": {"FR": "France"}})
        assert ref.country_name("FR") == "France"
        assert ref.country_name("XX") == "XX"
        assert ref.country_name("") == ""

    def test_tables_are_read_only(self):
        ref = parse_reference_data({
            "countryNames": {"FR": "France"},
            "continentsByCountry": {"FR": "Europe"},
            "topCitiesByPopulation": [{"city": "Paris", "country": "FR", "population": 1}],
        })
        with pytest.raises(TypeError):
            ref.country_names["FR"] = "Gaul"
        with pytest.raises(TypeError):
            ref.continents_by_country["XX"] = "Atlantis"
        with pytest.raises(AttributeError):
            ref.top_cities_by_population.append(RankedCity("Lima", "PE", 1))
        assert ref.country_names == {"FR": "France"}

    def test_source_document_changes_do_not_leak(self):
        raw = {"countryNames": {"FR": "France"}}
        ref = parse_reference_data(raw)
        raw["countryNames"]["FR"] = "Gaul"
        assert ref.country_name("FR") == "France"


class TestLoadReferenceData:

    def test_loads_from_data_dir(self, data_dir):
        ref = load_reference_data()
        assert ref.country_names["FR"] == "France"
        assert [c.city for c in ref.capital_cities] == ["Paris"]

    def test_parsed_once_per_file(self, data_dir):
        first = load_reference_data()
        assert load_reference_data() is first
        assert load_reference_data(str(data_dir / "cities.json")) is first

    def test_cache_can_be_cleared(self, data_dir):
        first = load_reference_data()
        clear_reference_cache()
        assert load_reference_data() is not first

    def test_malformed_file_raises(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_reference_data(str(path))

    def test_bundled_dataset_is_ranked(self, monkeypatch):
        monkeypatch.delenv("TRAVEL_DATA_DIR", raising=False)
        ref = load_reference_data()
        for ranked in (ref.top_cities_by_population, ref.capital_cities):
            populations = [c.population for c in ranked]
            assert populations
            assert populations == sorted(populations, reverse=True)
        assert set(ref.country_names) == set(ref.continents_by_country)
