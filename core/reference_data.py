# =============================================================================
# core/reference_data.py  —  Static world tables
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads cities.json (country names, continent table, ranked city lists)
#   into a ReferenceData value.
#
# LOADED ONCE:
#   The dataset never changes while the process runs, so the parsed result
#   is cached with lru_cache and shared by every request.  Nobody may
#   mutate it.
#
# FAILURE MODE:
#   A missing or malformed cities.json is a packaging defect, not bad user
#   input, so errors here propagate instead of being swallowed.
# =============================================================================

from functools import lru_cache
import json
import os
from types import MappingProxyType
from typing import Optional

from core.config import data_dir
from core.models import RankedCity, ReferenceData

REFERENCE_FILENAME = "cities.json"


def _ranked(rows: list[dict]) -> tuple[RankedCity, ...]:
    return tuple(
        RankedCity(
            city=row["city"],
            country=row["country"],
            population=int(row["population"]),
        )
        for row in rows
    )


def parse_reference_data(raw: dict) -> ReferenceData:
    """Convert the camelCase JSON document into ReferenceData.

    The tables come back as read-only views and tuples, since one parsed
    value is shared by every request.
    """
    return ReferenceData(
        continents_by_country=MappingProxyType(dict(raw.get("continentsByCountry", {}))),
        country_names=MappingProxyType(dict(raw.get("countryNames", {}))),
        top_cities_by_population=_ranked(raw.get("topCitiesByPopulation", [])),
        capital_cities=_ranked(raw.get("capitalCities", [])),
    )


@lru_cache(maxsize=None)
def _load_cached(path: str) -> ReferenceData:
    with open(path, encoding="utf-8") as f:
        return parse_reference_data(json.load(f))


def load_reference_data(path: Optional[str] = None) -> ReferenceData:
    """Load the reference dataset, parsing each file at most once.

    Args:
        path: Explicit JSON file.  Defaults to cities.json in the data dir.

    Raises:
        OSError, json.JSONDecodeError, KeyError: if the file is unusable.
    """
    path = path or os.path.join(data_dir(), REFERENCE_FILENAME)
    return _load_cached(os.path.abspath(path))


def clear_reference_cache() -> None:
    """Forget every parsed dataset (used when the data dir changes)."""
    _load_cached.cache_clear()
