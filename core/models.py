# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every record that flows through
# the travel profile: the traveler's own history, the static reference
# tables it is measured against, and the stats we derive from both.
#
# WHY FROZEN DATACLASSES?
#   Everything here is a request-scoped value.  A User is read from disk,
#   stats are computed from it, the page is assembled, and the lot is
#   thrown away.  Nothing should ever edit a record after construction,
#   so frozen=True makes accidental mutation an error instead of a bug.
#
# NAMING:
#   The JSON files on disk use camelCase keys ("homeCountry").  The Python
#   side uses snake_case; conversion happens in the loaders and in
#   ProfilePage.to_dict(), never in the engine.
# =============================================================================

from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence, Union


# -----------------------------------------------------------------------------
# VisitedCity — one entry in a traveler's history
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class VisitedCity:
    """A city the traveler has been to."""

    city: str                          # "Lisbon"
    country: str                       # Country code: "PT"
    date: Optional[str] = None         # ISO date "2023-06-15"; may be missing


# -----------------------------------------------------------------------------
# User — the traveler whose profile page we are building
# -----------------------------------------------------------------------------
# visited_countries is ORDERED.  The order is the visit order and it drives
# color assignment, so loaders must preserve it exactly as stored.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class User:
    """A traveler's recorded history."""

    name: str
    home_country: str                  # Country code, excluded from "most visited"
    tagline: Optional[str] = None
    visited_countries: list[str] = field(default_factory=list)
    visited_cities: list[VisitedCity] = field(default_factory=list)


# -----------------------------------------------------------------------------
# RankedCity / ReferenceData — the static world tables
# -----------------------------------------------------------------------------
# Loaded once per process and shared read-only across every request.
# Both city lists arrive pre-ranked by population, largest first.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class RankedCity:
    city: str
    country: str
    population: int


@dataclass(frozen=True)
class ReferenceData:
    """Country names, continents and ranked city lists."""

    continents_by_country: Mapping[str, str] = field(default_factory=dict)
    country_names: Mapping[str, str] = field(default_factory=dict)
    top_cities_by_population: Sequence[RankedCity] = field(default_factory=list)
    capital_cities: Sequence[RankedCity] = field(default_factory=list)

    def country_name(self, code: str) -> str:
        """Display name for a country code, or the code itself if unknown."""
        return self.country_names.get(code) or code


# -----------------------------------------------------------------------------
# MostVisitedCountry — the non-home country with the most cities
# -----------------------------------------------------------------------------
# `cities` is an int (count variant) or a list of city names (cityList
# variant).  The empty result is code="" / name="" / 0 or [].
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class MostVisitedCountry:
    code: str
    name: str
    cities: Union[int, list[str]]


@dataclass(frozen=True)
class Adventure:
    """One of the traveler's most recent dated visits."""

    city: str
    country: str                       # Display name, not the code
    date: str


# -----------------------------------------------------------------------------
# ComputedStats — the engine's output
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ComputedStats:
    """Aggregate statistics shown on the profile page."""

    countries_visited: int
    continents_visited: int
    total_cities: int
    notable_cities: list[str]          # ≤ 10, in reference rank order
    most_visited_country: MostVisitedCountry
    recent_adventures: list[Adventure]  # ≤ 5, newest first
