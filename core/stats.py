# =============================================================================
# core/stats.py  —  Travel Stats Engine
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a User's travel record plus the static ReferenceData into the
#   ComputedStats shown on the profile page: counts, continents, the most
#   notable cities, the favorite foreign country, and recent adventures.
#
# TOTAL FUNCTION:
#   compute_stats() never raises on a well-formed User.  Unknown country
#   codes fall back to the raw code for display, and are simply left out
#   of set-membership counts (continents).  An empty history produces
#   empty lists and the empty most-visited result.
#
# PURITY:
#   No I/O, no globals, no mutation of the inputs.  The recent-adventure
#   sort runs on a filtered copy, never on user.visited_cities itself.
# =============================================================================

from typing import Sequence

from core.config import StatsConfig
from core.models import (
    Adventure,
    ComputedStats,
    MostVisitedCountry,
    RankedCity,
    ReferenceData,
    User,
)

NOTABLE_CITY_LIMIT = 10
RECENT_ADVENTURE_LIMIT = 5


def compute_stats(
    user: User,
    reference: ReferenceData,
    config: StatsConfig = StatsConfig(),
) -> ComputedStats:
    """Compute the profile page statistics for one traveler.

    Args:
        user: The traveler's recorded history.  Assumed valid; the
            "user not found" case is handled before this is called.
        reference: Static country/continent/city tables.
        config: Which ranked city list and most-visited detail to use.

    Returns:
        A freshly built ComputedStats.
    """
    # Codes missing from the continent table contribute nothing.
    continents = {
        reference.continents_by_country[code]
        for code in user.visited_countries
        if reference.continents_by_country.get(code)
    }

    ranked = (
        reference.capital_cities
        if config.ranked_city_list == "capitals"
        else reference.top_cities_by_population
    )

    return ComputedStats(
        countries_visited=len(user.visited_countries),
        continents_visited=len(continents),
        total_cities=len(user.visited_cities),
        notable_cities=_notable_cities(user, ranked),
        most_visited_country=_most_visited_country(
            user, reference, config.most_visited_detail
        ),
        recent_adventures=_recent_adventures(user, reference),
    )


def _notable_cities(user: User, ranked: Sequence[RankedCity]) -> list[str]:
    """Visited cities that appear in the ranked list, in ranking order."""
    visited = {c.city for c in user.visited_cities}
    notable: list[str] = []
    for entry in ranked:
        if len(notable) >= NOTABLE_CITY_LIMIT:
            break
        if entry.city in visited:
            notable.append(entry.city)
    return notable


def _most_visited_country(
    user: User,
    reference: ReferenceData,
    detail: str,
) -> MostVisitedCountry:
    # dicts keep insertion order, so iterating below follows first-seen
    # order in visited_cities.
    cities_by_country: dict[str, list[str]] = {}
    for visit in user.visited_cities:
        if visit.country != user.home_country:
            cities_by_country.setdefault(visit.country, []).append(visit.city)

    best_code = ""
    best_cities: list[str] = []
    for code, cities in cities_by_country.items():
        # Strictly greater: an equal count never displaces the leader.
        if len(cities) > len(best_cities):
            best_code = code
            best_cities = cities

    return MostVisitedCountry(
        code=best_code,
        name=reference.country_name(best_code),
        cities=list(best_cities) if detail == "cityList" else len(best_cities),
    )


def _recent_adventures(user: User, reference: ReferenceData) -> list[Adventure]:
    # ISO dates compare correctly as plain strings.
    dated = [c for c in user.visited_cities if c.date]
    dated = sorted(dated, key=lambda c: c.date, reverse=True)
    return [
        Adventure(
            city=c.city,
            country=reference.country_name(c.country),
            date=c.date,
        )
        for c in dated[:RECENT_ADVENTURE_LIMIT]
    ]
