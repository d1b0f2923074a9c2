# =============================================================================
# core/profile_page.py  —  Profile Page Assembly
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Glues the pieces together for one request:
#     1. load the traveler (None → "user not found")
#     2. load the shared reference data
#     3. compute stats and map colors
#     4. hand back one ProfilePage ready for presentation
#
#   It holds no logic of its own; the engine lives in core/stats.py and
#   core/colors.py.
#
# SERIALIZATION:
#   ProfilePage.to_dict() produces the camelCase payload that the page
#   template consumes, so presentation never needs to compute anything.
# =============================================================================

from dataclasses import asdict, dataclass
from typing import Optional, Union

from core.colors import assign_colors
from core.config import StatsConfig, load_stats_config
from core.models import ComputedStats, ReferenceData, User
from core.reference_data import load_reference_data
from core.stats import compute_stats
from core.user_profile import load_user


def _copy_detail(cities: Union[int, list[str]]) -> Union[int, list[str]]:
    return list(cities) if isinstance(cities, list) else cities


@dataclass(frozen=True)
class ProfilePage:
    """Everything the profile page renders for one traveler."""

    user: User
    stats: ComputedStats
    colors: dict[str, str]

    def to_dict(self) -> dict:
        user = self.user
        stats = self.stats
        return {
            "user": {
                "name": user.name,
                "tagline": user.tagline,
                "homeCountry": user.home_country,
                "visitedCountries": list(user.visited_countries),
                "visitedCities": [asdict(c) for c in user.visited_cities],
            },
            "stats": {
                "countriesVisited": stats.countries_visited,
                "continentsVisited": stats.continents_visited,
                "totalCities": stats.total_cities,
                "notableCities": list(stats.notable_cities),
                "mostVisitedCountry": {
                    "name": stats.most_visited_country.name,
                    "cities": _copy_detail(stats.most_visited_country.cities),
                },
                "recentAdventures": [asdict(a) for a in stats.recent_adventures],
            },
            "colors": dict(self.colors),
        }


def build_profile_page(
    username: str,
    reference: Optional[ReferenceData] = None,
    config: Optional[StatsConfig] = None,
) -> ProfilePage | None:
    """Assemble the profile page for a username.

    Returns:
        The ProfilePage, or None if the username is invalid or has no data.
    """
    user = load_user(username)
    if user is None:
        return None

    if reference is None:
        reference = load_reference_data()
    if config is None:
        config = load_stats_config()
    return ProfilePage(
        user=user,
        stats=compute_stats(user, reference, config),
        colors=assign_colors(user.visited_countries),
    )
