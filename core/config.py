# =============================================================================
# core/config.py  —  Stats engine configuration
# =============================================================================
#
# The profile page has two flavors that differ only in secondary metrics:
#
#   ranked_city_list     "population" → notable cities come from the world's
#                                       biggest cities
#                        "capitals"   → notable cities come from capitals only
#
#   most_visited_detail  "count"      → most-visited country shows a number
#                        "cityList"   → it shows the actual city names
#
# Rather than forking the engine, the choice is passed in as a StatsConfig.
#
# ENVIRONMENT TOGGLES:
#   TRAVEL_RANKED_CITY_LIST=capitals
#   TRAVEL_MOST_VISITED_DETAIL=cityList
#   Unset means the defaults ("population" / "count").
# =============================================================================

from dataclasses import dataclass
import os

RANKED_CITY_LISTS = ("population", "capitals")
MOST_VISITED_DETAILS = ("count", "cityList")


@dataclass(frozen=True)
class StatsConfig:
    """Which ranked list and which most-visited accumulator to use."""

    ranked_city_list: str = "population"
    most_visited_detail: str = "count"

    def __post_init__(self):
        if self.ranked_city_list not in RANKED_CITY_LISTS:
            raise ValueError(
                f"Unknown ranked_city_list {self.ranked_city_list!r}; "
                f"expected one of {RANKED_CITY_LISTS}"
            )
        if self.most_visited_detail not in MOST_VISITED_DETAILS:
            raise ValueError(
                f"Unknown most_visited_detail {self.most_visited_detail!r}; "
                f"expected one of {MOST_VISITED_DETAILS}"
            )


def load_stats_config() -> StatsConfig:
    """Build a StatsConfig from TRAVEL_* environment variables.

    Raises:
        ValueError: if either variable names an unknown variant.
    """
    return StatsConfig(
        ranked_city_list=os.environ.get("TRAVEL_RANKED_CITY_LIST", "population"),
        most_visited_detail=os.environ.get("TRAVEL_MOST_VISITED_DETAIL", "count"),
    )


def data_dir() -> str:
    """Directory holding cities.json and users/*.json.

    TRAVEL_DATA_DIR overrides the dataset bundled in core/data.
    """
    default = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")
    return os.environ.get("TRAVEL_DATA_DIR") or default
