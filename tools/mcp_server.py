# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the travel profile as MCP tools.  Each tool is a thin wrapper
#   around core/: it loads the traveler, runs the engine, and returns a
#   plain dict.
#
# HOW IT WORKS (the flow):
#   1. The narrator agent wants to talk about a traveler
#   2. It calls a tool by name via MCP (e.g., "get_travel_profile")
#   3. FastMCP routes the call to the decorated function below
#   4. The function calls core/profile_page.py and returns the payload
#
# TOOL NAMING CONVENTIONS:
#   - get_*  → Read-only retrieval (idempotent, safe to retry)
#   - list_* → Discovery (idempotent, safe to retry)
#   Every tool in this project is read-only.
#
# "USER NOT FOUND":
#   Not an exception.  A tool returns an {"error": ...} dict that also
#   lists the usernames that DO exist, so the agent can recover.
#
# RUNNING THIS SERVER:
#   a) Standalone:  python -m tools.mcp_server
#   b) Spawned by the ADK agent over stdio transport
# =============================================================================

import json
import logging
import sys

from fastmcp import FastMCP

# --- Import core logic ---
# The tools layer depends on core/ and nothing else.
from core.profile_page import build_profile_page
from core.user_profile import list_available_users

# =============================================================================
# Logging Setup
# =============================================================================
# Log to STDERR: STDOUT carries the MCP JSON protocol, and a stray log line
# there would corrupt it.
#
# ANSI colors make the terminal easy to scan:
#   CYAN   — incoming requests (tool name + parameters)
#   YELLOW — intermediate status
#   GREEN  — response JSON
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logging.info(
        f"{_GREEN}  ← {tool_name} response: "
        f"{json.dumps(result, separators=(',', ':'), ensure_ascii=False)}{_RESET}"
    )
    return result


def _not_found(tool_name: str, username: str) -> dict:
    available = list_available_users()
    _log_status(f"User not found. Available: {available}")
    return _log_response(tool_name, {
        "error": f"User '{username}' not found.",
        "available_users": available,
        "hint": "Try one of the available usernames listed above.",
    })


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP("travel-profile-stats")


# =============================================================================
# TOOL 1: list_travel_profiles
# =============================================================================
@mcp.tool()
def list_travel_profiles() -> dict:
    """List every traveler that has a travel profile.

    WHEN TO CALL THIS: When the user doesn't name a traveler, or when
    get_travel_profile reports that a username was not found.

    Returns:
        A dict with:
          - usernames: Sorted list of known profile usernames
    """
    _log_request("list_travel_profiles")
    usernames = list_available_users()
    _log_status(f"Found {len(usernames)} profiles")
    return _log_response("list_travel_profiles", {"usernames": usernames})


# =============================================================================
# TOOL 2: get_travel_profile
# =============================================================================
# The main tool.  Everything the profile page shows comes back in one call,
# already computed. The agent narrates; it never counts.
# =============================================================================
@mcp.tool()
def get_travel_profile(username: str) -> dict:
    """Get a traveler's profile with pre-computed travel statistics.

    WHEN TO CALL THIS: Whenever you need facts about a traveler's history.
    Do not compute counts or rankings yourself; they are all here.

    Args:
        username: The profile identifier (3-30 letters, digits, '-' or '_').

    Returns:
        A dict with:
          - user: name, tagline, homeCountry, visitedCountries, visitedCities
          - stats:
              countriesVisited, continentsVisited, totalCities
              notableCities: visited cities among the world's biggest
              mostVisitedCountry: {name, cities} — favorite non-home country
              recentAdventures: up to 5 newest dated visits
          - colors: country code → map color

        Returns an error dict if the username is unknown or invalid.
    """
    _log_request("get_travel_profile", username=username)

    page = build_profile_page(username)
    if page is None:
        return _not_found("get_travel_profile", username)

    _log_status(
        f"{page.user.name}: {page.stats.countries_visited} countries, "
        f"{page.stats.total_cities} cities"
    )
    return _log_response("get_travel_profile", page.to_dict())


# =============================================================================
# TOOL 3: get_country_colors
# =============================================================================
@mcp.tool()
def get_country_colors(username: str) -> dict:
    """Get the map color assigned to each country a traveler has visited.

    Args:
        username: The profile identifier.

    Returns:
        A dict with:
          - colors: country code → hex color, in visit order
    """
    _log_request("get_country_colors", username=username)

    page = build_profile_page(username)
    if page is None:
        return _not_found("get_country_colors", username)

    return _log_response("get_country_colors", {"colors": dict(page.colors)})


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    mcp.run()
