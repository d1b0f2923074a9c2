# =============================================================================
# core/user_profile.py  —  Traveler Storage & Retrieval
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Finds a traveler's recorded history by username and turns it into a
#   User.  Each traveler lives in its own JSON file:
#
#       <data dir>/users/<username>.json
#
# WHY VALIDATE THE USERNAME FIRST?
#   The username becomes part of a file path.  Anything outside
#   [a-zA-Z0-9_-]{3,30} (slashes, dots, empty strings) is rejected before we
#   touch the filesystem, so "../../etc/passwd" can't be looked up.
#
# NOT FOUND IS NOT AN ERROR:
#   An invalid username, a missing file, and a malformed file all come back
#   as None.  Callers turn that into a "user not found" response; the stats
#   engine is never called without a valid User.
#
# IDEMPOTENCY:
#   load_user() is a pure read.  Calling it 100 times returns equal results.
# =============================================================================

import json
import logging
import os
import re

from core.config import data_dir
from core.models import User, VisitedCity

logger = logging.getLogger(__name__)

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{3,30}$")


def is_valid_username(username: str) -> bool:
    # Tool callers can send any JSON value, not only strings.
    if not isinstance(username, str):
        return False
    return bool(USERNAME_PATTERN.fullmatch(username))


def _users_dir() -> str:
    return os.path.join(data_dir(), "users")


def parse_user(raw: dict) -> User:
    """Convert a camelCase user document into a User.

    Raises:
        KeyError: if a required field (name, homeCountry, city, country)
            is missing.
    """
    return User(
        name=raw["name"],
        tagline=raw.get("tagline"),
        home_country=raw["homeCountry"],
        visited_countries=list(raw.get("visitedCountries", [])),
        visited_cities=[
            VisitedCity(
                city=entry["city"],
                country=entry["country"],
                date=entry.get("date") or None,
            )
            for entry in raw.get("visitedCities", [])
        ],
    )


def load_user(username: str) -> User | None:
    """Retrieve a traveler's history by username.

    Args:
        username: The profile identifier (e.g., "jaredmorgenstern").

    Returns:
        A User if found and well-formed, otherwise None.
    """
    if not is_valid_username(username):
        logger.warning("Rejected invalid username %r", username)
        return None

    path = os.path.join(_users_dir(), f"{username}.json")
    try:
        with open(path, encoding="utf-8") as f:
            return parse_user(json.load(f))
    except FileNotFoundError:
        logger.warning("No travel data for %r", username)
        return None
    except OSError as exc:
        logger.warning("Unreadable travel data for %r: %s", username, exc)
        return None
    # ValueError covers both JSONDecodeError and UnicodeDecodeError.
    except (ValueError, KeyError, TypeError) as exc:
        logger.warning("Malformed travel data for %r: %s", username, exc)
        return None


def list_available_users() -> list[str]:
    """List every username with a data file, sorted.

    These are the profiles worth prerendering; anything else is a 404.
    """
    try:
        names = os.listdir(_users_dir())
    except FileNotFoundError:
        return []
    usernames = [
        name[: -len(".json")]
        for name in names
        if name.endswith(".json")
        and os.path.isfile(os.path.join(_users_dir(), name))
    ]
    return sorted(u for u in usernames if is_valid_username(u))
