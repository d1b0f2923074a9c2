# =============================================================================
# core/colors.py  —  Map color assignment
# =============================================================================
#
# Each visited country gets a color on the map.  Colors cycle through a
# small warm palette in visit order, so the same history always renders
# the same map.
#
# If a code repeats, its later position wins.  Callers are expected to
# pass unique codes; a repeat is their contract violation, not ours.
# =============================================================================

PALETTE: tuple[str, ...] = (
    "#c9a227", "#d4a84b", "#8b7355",
    "#7c6c5c", "#a08060", "#c4a574",
)


def assign_colors(visited_countries: list[str]) -> dict[str, str]:
    """Map each visited country code to a palette color by visit order."""
    return {
        code: PALETTE[i % len(PALETTE)]
        for i, code in enumerate(visited_countries)
    }
