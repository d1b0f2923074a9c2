# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent configuration.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer presents a travel profile in conversation.  It:
#     1. Works out which traveler the user is asking about
#     2. Calls tools (via MCP) to fetch the pre-computed profile
#     3. Narrates the stats in plain language
#
# WHAT THE AGENT IS NOT:
#   - It is NOT the stats engine (that's core/)
#   - It is NOT the tool implementations (that's tools/)
# =============================================================================
