# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between the narrator agent and core/.
#   Each tool:
#     1. Calls a pure function from core/
#     2. Handles serialization (dataclasses → camelCase dicts for JSON)
#     3. Turns "user not found" into an error dict the agent can act on
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT compute statistics (that's core/stats.py)
#   - They do NOT know about Google ADK
# =============================================================================
