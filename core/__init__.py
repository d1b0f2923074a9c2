# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the travel profile.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports Google ADK, FastMCP, or any
#   orchestration framework.  The stats engine and color assigner are pure
#   functions; the loaders only read local JSON files.
# =============================================================================
