# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the deal desk: the memory
# store and its dual-source search, the deal calculators, and the seller
# message templates.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports Google ADK, FastMCP, or python-dotenv.
#   Every module here is plain Python and can be exercised from a REPL or a
#   pytest run with no server and no network.
# =============================================================================
