# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool server.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP and core/.  It:
#     1. Receives a tool call (name + arguments) from the agent
#     2. Hands the arguments to a core/ function
#     3. Converts the dataclass result to a dict (and, for memory search,
#        a human-readable report)
#     4. Turns core errors into {"error": ...} dicts
#
# WHAT TOOLS DO NOT DO:
#   - No business logic (that's in core/)
#   - No agent decisions (that's agent/)
#   - No printing to stdout: stdout carries the MCP protocol itself
# =============================================================================
