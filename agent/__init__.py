# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent configuration.
#
# ARCHITECTURAL ROLE:
#   The agent is the coordinator.  It reads the investor's request, decides
#   which deal-desk tools to call (memory search, calculators, message
#   templates, save_memory), and explains the results.  It holds no math and
#   no file access of its own; all of that sits behind the MCP tools.
# =============================================================================
