# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent configuration.
#
# ARCHITECTURAL ROLE:
#   The agent is a client of the MCP server.  It:
#     1. Receives a Stacks / Clarity development question
#     2. Decides which SIPs, guides, or bundles it needs
#     3. Calls the tools (via MCP) to fetch them
#     4. Answers from what the tools returned
#
# WHAT THE AGENT IS NOT:
#   - It does NOT read the corpus itself (that's knowledge/)
#   - It does NOT define tools (that's tools/)
# =============================================================================
