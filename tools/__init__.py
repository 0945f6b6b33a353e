# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool server.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between MCP clients and the knowledge
#   base.  mcp_server.py:
#     1. Builds one CorpusLayout at startup
#     2. Wraps each knowledge/ operation in a FastMCP tool
#     3. Logs every call to stderr
#     4. Turns unexpected failures into readable text
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT read files or format documents (that's knowledge/)
#   - They do NOT know about Google ADK (any MCP client can use them)
# =============================================================================
