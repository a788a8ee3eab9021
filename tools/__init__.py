# =============================================================================
# tools/__init__.py
# =============================================================================
# This package is the MCP side of the adapter.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between the MCP protocol and the
#   Webflow logic in core/:
#     - schemas.py     validates tool arguments (pydantic)
#     - site_tools.py  the get_site / get_sites handlers and the registry
#                      that routes a tool name to its handler
#     - mcp_server.py  registers the tools on a FastMCP server
#     - errors.py      ToolError subclasses FastMCP reports as failed calls
#     - logs.py        stderr logging helpers
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT talk HTTP (that's core/webflow.py)
#   - They do NOT decide how a Site looks as text (that's core/formatting.py)
# =============================================================================
