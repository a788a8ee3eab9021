# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains everything the server knows about Webflow:
#
#   config.py      — settings from the environment (the API token)
#   models.py      — Site, ToolDescriptor, ToolResult dataclasses
#   webflow.py     — the HTTP client for the sites API
#   formatting.py  — Site → human-readable text
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or knows about the MCP protocol.
#   The tools/ package wraps these pieces into MCP tools; core/ is just the
#   Webflow side of the adapter and can be used from a plain REPL.
# =============================================================================
