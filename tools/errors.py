# =============================================================================
# tools/errors.py  —  Tool-facing Error Types
# =============================================================================
#
# Everything a tool call can fail with derives from FastMCP's ToolError.
# FastMCP turns a raised ToolError into an MCP result with isError=true and
# the exception's message as its text, so whatever message we put here is
# exactly what the client sees.  Keep these messages generic.  The real
# cause goes to the log, never into the tool result.
#
# RegistryError is the odd one out: it is a programming error caught at
# startup, not something a client can trigger.
# =============================================================================

from fastmcp.exceptions import ToolError


class SiteToolError(ToolError):
    """A tool call failed; the message is safe to show to the client."""


class ToolInputError(SiteToolError):
    """Tool arguments did not match the tool's input schema."""


class UnknownToolError(SiteToolError):
    """No handler is registered under the requested tool name."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class RegistryError(Exception):
    """Tool descriptors and handlers are out of sync."""
