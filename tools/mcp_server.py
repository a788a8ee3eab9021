# =============================================================================
# tools/mcp_server.py  —  FastMCP Server (transport binding)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Puts the tool registry (tools/site_tools.py) behind a FastMCP server so
#   an MCP client can reach it over stdio.
#
# HOW IT WORKS (the flow):
#   1. The client sends tools/list  → FastMCP answers with one RegistryTool
#      per registry descriptor: same name, description and input schema
#   2. The client sends tools/call  → the RegistryTool hands the raw
#      arguments to registry.dispatch(); unknown names are sent there too
#   3. The ToolResult comes back and is converted to MCP TextContent blocks
#   4. If dispatch raised a ToolError, FastMCP reports the call as failed
#      (isError=true) with the error's message and nothing else
#
# RUNNING THIS SERVER:
#     a) python main.py
#     b) python -m tools.mcp_server
#     c) webflow-mcp-server          (console script, see pyproject.toml)
#   All three need WEBFLOW_API_TOKEN set (or present in a .env file).
# =============================================================================

import copy
from typing import Any, Callable, Optional

from fastmcp import FastMCP
from fastmcp.server.middleware import Middleware, MiddlewareContext
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult as McpToolResult
from mcp.types import TextContent
from pydantic import Field

from core.config import Settings
from core.models import ToolDescriptor, ToolResult
from core.webflow import WebflowClient
from tools.site_tools import ClientFactory, ToolRegistry, build_registry

SERVER_NAME = "webflow-mcp-server"
SERVER_VERSION = "1.0.0"


def _to_mcp_result(result: ToolResult) -> McpToolResult:
    return McpToolResult(
        content=[TextContent(type="text", text=block.text) for block in result.content],
    )


class RegistryTool(Tool):
    """A FastMCP tool whose schema and body both come from the registry.

    FastMCP does no argument checking of its own here: the raw arguments go
    straight to registry.dispatch(), and the handler's pydantic model decides.
    """

    dispatch: Callable[[str, Any], ToolResult] = Field(exclude=True)

    @classmethod
    def from_descriptor(cls, descriptor: ToolDescriptor, registry: ToolRegistry) -> "RegistryTool":
        return cls(
            name=descriptor.name,
            description=descriptor.description,
            parameters=copy.deepcopy(descriptor.input_schema),
            dispatch=registry.dispatch,
        )

    async def run(self, arguments: dict[str, Any]) -> McpToolResult:
        return _to_mcp_result(self.dispatch(self.name, arguments))


class RegistryMiddleware(Middleware):
    """Sends tools/list and unregistered tool names through the registry."""

    def __init__(self, registry: ToolRegistry):
        self._registry = registry

    async def on_list_tools(self, context: MiddlewareContext, call_next):
        self._registry.list_tools()
        return await call_next(context)

    async def on_call_tool(self, context: MiddlewareContext, call_next):
        name = context.message.name
        if name not in self._registry:
            self._registry.dispatch(name, context.message.arguments)
        return await call_next(context)


def build_server(settings: Settings, client_factory: Optional[ClientFactory] = None) -> FastMCP:
    """Create the FastMCP server with every registry tool registered.

    Args:
        settings: Loaded configuration (token, base URL, timeout).
        client_factory: Returns a fresh Webflow client per tool call.
            Defaults to a real WebflowClient built from ``settings``.
    """
    if client_factory is None:
        def client_factory() -> WebflowClient:
            return WebflowClient.from_settings(settings)

    registry = build_registry(client_factory)

    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)
    mcp.add_middleware(RegistryMiddleware(registry))
    for descriptor in registry.descriptors:
        mcp.add_tool(RegistryTool.from_descriptor(descriptor, registry))

    return mcp


if __name__ == "__main__":
    from main import main

    main()
