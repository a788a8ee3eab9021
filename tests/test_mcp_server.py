"""End-to-end tests through an in-memory FastMCP client."""

import logging

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from core.webflow import WebflowApiError, WebflowNotFoundError
from tools.mcp_server import SERVER_NAME, build_server
from tools.site_tools import TOOL_DEFINITIONS

from tests.fakes import FakeClientFactory, FakeWebflow


@pytest.fixture
def server(settings, client_factory):
    return build_server(settings, client_factory=client_factory)


def test_server_identity(server):
    assert server.name == SERVER_NAME


@pytest.mark.asyncio
async def test_list_tools(server):
    async with Client(server) as client:
        first = await client.list_tools()
        await client.call_tool("get_sites", {})
        second = await client.list_tools()

    assert sorted(tool.name for tool in first) == ["get_site", "get_sites"]
    assert sorted(tool.name for tool in second) == ["get_site", "get_sites"]

    by_name = {tool.name: tool for tool in first}
    get_site = by_name["get_site"].inputSchema
    assert get_site["type"] == "object"
    assert get_site["properties"]["siteId"]["type"] == "string"
    assert get_site["required"] == ["siteId"]
    assert by_name["get_sites"].inputSchema.get("properties", {}) == {}
    assert by_name["get_site"].description.startswith("Retrieve detailed information")


@pytest.mark.asyncio
async def test_get_site(server, fake_webflow):
    async with Client(server) as client:
        result = await client.call_tool("get_site", {"siteId": "abc123"})

    assert not result.is_error
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    assert "Display Name: Demo" in result.content[0].text
    assert fake_webflow.calls == [("get_site", "abc123")]


@pytest.mark.asyncio
async def test_not_found_is_not_an_error(settings):
    webflow = FakeWebflow(error=WebflowNotFoundError("gone", status=404))
    server = build_server(settings, client_factory=FakeClientFactory(webflow))

    async with Client(server) as client:
        result = await client.call_tool("get_site", {"siteId": "nope"})

    assert not result.is_error
    assert result.content[0].text == "Site with ID nope not found."


@pytest.mark.asyncio
async def test_remote_failure_is_a_generic_error(settings):
    webflow = FakeWebflow(error=WebflowApiError("internal detail xyz", status=500))
    server = build_server(settings, client_factory=FakeClientFactory(webflow))

    async with Client(server) as client:
        with pytest.raises(ToolError, match="Failed to fetch site details") as excinfo:
            await client.call_tool("get_site", {"siteId": "abc123"})

    assert "internal detail xyz" not in str(excinfo.value)


@pytest.mark.asyncio
async def test_empty_site_id_fails_validation(server, client_factory):
    async with Client(server) as client:
        with pytest.raises(ToolError, match="Invalid arguments for get_site"):
            await client.call_tool("get_site", {"siteId": ""})

    assert client_factory.created == 0


@pytest.mark.asyncio
async def test_server_keeps_serving_after_failure(server):
    async with Client(server) as client:
        with pytest.raises(ToolError):
            await client.call_tool("get_site", {"siteId": ""})
        result = await client.call_tool("get_sites", {})

    assert result.content[0].text.startswith("Found 1 sites:")


@pytest.mark.asyncio
async def test_listed_schemas_match_registry(server):
    async with Client(server) as client:
        tools = await client.list_tools()

    listed = {tool.name: tool for tool in tools}
    for descriptor in TOOL_DEFINITIONS:
        assert listed[descriptor.name].description == descriptor.description
        assert listed[descriptor.name].inputSchema == descriptor.input_schema


@pytest.mark.asyncio
async def test_get_sites_ignores_stray_arguments(server, fake_webflow):
    async with Client(server) as client:
        result = await client.call_tool("get_sites", {"unexpected": True})

    assert not result.is_error
    assert result.content[0].text.startswith("Found 1 sites:")
    assert fake_webflow.calls == [("list_sites",)]


@pytest.mark.asyncio
async def test_unknown_tool_goes_through_dispatch(server, client_factory, caplog):
    caplog.set_level(logging.ERROR, logger="webflow_mcp")

    async with Client(server) as client:
        with pytest.raises(ToolError, match="Unknown tool: publish_site"):
            await client.call_tool("publish_site", {"siteId": "abc123"})

    assert client_factory.created == 0
    assert any("Error executing tool publish_site" in record.getMessage() for record in caplog.records)
