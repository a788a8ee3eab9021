# =============================================================================
# tools/site_tools.py  —  Tool Registry, Handlers & Dispatch
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the two tools this server exposes and the table that routes a
#   tool name to its handler.
#
#     get_site   → one site's details, by ID
#     get_sites  → every site the token can see
#
# HOW A CALL FLOWS:
#   1. dispatch(name, arguments) looks the name up          (unknown → error)
#   2. the handler validates its arguments                  (tools/schemas.py)
#   3. the handler opens a WebflowClient and makes ONE call (core/webflow.py)
#   4. the handler formats the result as text               (core/formatting.py)
#   5. dispatch returns the ToolResult untouched
#
# ERROR CONVENTIONS:
#   - "Site not found" is a SUCCESSFUL result whose text says so.  An
#     absent resource is an answer, not a failure.
#   - Any other remote failure is logged in full and replaced with a
#     generic SiteToolError; the client never sees the raw error.
#   - dispatch() logs whatever a handler raises, tagged with the tool name,
#     and re-raises it unchanged.
#
# THE REGISTRY:
#   Descriptors and handlers are two read-only tables keyed by tool name,
#   built once.  ToolRegistry refuses to construct if a descriptor has no
#   handler or a handler has no descriptor.
# =============================================================================

from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Sequence

from core.formatting import NO_SITES_MESSAGE, format_not_found, format_site, format_site_list
from core.models import ToolDescriptor, ToolResult
from core.webflow import WebflowClient, WebflowNotFoundError
from tools.errors import RegistryError, SiteToolError, UnknownToolError
from tools.logs import log_error, log_request, log_response, log_status
from tools.schemas import GetSiteInput, GetSitesInput, validate_arguments

Arguments = Optional[Mapping[str, Any]]
ToolHandler = Callable[[Arguments], ToolResult]
ClientFactory = Callable[[], WebflowClient]


# =============================================================================
# Tool definitions
# =============================================================================
# The descriptions are what the LLM on the other end reads to decide WHEN to
# call a tool, so they say what comes back, not how we get it.
# =============================================================================
GET_SITE = ToolDescriptor(
    name="get_site",
    description=(
        "Retrieve detailed information about a specific Webflow site by ID, "
        "including workspace, creation date, display name, and publishing details"
    ),
    input_schema={
        "type": "object",
        "properties": {
            "siteId": {
                "type": "string",
                "description": "The unique identifier of the Webflow site",
            },
        },
        "required": ["siteId"],
    },
)

GET_SITES = ToolDescriptor(
    name="get_sites",
    description="Retrieve a list of all Webflow sites accessible to the authenticated user",
    input_schema={
        "type": "object",
        "properties": {},
        "required": [],
    },
)

TOOL_DEFINITIONS: tuple[ToolDescriptor, ...] = (GET_SITE, GET_SITES)


# =============================================================================
# Handlers
# =============================================================================
class SiteTools:
    """Handlers for the Webflow site tools.

    Args:
        client_factory: Zero-argument callable returning a fresh
            WebflowClient (or anything with the same get_site / list_sites
            methods that works as a context manager).  Called once per
            tool invocation.
    """

    def __init__(self, client_factory: ClientFactory):
        self._client_factory = client_factory

    def get_site(self, arguments: Arguments) -> ToolResult:
        params = validate_arguments(GET_SITE.name, GetSiteInput, arguments)
        log_request(GET_SITE.name, siteId=params.siteId)

        try:
            with self._client_factory() as webflow:
                site = webflow.get_site(params.siteId)
        except WebflowNotFoundError:
            log_status(f"Site {params.siteId} not found")
            result = ToolResult.text(format_not_found(params.siteId))
            log_response(GET_SITE.name, result.to_dict())
            return result
        except Exception as exc:
            log_error("Error fetching site", exc)
            raise SiteToolError("Failed to fetch site details") from exc

        log_status(f"Found site {site.display_name!r}")
        result = ToolResult.text(format_site(site))
        log_response(GET_SITE.name, result.to_dict())
        return result

    def get_sites(self, arguments: Arguments) -> ToolResult:
        validate_arguments(GET_SITES.name, GetSitesInput, arguments)
        log_request(GET_SITES.name)

        try:
            with self._client_factory() as webflow:
                sites = webflow.list_sites()
        except Exception as exc:
            log_error("Error fetching sites", exc)
            raise SiteToolError("Failed to fetch sites list") from exc

        if not isinstance(sites, Sequence) or not sites:
            log_status("No sites returned")
            result = ToolResult.text(NO_SITES_MESSAGE)
        else:
            log_status(f"Got {len(sites)} sites")
            result = ToolResult.text(format_site_list(sites))
        log_response(GET_SITES.name, result.to_dict())
        return result

    def handlers(self) -> dict[str, ToolHandler]:
        return {
            GET_SITE.name: self.get_site,
            GET_SITES.name: self.get_sites,
        }


# =============================================================================
# Registry & dispatch
# =============================================================================
class ToolRegistry:
    """Immutable name → descriptor and name → handler tables."""

    def __init__(self, descriptors: Sequence[ToolDescriptor], handlers: Mapping[str, ToolHandler]):
        names = [descriptor.name for descriptor in descriptors]
        if len(set(names)) != len(names):
            raise RegistryError(f"Duplicate tool names: {names}")

        missing = [name for name in names if name not in handlers]
        orphaned = [name for name in handlers if name not in names]
        if missing or orphaned:
            raise RegistryError(
                f"Tool registry out of sync: no handler for {missing}, "
                f"no descriptor for {orphaned}"
            )

        self._descriptors = tuple(descriptors)
        self._handlers = MappingProxyType(dict(handlers))

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    @property
    def descriptors(self) -> tuple[ToolDescriptor, ...]:
        return self._descriptors

    def list_tools(self) -> tuple[ToolDescriptor, ...]:
        log_status("Tools requested by client")
        return self._descriptors

    def dispatch(self, name: str, arguments: Arguments = None) -> ToolResult:
        """Run the tool called ``name`` and return its result.

        Raises:
            UnknownToolError: if no tool has that name.  No handler runs.
            SiteToolError: whatever the handler raised, re-raised as-is.
        """
        try:
            handler = self._handlers.get(name)
            if handler is None:
                raise UnknownToolError(name)
            return handler(arguments)
        except Exception as exc:
            log_error(f"Error executing tool {name}", exc, traceback=False)
            raise


def build_registry(client_factory: ClientFactory) -> ToolRegistry:
    """Wire the site tools into a registry backed by ``client_factory``."""
    return ToolRegistry(TOOL_DEFINITIONS, SiteTools(client_factory).handlers())
