# =============================================================================
# core/formatting.py  —  Site → Text Rendering
# =============================================================================
#
# The MCP client (usually an LLM) reads plain text, so every Site is turned
# into a small, fixed-layout block before it leaves the server.  These are
# pure functions: same Site in, same text out.  They never raise for a Site
# that came out of Site.from_api().
#
# Field order is fixed: ID, display name, short name, workspace, created,
# last published, preview URL.  Missing dates and a missing preview URL
# render as "N/A"; the other fields are printed as they came.
# =============================================================================

from datetime import datetime
from typing import Optional, Sequence

from core.models import Site

PLACEHOLDER = "N/A"
NO_SITES_MESSAGE = "No sites found for this account."


def format_date(value: Optional[datetime]) -> str:
    """Render a timestamp in local time and the default locale, or "N/A"."""
    if not value:
        return PLACEHOLDER
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime("%c")


def format_site(site: Site) -> str:
    """Render one site as a detail block."""
    return "\n".join([
        "• Site Details:",
        f"  ID: {site.id}",
        f"  Display Name: {site.display_name}",
        f"  Short Name: {site.short_name}",
        "",
        "- Workspace Information:",
        f"  Workspace ID: {site.workspace_id}",
        "",
        "- Dates:",
        f"  Created On: {format_date(site.created_on)}",
        f"  Last Published: {format_date(site.last_published)}",
        "",
        "- URLs:",
        f"  Preview URL: {site.preview_url or PLACEHOLDER}",
    ])


def format_site_list(sites: Sequence[Site]) -> str:
    """Render a list of sites, prefixed with the total count.

    Blocks appear in the order given.  An empty sequence renders the fixed
    "no sites" message.
    """
    if not sites:
        return NO_SITES_MESSAGE
    blocks = "\n\n".join(format_site(site) for site in sites)
    return f"Found {len(sites)} sites:\n\n{blocks}"


def format_not_found(site_id: str) -> str:
    return f"Site with ID {site_id} not found."
