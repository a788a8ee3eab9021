# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of everything that flows through the
# server: the Site records we get back from Webflow, the text blocks we send
# back to the MCP client, and the static descriptors of the tools we expose.
#
# All of them are FROZEN.  A Site is built once from an API response,
# formatted, and thrown away.  A ToolDescriptor is defined once at import
# time.  Nothing here is ever mutated after construction.
# =============================================================================

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional


# -----------------------------------------------------------------------------
# Site — one Webflow site, as returned by the sites API
# -----------------------------------------------------------------------------
# Webflow speaks camelCase JSON; we keep snake_case attributes and do the
# mapping in from_api().  Only `id` is mandatory.  The other text fields are
# rendered as-is, so a missing display name shows up blank rather than as a
# placeholder.  Only the two dates and the preview URL get "N/A".
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Site:
    """A Webflow site, read-only."""

    id: str
    display_name: str = ""
    short_name: str = ""
    workspace_id: str = ""
    created_on: Optional[datetime] = None
    last_published: Optional[datetime] = None
    preview_url: Optional[str] = None

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "Site":
        """Build a Site from one record of the Webflow sites API.

        Raises:
            ValueError: if the record is not an object, has no ``id``, or
                carries a timestamp we cannot parse.
        """
        if not isinstance(payload, Mapping):
            raise ValueError(f"Expected a site object, got {type(payload).__name__}")
        site_id = payload.get("id")
        if not site_id:
            raise ValueError("Site record has no id")

        return cls(
            id=str(site_id),
            display_name=_text(payload.get("displayName")),
            short_name=_text(payload.get("shortName")),
            workspace_id=_text(payload.get("workspaceId")),
            created_on=parse_timestamp(payload.get("createdOn")),
            last_published=parse_timestamp(payload.get("lastPublished")),
            preview_url=payload.get("previewUrl") or None,
        )


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp from the API (``None``/empty → ``None``)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid timestamp: {value!r}")
    # fromisoformat() only learned the "Z" suffix in 3.11
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


# -----------------------------------------------------------------------------
# TextContent / ToolResult — what a tool hands back to the MCP client
# -----------------------------------------------------------------------------
# MCP results are an ordered list of typed content blocks.  Every tool in
# this server answers with plain text, so TextContent is the only block type.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TextContent:
    text: str
    type: str = "text"

    def to_dict(self) -> dict:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class ToolResult:
    """Ordered content blocks produced by one successful tool call."""

    content: tuple[TextContent, ...] = ()

    @classmethod
    def text(cls, text: str) -> "ToolResult":
        """Shortcut for the common single-text-block result."""
        return cls(content=(TextContent(text=text),))

    def to_dict(self) -> dict:
        return {"content": [block.to_dict() for block in self.content]}


# -----------------------------------------------------------------------------
# ToolDescriptor — the static contract of one tool
# -----------------------------------------------------------------------------
# This is what the MCP client sees on tools/list: a name, a description the
# LLM reads to decide WHEN to call the tool, and a JSON schema telling it
# WHAT to pass.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    input_schema: dict = field(default_factory=lambda: {"type": "object", "properties": {}})
