# =============================================================================
# core/webflow.py  —  Webflow Sites API Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   A small synchronous client for the two read operations this server
#   needs from the Webflow v2 API:
#
#     GET /sites            → list every site the token can see
#     GET /sites/{site_id}  → one site's details
#
#   Both return Site dataclasses (core/models.py), never raw JSON.
#
# ERROR MODEL:
#   Every failure surfaces as a WebflowApiError.  "The site does not exist"
#   gets its own subclass, WebflowNotFoundError, so callers can tell
#   "no such resource" apart from "the call failed" with a plain
#   `except WebflowNotFoundError` instead of poking at response bodies.
#
#     HTTP 404, or an error body whose code is a not-found code
#                                   → WebflowNotFoundError
#     any other non-2xx             → WebflowApiError(status, code, message)
#     network / timeout failure     → WebflowApiError(message)
#     body that isn't a JSON object → WebflowApiError("Malformed response ...")
#
# LIFETIME:
#   A WebflowClient owns one httpx.Client.  Use it as a context manager so
#   the connection is closed when you're done:
#
#       with WebflowClient(token) as webflow:
#           site = webflow.get_site("abc123")
#
#   The tool handlers open a fresh client per call; nothing is pooled across
#   requests.
# =============================================================================

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from core.config import DEFAULT_API_BASE_URL, Settings
from core.models import Site

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = frozenset({"resource_not_found", "not_found", "NOT_FOUND"})


class WebflowApiError(Exception):
    """A Webflow API call failed."""

    def __init__(self, message: str, status: Optional[int] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code

    def __str__(self) -> str:
        parts = [self.message]
        if self.status is not None:
            parts.append(f"status={self.status}")
        if self.code:
            parts.append(f"code={self.code}")
        return " ".join(parts)


class WebflowNotFoundError(WebflowApiError):
    """The requested Webflow resource does not exist."""


class WebflowClient:
    """Read-only client for the Webflow sites API."""

    def __init__(
        self,
        access_token: str,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._http = httpx.Client(
            base_url=base_url,
            headers={
                "Authorization": f"Bearer {access_token}",
                "Accept": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "WebflowClient":
        return cls(
            settings.api_token,
            base_url=settings.api_base_url,
            timeout=settings.timeout,
            **kwargs,
        )

    def __enter__(self) -> "WebflowClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    # -------------------------------------------------------------------------
    # Public operations
    # -------------------------------------------------------------------------
    def get_site(self, site_id: str) -> Site:
        """Fetch a single site by ID.

        Raises:
            WebflowNotFoundError: if Webflow has no site with this ID.
            WebflowApiError: on any other failure.
        """
        payload = self._get(f"/sites/{quote(site_id, safe='')}")
        return self._to_site(payload)

    def list_sites(self) -> list[Site]:
        """List all sites accessible to the token.

        Returns an empty list when the response carries no ``sites`` array.
        """
        payload = self._get("/sites")
        records = payload.get("sites")
        if not isinstance(records, list):
            logger.debug("List response has no sites array: %r", records)
            return []
        return [self._to_site(record) for record in records]

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------
    def _get(self, path: str) -> dict:
        try:
            response = self._http.get(path)
        except httpx.HTTPError as exc:
            raise WebflowApiError(f"Request to {path} failed: {exc}") from exc

        if response.is_error:
            raise _error_from_response(response)

        try:
            payload = response.json()
        except ValueError as exc:
            raise WebflowApiError(f"Malformed response from {path}: not JSON") from exc
        if not isinstance(payload, dict):
            raise WebflowApiError(f"Malformed response from {path}: expected an object")
        return payload

    @staticmethod
    def _to_site(payload: Any) -> Site:
        try:
            return Site.from_api(payload)
        except ValueError as exc:
            raise WebflowApiError(f"Malformed site record: {exc}") from exc


def _error_from_response(response: httpx.Response) -> WebflowApiError:
    """Map a non-2xx response onto the error hierarchy."""
    code = None
    message = response.reason_phrase or "Webflow API error"
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        code = body.get("code") if isinstance(body.get("code"), str) else None
        message = body.get("message") or message

    if response.status_code == 404 or code in NOT_FOUND_CODES:
        return WebflowNotFoundError(message, status=response.status_code, code=code)
    return WebflowApiError(message, status=response.status_code, code=code)
