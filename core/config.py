# =============================================================================
# core/config.py  —  Configuration Loader
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the server's settings from the process environment.  There is
#   exactly one required value, the Webflow API token.  Everything else has
#   a sensible default.
#
#   | Variable               | Required | Default                       |
#   |------------------------|----------|-------------------------------|
#   | WEBFLOW_API_TOKEN      | yes      | -                             |
#   | WEBFLOW_API_BASE_URL   | no       | https://api.webflow.com/v2    |
#   | WEBFLOW_API_TIMEOUT    | no       | unset = no timeout            |
#
# FAIL FAST:
#   A missing token is fatal.  The entry point (main.py) turns the
#   ConfigurationError raised here into a non-zero exit BEFORE any MCP
#   transport is created, so the client sees the server die immediately
#   instead of every tool call failing later.
#
# .env FILES:
#   This module only reads os.environ.  Loading a .env file is the entry
#   point's job (python-dotenv's load_dotenv()), so tests can pass a plain
#   dict and never touch the filesystem.
# =============================================================================

import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_API_BASE_URL = "https://api.webflow.com/v2"

TOKEN_ENV_VAR = "WEBFLOW_API_TOKEN"
BASE_URL_ENV_VAR = "WEBFLOW_API_BASE_URL"
TIMEOUT_ENV_VAR = "WEBFLOW_API_TIMEOUT"

REQUIRED_ENV_VARS = (TOKEN_ENV_VAR,)


class ConfigurationError(Exception):
    """Raised when the environment cannot produce a usable configuration."""


@dataclass(frozen=True)
class Settings:
    """Immutable server configuration, read once at startup."""

    api_token: str
    api_base_url: str = DEFAULT_API_BASE_URL
    timeout: Optional[float] = None

    def redacted(self) -> dict:
        """Settings safe to write to a log line."""
        return {
            TOKEN_ENV_VAR: "[REDACTED]",
            BASE_URL_ENV_VAR: self.api_base_url,
            TIMEOUT_ENV_VAR: self.timeout,
        }


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Args:
        environ: Mapping to read from.  Defaults to ``os.environ``.

    Returns:
        A populated Settings instance.

    Raises:
        ConfigurationError: if a required variable is missing or empty, or
            if WEBFLOW_API_TIMEOUT is not a positive number.
    """
    env = os.environ if environ is None else environ

    missing = [name for name in REQUIRED_ENV_VARS if not env.get(name)]
    if missing:
        raise ConfigurationError(
            f"Missing required environment variables: {', '.join(missing)}"
        )

    base_url = env.get(BASE_URL_ENV_VAR) or DEFAULT_API_BASE_URL

    return Settings(
        api_token=env[TOKEN_ENV_VAR],
        api_base_url=base_url.rstrip("/"),
        timeout=_parse_timeout(env.get(TIMEOUT_ENV_VAR)),
    )


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or raw.strip() == "":
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(
            f"{TIMEOUT_ENV_VAR} must be a number of seconds, got {raw!r}"
        ) from None
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigurationError(f"{TIMEOUT_ENV_VAR} must be positive, got {raw!r}")
    return timeout
