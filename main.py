# =============================================================================
# main.py  —  Entry Point for the Webflow MCP Server
# =============================================================================
#
# HOW TO RUN:
#   WEBFLOW_API_TOKEN=... uv run python main.py
#
# WHAT HAPPENS:
#   1. Logging goes to stderr (stdout belongs to the MCP protocol)
#   2. A .env file, if present, is loaded into the environment
#   3. Settings are read; a missing WEBFLOW_API_TOKEN exits with status 1
#      before any transport exists
#   4. The FastMCP server is built (tools/mcp_server.py)
#   5. The server runs on stdio until the client disconnects
#
# The token is never logged; startup prints a redacted copy of the settings.
# =============================================================================

import logging
import sys

from dotenv import load_dotenv

from core.config import ConfigurationError, load_settings
from tools.logs import configure_logging, log_error
from tools.mcp_server import build_server

logger = logging.getLogger("webflow_mcp")


def main() -> None:
    """Start the Webflow MCP server on stdio."""
    configure_logging()

    # Must run before load_settings(): the token may live in .env
    load_dotenv()

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        logger.error(str(exc))
        sys.exit(1)

    try:
        logger.info("Starting server with env vars: %s", settings.redacted())
        mcp = build_server(settings)
        logger.info("Webflow MCP Server running on stdio")
        mcp.run(transport="stdio")
    except Exception as exc:
        log_error("Startup error", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
