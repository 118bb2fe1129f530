# =============================================================================
# main.py  —  Entry Point for the Weather MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# The host application (Claude Desktop, an ADK agent, the MCP inspector...)
# normally starts this as a subprocess and talks to it over stdin/stdout.
#
# WHAT HAPPENS:
#   1. Loads .env (REPLICATE_API_TOKEN, NWS_USER_AGENT, ...)
#   2. Builds Settings and configures stderr logging
#   3. Builds the tool registry + dispatcher, then the FastMCP server
#   4. Attaches to stdio and serves until the host closes the pipe
#
# EXIT CODES:
#   0  host closed the connection / Ctrl-C
#   1  bootstrap failed (bad config, transport could not attach)
# =============================================================================

import sys

from dotenv import load_dotenv

from core.config import Settings
from tools.mcp_server import configure_logging, create_dispatcher, create_server


def main() -> int:
    """Start the server on stdio and return the process exit code."""
    # Must run before Settings.from_env() so .env values are visible.
    load_dotenv()

    try:
        settings = Settings.from_env()
        configure_logging(settings.log_level)
        server = create_server(create_dispatcher(settings))
    except Exception as exc:
        print(f"Fatal error in main(): {exc}", file=sys.stderr)
        return 1

    print("Weather MCP Server running on stdio", file=sys.stderr)
    try:
        server.run(transport="stdio", show_banner=False)
    except KeyboardInterrupt:
        return 0
    except Exception as exc:
        print(f"Fatal error in main(): {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
