# =============================================================================
# tools/mcp_server.py  —  FastMCP binding for the tool dispatcher
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes every Operation in the registry as an MCP tool over stdio.
#   FastMCP owns the protocol (framing, initialize, tools/list, tools/call);
#   we own registration, validation and error handling.
#
# HOW IT WORKS (the flow):
#   1. The host sends tools/call {name, arguments}
#   2. FastMCP routes it to the DispatchedTool registered under that name
#   3. DispatchedTool.run() hands the RAW arguments to ToolDispatcher.invoke()
#   4. The dispatcher validates, runs the handler, and returns a ToolResult
#   5. Success: the content blocks are converted to MCP content blocks.
#      Failure: ToolError is raised, which FastMCP returns as a result with
#      isError=true carrying the same text.
#
#   DispatchedTool does no validation of its own, so every bad argument
#   produces the dispatcher's readable text instead of a protocol error.
#   The dispatcher runs in a worker thread; a blocking provider call (a
#   "Prefer: wait" prediction can take a minute) leaves pings answered.
#
# RUNNING THIS SERVER:
#   python main.py   (or the `weather-mcp-server` console script)
# =============================================================================

import json
import logging
import sys
from typing import Any

import anyio
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult as MCPToolResult
from mcp.types import ImageContent as MCPImageContent
from mcp.types import TextContent as MCPTextContent
from pydantic import PrivateAttr

from core.config import Settings
from core.http import HttpClient
from core.image_gen import ImageGenerator
from core.weather import WeatherService
from tools.dispatcher import ToolDispatcher
from tools.operations import build_registry
from tools.registry import Operation
from tools.result import ImageContent, TextContent, ToolResult

SERVER_NAME = "weather"
SERVER_VERSION = "1.2.0"

logger = logging.getLogger("mcp_server")

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR.  STDOUT is the MCP transport; anything else written
# there corrupts the JSON-RPC stream.
#
#   CYAN    incoming tool calls (name + arguments)
#   YELLOW  intermediate status
#   GREEN   response text
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"


def configure_logging(level: str = "INFO") -> None:
    """Send all log records to stderr in the [MCP] format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def _log_request(tool_name: str, arguments: dict) -> None:
    param_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(result: ToolResult) -> ToolResult:
    """Log the response as compact JSON in GREEN, then return it."""
    summary = {"is_error": result.is_error, "text": result.first_text}
    logger.info(f"{_GREEN}  ← {result.tool_name} response: {json.dumps(summary, ensure_ascii=False)}{_RESET}")
    return result


def to_mcp_content(result: ToolResult) -> list:
    """Convert our content blocks to the MCP SDK's types."""
    blocks = []
    for block in result.content:
        if isinstance(block, TextContent):
            blocks.append(MCPTextContent(type="text", text=block.text))
        elif isinstance(block, ImageContent):
            blocks.append(MCPImageContent(type="image", data=block.data, mimeType=block.mime_type))
    return blocks


# =============================================================================
# DispatchedTool — one FastMCP tool per registered Operation
# =============================================================================
class DispatchedTool(Tool):
    """FastMCP tool whose execution is delegated to a ToolDispatcher."""

    _dispatcher: ToolDispatcher = PrivateAttr()

    @classmethod
    def from_operation(cls, operation: Operation, dispatcher: ToolDispatcher) -> "DispatchedTool":
        tool = cls(
            name=operation.name,
            description=operation.description,
            parameters=operation.input_schema(),
        )
        tool._dispatcher = dispatcher
        return tool

    async def run(self, arguments: dict[str, Any]) -> MCPToolResult:
        arguments = arguments or {}
        _log_request(self.name, arguments)
        result = await anyio.to_thread.run_sync(self._dispatcher.invoke, self.name, arguments)
        _log_response(result)
        if result.is_error:
            _log_status(f"{self.name} returned an error result")
            raise ToolError(result.first_text)
        return MCPToolResult(content=to_mcp_content(result))


# =============================================================================
# Server assembly
# =============================================================================
def create_dispatcher(settings: Settings, http: HttpClient | None = None) -> ToolDispatcher:
    """Wire core services into a frozen registry and a dispatcher."""
    http = http or HttpClient(user_agent=settings.user_agent, timeout=settings.http_timeout)
    weather = WeatherService(http, settings.nws_api_base)
    images = ImageGenerator(http, settings.replicate_api_base, settings.replicate_model_version)
    return ToolDispatcher(build_registry(weather, images))


def create_server(dispatcher: ToolDispatcher) -> FastMCP:
    """Build a FastMCP server exposing every operation in the dispatcher's registry."""
    server = FastMCP(SERVER_NAME, version=SERVER_VERSION)
    for operation in dispatcher.registry:
        server.add_tool(DispatchedTool.from_operation(operation, dispatcher))
    logger.debug("Registered tools: %s", ", ".join(dispatcher.registry.names()))
    return server
