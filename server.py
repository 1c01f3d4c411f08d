"""MCP Server for Zerodha Kite Connect."""
import argparse
import logging
import sys
from typing import Any

from fastmcp import FastMCP
from fastmcp.server.middleware import Middleware, MiddlewareContext
from fastmcp.tools.tool import Tool
from fastmcp.tools.tool import ToolResult as MCPToolResult
from mcp.types import TextContent
from pydantic import PrivateAttr

from auth import get_session
from dispatcher import Dispatcher, ToolResult
from logging_config import configure_logging
from registry import ToolDescriptor, list_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "zerodha-kite-mcp"
TRANSPORTS = ["stdio", "http", "sse", "streamable-http"]


def to_mcp_result(result: ToolResult) -> MCPToolResult:
    # Failures travel as ordinary text content, never as isError.
    return MCPToolResult(content=[TextContent(type="text", text=result.text)])


class DispatchedTool(Tool):
    """A registry tool whose raw arguments go straight to the dispatcher.

    FastMCP does no argument validation of its own here; the dispatcher's
    parameter models do it inside its error boundary.
    """

    _dispatcher: Any = PrivateAttr(default=None)

    @classmethod
    def from_descriptor(cls, descriptor: ToolDescriptor, dispatcher: Dispatcher) -> "DispatchedTool":
        tool = cls(
            name=descriptor.name,
            description=descriptor.description,
            parameters=descriptor.input_schema(),
            output_schema=None,
        )
        tool._dispatcher = dispatcher
        return tool

    async def run(self, arguments: dict[str, Any]) -> MCPToolResult:
        return to_mcp_result(self._dispatcher.invoke(self.name, arguments))


class UnregisteredToolMiddleware(Middleware):
    """Answers calls to names outside the registry through the dispatcher."""

    def __init__(self, dispatcher: Dispatcher, known: set[str]):
        self.dispatcher = dispatcher
        self.known = known

    async def on_call_tool(self, context: MiddlewareContext, call_next):
        name = context.message.name
        if name in self.known:
            return await call_next(context)
        return to_mcp_result(self.dispatcher.invoke(name, context.message.arguments))


def create_server(dispatcher: Dispatcher) -> FastMCP:
    """Build the MCP server; every call is answered by ``dispatcher``."""
    mcp = FastMCP(SERVER_NAME)
    for descriptor in list_tools():
        mcp.add_tool(DispatchedTool.from_descriptor(descriptor, dispatcher))
    mcp.add_middleware(UnregisteredToolMiddleware(dispatcher, {t.name for t in list_tools()}))
    return mcp


def run(transport: str = "stdio", host: str = "127.0.0.1", port: int = 8000, path: str = "/messages") -> None:
    """Start the server; exits with status 1 if the transport cannot be started."""
    session = get_session()
    mcp = create_server(Dispatcher(session.client))

    kwargs = {}
    if transport != "stdio":
        kwargs["host"] = host
        kwargs["port"] = port
        kwargs["path"] = path

    logger.info("Zerodha Kite MCP Server running on %s", transport)
    try:
        mcp.run(transport=transport, **kwargs)
    except Exception:
        logger.critical("Fatal error", exc_info=True)
        sys.exit(1)


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the Zerodha Kite MCP server")
    parser.add_argument(
        "--transport",
        choices=TRANSPORTS,
        default="stdio",
        help="Transport protocol for the server",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Host/address to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument("--path", default="/messages", help="HTTP path for the endpoint")

    args = parser.parse_args()
    configure_logging()
    run(transport=args.transport, host=args.host, port=args.port, path=args.path)


if __name__ == "__main__":
    main()
