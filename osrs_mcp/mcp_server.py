"""
MCP server exposing the tool catalog over stdio.

stdout carries the protocol, so logging goes to stderr.
"""

import logging
import sys
from typing import Any, Optional

import anyio
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from osrs_mcp import __version__
from osrs_mcp.container import container
from osrs_mcp.ports.tools.tools_port import ToolsHandlerPort
from osrs_mcp.use_cases.tools.runner import run_tool

SERVER_NAME = "mcp-osrs"

logger = logging.getLogger(__name__)


def list_tool_definitions(handler: ToolsHandlerPort) -> list[Tool]:
    """Convert the handler's tool specs to MCP tool definitions."""
    return [
        Tool(
            name=spec["name"],
            description=spec["description"],
            inputSchema=spec["parameters"],
        )
        for spec in handler.available_tools()
    ]


async def handle_call_tool(
    handler: ToolsHandlerPort, name: str, arguments: Optional[dict[str, Any]]
) -> list[TextContent]:
    """Run a tool in a worker thread and wrap its text result."""
    logger.info(f"Tool call: {name}")
    text = await anyio.to_thread.run_sync(run_tool, handler, name, arguments, logger)
    return [TextContent(type="text", text=text)]


def create_server(handler: Optional[ToolsHandlerPort] = None) -> Server:
    """
    Build the MCP server.

    Args:
        handler: Tool catalog to expose; defaults to the container's full catalog

    Returns:
        Configured low-level MCP server
    """
    tools_handler = handler or container.get_tools_handler()
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return list_tool_definitions(tools_handler)

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        return await handle_call_tool(tools_handler, name, arguments)

    return server


async def serve(handler: Optional[ToolsHandlerPort] = None) -> None:
    """Run the MCP server on stdio until the client disconnects."""
    server = create_server(handler)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the osrs-mcp console script."""
    logging.basicConfig(
        level=container.settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logger.info(f"Starting {SERVER_NAME} {__version__} (data directory: {container.settings.data_dir})")
    try:
        anyio.run(serve)
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        logger.error(f"Error during startup: {e}")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
