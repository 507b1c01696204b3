"""
MCP protocol bridge.

Exposes a ToolRegistry through an MCP low-level Server: tool listing maps
operation descriptors to MCP tool definitions, tool calls go through the
registry's dispatcher and come back as a single text content block.
"""

from __future__ import annotations

import logging
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server

from netcounter import __version__
from netcounter.tools.models import OperationDescriptor, ToolError
from netcounter.tools.operations import SERVER_INSTRUCTIONS
from netcounter.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


def to_mcp_tool(descriptor: OperationDescriptor) -> types.Tool:
    """Convert a descriptor to the MCP tool definition served to callers."""
    return types.Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=descriptor.input_schema,
    )


def build_mcp_server(registry: ToolRegistry, name: str = "netcounter") -> Server:
    """
    Create an MCP server bound to one registry.

    Args:
        registry: Registry whose operations (and counter) the server exposes
        name: Server name announced during initialization

    Returns:
        Server ready to be run on a pair of read/write streams
    """
    server: Server = Server(name, version=__version__, instructions=SERVER_INSTRUCTIONS)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [to_mcp_tool(descriptor) for descriptor in registry.list_tools()]

    # The registry validates arguments itself; schema validation in the MCP
    # layer would report the same failures with a different error shape.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        try:
            result = registry.dispatch_call(name, arguments)
        except ToolError as e:
            # Raised errors become an isError result; the session stays open
            logger.warning(f"Tool call {name!r} failed: {e}")
            raise
        logger.debug(f"Tool call {name!r} -> {result.to_text()}")
        return [types.TextContent(type="text", text=result.to_text())]

    return server
