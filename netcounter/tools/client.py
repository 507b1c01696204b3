"""
MCP client adapter for a remote netcounter server.

Connects to the server's SSE endpoint and speaks JSON-RPC over it.
"""

import logging
import os
from typing import Any

from mcp import ClientSession
from mcp.client.sse import sse_client

from netcounter.tools.base import ToolAdapter

logger = logging.getLogger(__name__)


class RemoteToolClient(ToolAdapter):
    """
    Tool adapter for a netcounter server reached over MCP/SSE.

    One client is one SSE session, so with the default per-connection
    counter scope the counter seen through a client starts fresh and
    persists until shutdown().
    """

    def __init__(self, url: str | None = None):
        """Initialize the client.

        Args:
            url: SSE endpoint, e.g. http://127.0.0.1:8000/sse.
                 If None, uses environment variable NETCOUNTER_URL.
        """
        self._initialized = False
        self._session = None
        self._read_stream = None
        self._write_stream = None
        self._sse_context = None
        self._session_context = None

        if url is None:
            url = os.environ.get("NETCOUNTER_URL")

        self._url = url

    async def initialize(self) -> None:
        """Open the SSE stream and perform the MCP handshake."""
        if not self._url:
            raise ValueError(
                "Server URL not specified. "
                "Provide url argument to __init__ or set NETCOUNTER_URL environment variable."
            )

        self._sse_context = sse_client(self._url)
        self._read_stream, self._write_stream = await self._sse_context.__aenter__()

        self._session_context = ClientSession(self._read_stream, self._write_stream)
        self._session = await self._session_context.__aenter__()

        await self._session.initialize()
        logger.debug(f"Connected to {self._url}")

        self._initialized = True

    async def shutdown(self) -> None:
        """Close the MCP session and the SSE stream."""
        if not self._initialized:
            return

        if self._session_context is not None:
            await self._session_context.__aexit__(None, None, None)
            self._session_context = None
            self._session = None

        if self._sse_context is not None:
            await self._sse_context.__aexit__(None, None, None)
            self._sse_context = None
            self._read_stream = None
            self._write_stream = None

        self._initialized = False

    async def call(self, tool_name: str, arguments: dict[str, Any]) -> dict[str, Any]:
        """Call a tool on the server."""
        if not self._initialized:
            raise RuntimeError("Tool adapter not initialized")

        result = await self._session.call_tool(tool_name, arguments)

        # MCP returns content as a list of content blocks
        text_parts = []
        for content in result.content:
            if hasattr(content, "text"):
                text_parts.append(content.text)

        return {
            "text": " ".join(text_parts) if text_parts else "",
            "is_error": bool(result.isError),
        }

    async def list_tools(self) -> list[dict[str, Any]]:
        """List the tools the server exposes."""
        if not self._initialized:
            raise RuntimeError("Tool adapter not initialized")

        result = await self._session.list_tools()

        return [
            {
                "name": tool.name,
                "description": tool.description,
                "input_schema": tool.inputSchema,
            }
            for tool in result.tools
        ]
