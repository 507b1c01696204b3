"""
Server layer.

Wires the tool registry into an MCP server and serves it over HTTP/SSE:

    GET /sse        ->  SseServerTransport  ->  MCP Server  ->  ToolRegistry
    POST /messages/ ->  (same session)
"""

from netcounter.server.app import create_app, run_server
from netcounter.server.bridge import build_mcp_server

__all__ = ["build_mcp_server", "create_app", "run_server"]
