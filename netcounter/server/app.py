"""
SSE application.

Builds the Starlette app serving the MCP endpoint: a GET on the SSE path
opens a session, POSTs to the messages path carry the client's requests.
Each session runs its own MCP server instance on top of a registry chosen
by the configured counter scope.
"""

from __future__ import annotations

import itertools
import logging

import uvicorn
from mcp.server.sse import SseServerTransport
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Mount, Route

from netcounter.config.settings import Settings, get_settings
from netcounter.server.bridge import build_mcp_server
from netcounter.tools.counter import Counter
from netcounter.tools.registry import ToolRegistry, build_registry

logger = logging.getLogger(__name__)


class RegistryProvider:
    """
    Hands out the registry a new session should use.

    With scope ``connection`` every session gets a fresh registry and
    counter; with ``shared`` all sessions use the same one.
    """

    def __init__(self, scope: str, initial_value: int):
        self.scope = scope
        self.initial_value = initial_value
        # Built eagerly so a broken operation table aborts startup
        self._shared = build_registry(Counter(initial_value))

    def for_session(self) -> ToolRegistry:
        if self.scope == "shared":
            return self._shared
        return build_registry(Counter(self.initial_value))


def create_app(settings: Settings | None = None) -> Starlette:
    """
    Create the Starlette application for the SSE endpoint.

    Args:
        settings: Application settings (defaults to the global settings)

    Returns:
        ASGI application
    """
    settings = settings or get_settings()
    server_settings = settings.server

    provider = RegistryProvider(server_settings.counter_scope, settings.counter.initial_value)
    transport = SseServerTransport(server_settings.messages_path)
    session_ids = itertools.count(1)

    async def handle_sse(request: Request) -> Response:
        session_no = next(session_ids)
        registry = provider.for_session()
        server = build_mcp_server(registry, name=server_settings.name)

        client = request.client.host if request.client else "unknown"
        logger.info(f"Session {session_no} opened from {client} (counter scope: {provider.scope})")
        try:
            async with transport.connect_sse(request.scope, request.receive, request._send) as streams:
                read_stream, write_stream = streams
                await server.run(read_stream, write_stream, server.create_initialization_options())
        finally:
            logger.info(f"Session {session_no} closed (counter: {registry.counter.value})")
        return Response()

    app = Starlette(
        routes=[
            Route(server_settings.sse_path, endpoint=handle_sse, methods=["GET"]),
            Mount(server_settings.messages_path, app=transport.handle_post_message),
        ],
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=server_settings.cors_allow_origins,
                allow_methods=["*"],
                allow_headers=["*"],
            )
        ],
    )
    app.state.registry_provider = provider
    return app


def run_server(settings: Settings) -> None:
    """Serve the application with uvicorn until interrupted."""
    app = create_app(settings)
    logger.info(
        f"Server running at http://{settings.server.host}:{settings.server.port}"
        f"{settings.server.sse_path}"
    )
    config = uvicorn.Config(
        app,
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.log_level.lower(),
        # Keep our handlers instead of uvicorn's default dictConfig
        log_config=None,
    )
    uvicorn.Server(config).run()
