"""
netcounter CLI entry point.

Runs the SSE server and offers small client commands for talking to one.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from netcounter import __version__
from netcounter.config.logging import get_logger, setup_logging
from netcounter.config.settings import Settings, load_settings


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="netcounter",
        description="MCP server exposing a counter, an adder, an IPv4 validator and a CIDR checker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"netcounter {__version__}",
    )

    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to .env file (default: .env in current directory)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override logging level from config",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the SSE server",
    )
    serve_parser.add_argument(
        "--host",
        default=None,
        help="Interface to bind (default: SERVER__HOST from config)",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: SERVER__PORT from config)",
    )
    serve_parser.add_argument(
        "--counter-scope",
        choices=["connection", "shared"],
        default=None,
        help="'connection': one counter per SSE session; 'shared': one counter for all sessions",
    )

    subparsers.add_parser(
        "config",
        help="Show current configuration",
    )

    tools_parser = subparsers.add_parser(
        "tools",
        help="List the tools exposed by a running server",
    )
    tools_parser.add_argument(
        "--url",
        default=None,
        help="SSE endpoint of the server (default: CLIENT__URL from config)",
    )

    call_parser = subparsers.add_parser(
        "call",
        help="Call a tool on a running server",
    )
    call_parser.add_argument(
        "name",
        help="Tool name, e.g. is_ip_in_cidr",
    )
    call_parser.add_argument(
        "--arg",
        dest="arguments",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Tool argument; repeatable. Values are decoded as JSON when possible, "
             "e.g. --arg a=2 --arg b=3 or --arg ip_str=10.0.0.1",
    )
    call_parser.add_argument(
        "--url",
        default=None,
        help="SSE endpoint of the server (default: CLIENT__URL from config)",
    )

    return parser


def parse_tool_arguments(pairs: list[str]) -> dict[str, Any]:
    """
    Turn KEY=VALUE strings into a tool argument dict.

    Values that parse as JSON keep their JSON type, anything else is
    passed through as a string.

    Raises:
        ValueError: If a pair has no '=' or an empty key
    """
    arguments: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}")
        try:
            arguments[key] = json.loads(raw)
        except json.JSONDecodeError:
            arguments[key] = raw
    return arguments


def cmd_config(settings: Settings) -> int:
    """Show current configuration."""
    logger = get_logger(__name__)

    logger.info("\n=== netcounter Configuration ===\n")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Log Level: {settings.log_level}")
    logger.info(f"Log File: {settings.log_file or 'None (console only)'}")
    logger.info(f"\nServer Name: {settings.server.name}")
    logger.info(f"Listen: {settings.server.host}:{settings.server.port}")
    logger.info(f"SSE Path: {settings.server.sse_path}")
    logger.info(f"Messages Path: {settings.server.messages_path}")
    logger.info(f"CORS Origins: {', '.join(settings.server.cors_allow_origins)}")
    logger.info(f"Counter Scope: {settings.server.counter_scope}")
    logger.info(f"Counter Initial Value: {settings.counter.initial_value}")
    logger.info(f"\nClient URL: {settings.client.url}")

    return 0


def cmd_serve(args, settings: Settings) -> int:
    """Run the SSE server until interrupted."""
    logger = get_logger(__name__)

    if args.host is not None:
        settings.server.host = args.host
    if args.port is not None:
        settings.server.port = args.port
    if args.counter_scope is not None:
        settings.server.counter_scope = args.counter_scope

    from netcounter.server import run_server

    try:
        run_server(settings)
    except Exception as e:
        logger.error(f"Server failed: {e}", exc_info=True)
        return 1
    return 0


async def cmd_tools(args, settings: Settings) -> int:
    """List tools on a remote server."""
    logger = get_logger(__name__)

    from netcounter.tools.client import RemoteToolClient

    url = args.url or settings.client.url
    try:
        async with RemoteToolClient(url) as client:
            tools = await client.list_tools()
    except Exception as e:
        logger.error(f"Listing tools failed: {e}", exc_info=True)
        return 1

    print(f"\n=== Tools at {url} ({len(tools)}) ===")
    for tool in tools:
        params = ", ".join(
            f"{name}: {schema.get('type', '?')}"
            for name, schema in tool["input_schema"].get("properties", {}).items()
        )
        print(f"\n{tool['name']}({params})")
        for line in (tool["description"] or "").splitlines():
            print(f"    {line}")

    return 0


async def cmd_call(args, settings: Settings) -> int:
    """Call a tool on a remote server and print its result."""
    logger = get_logger(__name__)

    from netcounter.tools.client import RemoteToolClient

    try:
        arguments = parse_tool_arguments(args.arguments)
    except ValueError as e:
        logger.error(str(e))
        return 1

    url = args.url or settings.client.url
    try:
        async with RemoteToolClient(url) as client:
            result = await client.call(args.name, arguments)
    except Exception as e:
        logger.error(f"Tool call failed: {e}", exc_info=True)
        return 1

    if result["is_error"]:
        print(result["text"], file=sys.stderr)
        return 1

    print(result["text"])
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Load settings
    try:
        settings = load_settings(env_file=args.env_file)
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    # Override log level if specified
    if args.log_level:
        settings.log_level = args.log_level

    setup_logging(settings)

    if args.command == "config":
        return cmd_config(settings)
    elif args.command == "serve":
        return cmd_serve(args, settings)
    elif args.command == "tools":
        return asyncio.run(cmd_tools(args, settings))
    elif args.command == "call":
        return asyncio.run(cmd_call(args, settings))
    else:
        # Default: show help
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
