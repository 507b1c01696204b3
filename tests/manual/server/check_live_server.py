#!/usr/bin/env python3
"""
Manual check against a running netcounter server.

Start the server first (``python -m netcounter serve``), then run this
script to list the tools and exercise each one over a real SSE session.
"""

import asyncio
import json
import sys

from mcp import ClientSession
from mcp.client.sse import sse_client

DEFAULT_URL = "http://127.0.0.1:8000/sse"


def _text(result) -> str:
    return " ".join(c.text for c in result.content if hasattr(c, "text"))


async def check_live_server(url: str) -> None:
    print(f"Connecting to {url}...")
    async with sse_client(url) as (read_stream, write_stream):
        async with ClientSession(read_stream, write_stream) as session:
            init_result = await session.initialize()
            print(f"Initialized: {json.dumps(init_result.model_dump(mode='json'), indent=2)}")
            print()

            tools_result = await session.list_tools()
            print(f"Found {len(tools_result.tools)} tools:")
            for tool in tools_result.tools:
                print(f"  - {tool.name}: {tool.description.splitlines()[0]}")
            print()

            calls = [
                ("increment", {}),
                ("increment", {}),
                ("decrement", {}),
                ("get_value", {}),
                ("add", {"a": 2, "b": 3}),
                ("is_valid_ipv4", {"ip_str": "192.168.1.1"}),
                ("is_valid_ipv4", {"ip_str": "256.1.1.1"}),
                ("is_ip_in_cidr", {"ip_str": "192.168.1.5", "cidr_str": "192.168.1.0/24"}),
                ("is_ip_in_cidr", {"ip_str": "::1", "cidr_str": "::/0"}),
                ("multiply", {"a": 2, "b": 3}),
            ]
            for name, arguments in calls:
                result = await session.call_tool(name, arguments)
                marker = "error" if result.isError else "ok"
                print(f"{name}({arguments}) -> [{marker}] {_text(result)}")


if __name__ == "__main__":
    asyncio.run(check_live_server(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_URL))
