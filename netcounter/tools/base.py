"""
Base class for tool adapters.

An adapter gives callers a uniform way to list and invoke tools that live
somewhere else, such as a netcounter server reached over SSE.
"""

from abc import ABC, abstractmethod
from typing import Any


class ToolAdapter(ABC):
    """Abstract base class for tool adapters."""

    @abstractmethod
    async def initialize(self) -> None:
        """
        Open the connection and perform any handshake.

        Raises:
            ValueError: If the adapter is not configured with an endpoint
        """
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        """Close the connection and release its resources."""
        pass

    @abstractmethod
    async def call(self, tool_name: str, arguments: dict[str, Any]) -> dict[str, Any]:
        """
        Call a tool with the given arguments.

        Args:
            tool_name: Name of the tool to invoke
            arguments: Tool-specific arguments

        Returns:
            Dictionary with the result ``text`` and an ``is_error`` flag

        Raises:
            RuntimeError: If the adapter is not initialized
        """
        pass

    @abstractmethod
    async def list_tools(self) -> list[dict[str, Any]]:
        """
        List all tools available through this adapter.

        Example:
            [
                {
                    "name": "is_valid_ipv4",
                    "description": "Check if a string is a valid IPv4 address ...",
                    "input_schema": {
                        "type": "object",
                        "properties": {
                            "ip_str": {
                                "type": "string",
                                "description": "The IP address string to validate"
                            }
                        },
                        "required": ["ip_str"]
                    }
                }
            ]
        """
        pass

    async def __aenter__(self):
        """Context manager entry - initialize the adapter."""
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - shutdown the adapter."""
        await self.shutdown()
        return False
