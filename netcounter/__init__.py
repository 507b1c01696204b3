"""
netcounter - MCP endpoint exposing a counter, an adder, an IPv4 validator
and a CIDR membership checker over a persistent SSE connection.

Tools are registered in a per-connection registry, validated against typed
argument models, and answered with typed results.
"""

__version__ = "0.1.0"
