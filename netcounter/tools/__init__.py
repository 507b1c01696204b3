"""
Tool layer.

The operation set (counter, adder, IPv4 validator, CIDR checker), the
registry that dispatches calls to it, and a client adapter for calling
the same tools on a remote server.
"""

from netcounter.tools.counter import Counter
from netcounter.tools.models import (
    ArithmeticOverflow,
    DuplicateOperation,
    InvalidArguments,
    InvocationRequest,
    InvocationResult,
    OperationDescriptor,
    ReturnType,
    ToolError,
    UnknownOperation,
)
from netcounter.tools.registry import ToolRegistry, build_registry

__all__ = [
    "ArithmeticOverflow",
    "Counter",
    "DuplicateOperation",
    "InvalidArguments",
    "InvocationRequest",
    "InvocationResult",
    "OperationDescriptor",
    "ReturnType",
    "ToolError",
    "ToolRegistry",
    "UnknownOperation",
    "build_registry",
]
