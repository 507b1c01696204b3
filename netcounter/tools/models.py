"""
Data models and errors for tool dispatch.

- OperationDescriptor: immutable description of one callable operation
- InvocationRequest: operation name + keyed arguments, as received
- InvocationResult: typed value returned to the caller
- ToolError and subclasses: failures surfaced to the caller
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, field_validator


class ReturnType(str, Enum):
    """Primitive type tag of an operation's result."""

    INTEGER = "integer"
    BOOLEAN = "boolean"


class ToolError(Exception):
    """Base class for errors reported back to the caller of a tool."""

    code = "tool_error"

    def __init__(self, message: str, operation: str | None = None):
        self.message = message
        self.operation = operation
        super().__init__(f"[{self.code}] {message}")


class UnknownOperation(ToolError, LookupError):
    """No operation is registered under the requested name."""

    code = "unknown_operation"


class InvalidArguments(ToolError, ValueError):
    """Arguments do not match the operation's declared parameters."""

    code = "invalid_arguments"

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ):
        self.errors = errors or []
        super().__init__(message, operation)


class ArithmeticOverflow(ToolError, OverflowError):
    """A result does not fit in a signed 32-bit integer."""

    code = "arithmetic_overflow"


class DuplicateOperation(ToolError):
    """Two operations were registered under the same name.

    This is a programming error and is raised while the registry is built,
    before any connection is accepted.
    """

    code = "duplicate_operation"


class ArgumentModel(BaseModel):
    """Base for per-operation argument models: strict, no extra keys, immutable."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class NoArguments(ArgumentModel):
    """Arguments of operations that take none."""


@dataclass(frozen=True)
class OperationDescriptor:
    """
    Static description of an operation.

    Attributes:
        name: Unique operation name
        description: Human-readable text served verbatim in tool listings
        arguments: Argument model; field order is the parameter order
        return_type: Type tag of the result
        uses_counter: Whether the handler reads or writes the shared counter
    """

    name: str
    description: str
    arguments: type[ArgumentModel]
    return_type: ReturnType
    uses_counter: bool = False

    @property
    def parameters(self) -> list[tuple[str, str]]:
        """Ordered (name, JSON type) pairs of the declared parameters."""
        properties = self.input_schema.get("properties", {})
        return [(name, properties[name].get("type", "")) for name in self.arguments.model_fields]

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the arguments, as advertised to callers."""
        return self.arguments.model_json_schema()


class InvocationRequest(BaseModel):
    """A single call as delivered by the channel."""

    operation: str = Field(description="Operation name")
    arguments: dict[str, Any] = Field(default_factory=dict, description="Keyed argument values")

    @field_validator("operation")
    @classmethod
    def _normalize_operation(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("operation must not be empty")
        return normalized


class InvocationResult(BaseModel):
    """Typed value produced by an operation."""

    operation: str
    return_type: ReturnType
    # StrictBool first: bool is a subclass of int and must keep its tag
    value: StrictBool | StrictInt

    def to_text(self) -> str:
        """Serialize the value the way it travels back to the caller."""
        return json.dumps(self.value)
