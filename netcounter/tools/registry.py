"""Operation registry and dispatcher."""

from __future__ import annotations

import logging
import threading
from typing import Any

from pydantic import ValidationError

from netcounter.tools.counter import Counter
from netcounter.tools.models import (
    DuplicateOperation,
    InvalidArguments,
    InvocationRequest,
    InvocationResult,
    OperationDescriptor,
    UnknownOperation,
)
from netcounter.tools.operations import OPERATIONS, Handler

logger = logging.getLogger(__name__)


class ToolRegistry:
    """
    In-memory registry mapping operation names to handlers.

    The registry owns one Counter. Handlers flagged ``uses_counter`` run
    while the registry lock is held, so concurrent dispatches against the
    same registry are linearized on the counter. Everything else runs
    without the lock.
    """

    def __init__(self, counter: Counter | None = None) -> None:
        self._counter = counter if counter is not None else Counter()
        self._operations: dict[str, tuple[OperationDescriptor, Handler]] = {}
        self._lock = threading.Lock()

    @property
    def counter(self) -> Counter:
        return self._counter

    def register(self, descriptor: OperationDescriptor, handler: Handler) -> None:
        """Register an operation; a name may only be registered once."""
        if descriptor.name in self._operations:
            raise DuplicateOperation(
                f"Operation '{descriptor.name}' is already registered",
                operation=descriptor.name,
            )
        self._operations[descriptor.name] = (descriptor, handler)
        logger.debug(
            f"Registered operation {descriptor.name} "
            f"({', '.join(name for name, _ in descriptor.parameters) or 'no arguments'}) "
            f"-> {descriptor.return_type.value}"
        )

    def list_tools(self) -> list[OperationDescriptor]:
        """Descriptors in registration order."""
        return [descriptor for descriptor, _ in self._operations.values()]

    def resolve(self, name: str) -> tuple[OperationDescriptor, Handler]:
        """Return the descriptor and handler for name or raise UnknownOperation."""
        try:
            return self._operations[name]
        except KeyError:
            raise UnknownOperation(f"Operation '{name}' is not registered", operation=name) from None

    def dispatch(self, request: InvocationRequest) -> InvocationResult:
        """
        Validate a request against its operation and run the handler.

        Raises:
            UnknownOperation: If no operation has the requested name
            InvalidArguments: If arguments are missing, extra or mistyped
            ArithmeticOverflow: If an integer result leaves the int32 range
        """
        descriptor, handler = self.resolve(request.operation)

        try:
            args = descriptor.arguments.model_validate(request.arguments)
        except ValidationError as e:
            errors = e.errors(include_url=False, include_context=False)
            details = "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc']) or '<arguments>'}: {err['msg']}"
                for err in errors
            )
            raise InvalidArguments(
                f"Invalid arguments for '{descriptor.name}': {details}",
                operation=descriptor.name,
                errors=errors,
            ) from None

        if descriptor.uses_counter:
            with self._lock:
                value = handler(self._counter, args)
        else:
            value = handler(self._counter, args)

        return InvocationResult(
            operation=descriptor.name,
            return_type=descriptor.return_type,
            value=value,
        )

    def dispatch_call(self, name: str, arguments: dict[str, Any] | None = None) -> InvocationResult:
        """Build an InvocationRequest from raw channel values and dispatch it."""
        if not isinstance(name, str) or not name.strip():
            raise UnknownOperation(f"Operation {name!r} is not registered", operation=None)
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            raise InvalidArguments(
                f"Arguments for '{name}' must be an object, got {type(arguments).__name__}",
                operation=name,
            )
        return self.dispatch(InvocationRequest(operation=name, arguments=arguments))


def build_registry(counter: Counter | None = None) -> ToolRegistry:
    """Create a registry with every standard operation registered."""
    registry = ToolRegistry(counter)
    for descriptor, handler in OPERATIONS:
        registry.register(descriptor, handler)
    return registry
