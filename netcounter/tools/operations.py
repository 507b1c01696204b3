"""
The operation set: counter, adder, IPv4 validator and CIDR checker.

Each operation is a closed pair of an OperationDescriptor (name, typed
argument model, return type, description) and a handler taking the
registry's counter and the validated arguments.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Union

from pydantic import Field, StrictInt, StrictStr

from netcounter.tools import ipv4
from netcounter.tools.counter import INT32_MAX, INT32_MIN, Counter, checked_int32
from netcounter.tools.models import (
    ArgumentModel,
    NoArguments,
    OperationDescriptor,
    ReturnType,
)

Int32 = Annotated[StrictInt, Field(ge=INT32_MIN, le=INT32_MAX)]

Handler = Callable[[Counter, ArgumentModel], Union[int, bool]]

SERVER_INSTRUCTIONS = """This tool provides multiple functionalities:

Counter: Increment, decrement, and get the value of a counter.
Adder: Add two numbers together.
IP Validator: Check if a string is a valid IPv4 address.
CIDR Checker: Check if an IP address is within a CIDR range."""


class AddArguments(ArgumentModel):
    a: Int32 = Field(description="First number")
    b: Int32 = Field(description="Second number")


class Ipv4Arguments(ArgumentModel):
    ip_str: StrictStr = Field(description="The IP address string to validate")


class CidrArguments(ArgumentModel):
    ip_str: StrictStr = Field(description="The IP address to check")
    cidr_str: StrictStr = Field(description='The CIDR range (e.g., "192.168.1.0/24")')


def add(a: int, b: int) -> int:
    """Checked signed 32-bit addition."""
    return checked_int32(a + b, operation="add")


# Handlers: (counter, validated arguments) -> result

def _increment(counter: Counter, args: NoArguments) -> int:
    return counter.step(1, operation="increment")


def _decrement(counter: Counter, args: NoArguments) -> int:
    return counter.step(-1, operation="decrement")


def _get_value(counter: Counter, args: NoArguments) -> int:
    return counter.value


def _add(counter: Counter, args: AddArguments) -> int:
    return add(args.a, args.b)


def _is_valid_ipv4(counter: Counter, args: Ipv4Arguments) -> bool:
    return ipv4.is_valid_ipv4(args.ip_str)


def _is_ip_in_cidr(counter: Counter, args: CidrArguments) -> bool:
    return ipv4.is_ip_in_cidr(args.ip_str, args.cidr_str)


INCREMENT = OperationDescriptor(
    name="increment",
    description="Increment the counter by 1",
    arguments=NoArguments,
    return_type=ReturnType.INTEGER,
    uses_counter=True,
)

DECREMENT = OperationDescriptor(
    name="decrement",
    description="Decrement the counter by 1",
    arguments=NoArguments,
    return_type=ReturnType.INTEGER,
    uses_counter=True,
)

GET_VALUE = OperationDescriptor(
    name="get_value",
    description="Get the current counter value",
    arguments=NoArguments,
    return_type=ReturnType.INTEGER,
    uses_counter=True,
)

ADD = OperationDescriptor(
    name="add",
    description=(
        "Add two numbers together\n"
        "\n"
        "Parameters:\n"
        "- a: First number\n"
        "- b: Second number"
    ),
    arguments=AddArguments,
    return_type=ReturnType.INTEGER,
)

IS_VALID_IPV4 = OperationDescriptor(
    name="is_valid_ipv4",
    description=(
        "Check if a string is a valid IPv4 address\n"
        "\n"
        "Parameters:\n"
        "- ip_str: The IP address string to validate"
    ),
    arguments=Ipv4Arguments,
    return_type=ReturnType.BOOLEAN,
)

IS_IP_IN_CIDR = OperationDescriptor(
    name="is_ip_in_cidr",
    description=(
        "Check if an IP address is within a CIDR range\n"
        "\n"
        "Parameters:\n"
        "- ip_str: The IP address to check\n"
        '- cidr_str: The CIDR range (e.g., "192.168.1.0/24")'
    ),
    arguments=CidrArguments,
    return_type=ReturnType.BOOLEAN,
)

# Registration order is listing order
OPERATIONS: tuple[tuple[OperationDescriptor, Handler], ...] = (
    (INCREMENT, _increment),
    (DECREMENT, _decrement),
    (GET_VALUE, _get_value),
    (ADD, _add),
    (IS_VALID_IPV4, _is_valid_ipv4),
    (IS_IP_IN_CIDR, _is_ip_in_cidr),
)
