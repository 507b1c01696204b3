"""
Unit tests for the operation set: descriptors and handlers.

Descriptions are served verbatim to callers, so they are pinned here.
"""

import pytest

from netcounter.tools.counter import INT32_MAX, INT32_MIN
from netcounter.tools.models import ArithmeticOverflow, ReturnType
from netcounter.tools.operations import (
    ADD,
    DECREMENT,
    GET_VALUE,
    INCREMENT,
    IS_IP_IN_CIDR,
    IS_VALID_IPV4,
    OPERATIONS,
    add,
)


class TestOperationTable:
    """The closed set of operations and their signatures."""

    def test_operation_names_in_order(self):
        names = [descriptor.name for descriptor, _ in OPERATIONS]
        assert names == [
            "increment",
            "decrement",
            "get_value",
            "add",
            "is_valid_ipv4",
            "is_ip_in_cidr",
        ]

    def test_operation_names_are_unique(self):
        names = [descriptor.name for descriptor, _ in OPERATIONS]
        assert len(names) == len(set(names))

    @pytest.mark.parametrize(
        "descriptor,parameters,return_type",
        [
            (INCREMENT, [], ReturnType.INTEGER),
            (DECREMENT, [], ReturnType.INTEGER),
            (GET_VALUE, [], ReturnType.INTEGER),
            (ADD, [("a", "integer"), ("b", "integer")], ReturnType.INTEGER),
            (IS_VALID_IPV4, [("ip_str", "string")], ReturnType.BOOLEAN),
            (IS_IP_IN_CIDR, [("ip_str", "string"), ("cidr_str", "string")], ReturnType.BOOLEAN),
        ],
    )
    def test_signatures(self, descriptor, parameters, return_type):
        assert descriptor.parameters == parameters
        assert descriptor.return_type == return_type

    def test_only_counter_operations_use_the_counter(self):
        using = {descriptor.name for descriptor, _ in OPERATIONS if descriptor.uses_counter}
        assert using == {"increment", "decrement", "get_value"}

    def test_descriptions(self):
        assert INCREMENT.description == "Increment the counter by 1"
        assert DECREMENT.description == "Decrement the counter by 1"
        assert GET_VALUE.description == "Get the current counter value"
        assert ADD.description.startswith("Add two numbers together\n")
        assert "- b: Second number" in ADD.description
        assert IS_IP_IN_CIDR.description.endswith('- cidr_str: The CIDR range (e.g., "192.168.1.0/24")')

    def test_input_schema_lists_required_parameters(self):
        schema = IS_IP_IN_CIDR.input_schema
        assert schema["type"] == "object"
        assert schema["required"] == ["ip_str", "cidr_str"]
        assert schema["properties"]["ip_str"]["description"] == "The IP address to check"
        assert schema["additionalProperties"] is False

    def test_add_schema_carries_int32_bounds(self):
        properties = ADD.input_schema["properties"]
        assert properties["a"]["minimum"] == INT32_MIN
        assert properties["a"]["maximum"] == INT32_MAX


class TestAdd:

    def test_adds(self):
        assert add(2, 3) == 5
        assert add(-7, 3) == -4

    @pytest.mark.parametrize("a,b", [(1, 2), (-5, 12), (INT32_MAX, -1), (0, INT32_MIN)])
    def test_is_commutative(self, a, b):
        assert add(a, b) == add(b, a)

    def test_overflow_raises(self):
        with pytest.raises(ArithmeticOverflow):
            add(INT32_MAX, 1)

    def test_underflow_raises(self):
        with pytest.raises(ArithmeticOverflow):
            add(INT32_MIN, -1)

    def test_extremes_that_fit(self):
        assert add(INT32_MAX, INT32_MIN) == -1
