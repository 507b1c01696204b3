"""Unit tests for the checked 32-bit Counter."""

import pytest

from netcounter.tools.counter import INT32_MAX, INT32_MIN, Counter, checked_int32
from netcounter.tools.models import ArithmeticOverflow


class TestCounter:

    def test_starts_at_zero(self):
        assert Counter().value == 0

    def test_starts_at_initial_value(self):
        assert Counter(41).value == 41

    def test_step_returns_new_value(self):
        counter = Counter()
        assert counter.step(1) == 1
        assert counter.step(-1) == 0
        assert counter.step(-1) == -1

    def test_initial_value_out_of_range_raises(self):
        with pytest.raises(ArithmeticOverflow):
            Counter(INT32_MAX + 1)

    def test_overflow_leaves_value_unchanged(self):
        counter = Counter(INT32_MAX)
        with pytest.raises(ArithmeticOverflow, match="signed 32-bit"):
            counter.step(1, operation="increment")
        assert counter.value == INT32_MAX

    def test_underflow_leaves_value_unchanged(self):
        counter = Counter(INT32_MIN)
        with pytest.raises(ArithmeticOverflow):
            counter.step(-1)
        assert counter.value == INT32_MIN

    def test_overflow_error_names_operation(self):
        counter = Counter(INT32_MAX)
        with pytest.raises(ArithmeticOverflow) as exc_info:
            counter.step(1, operation="increment")
        assert exc_info.value.operation == "increment"
        assert exc_info.value.code == "arithmetic_overflow"


class TestCheckedInt32:

    @pytest.mark.parametrize("value", [0, 1, -1, INT32_MAX, INT32_MIN])
    def test_in_range_values_pass_through(self, value):
        assert checked_int32(value) == value

    @pytest.mark.parametrize("value", [INT32_MAX + 1, INT32_MIN - 1, 2**40])
    def test_out_of_range_values_raise(self, value):
        with pytest.raises(ArithmeticOverflow):
            checked_int32(value)

    def test_overflow_is_also_an_overflow_error(self):
        with pytest.raises(OverflowError):
            checked_int32(INT32_MAX + 1)
