"""
Signed 32-bit counter with checked arithmetic.
"""

from netcounter.tools.models import ArithmeticOverflow

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def checked_int32(value: int, operation: str | None = None) -> int:
    """Return value unchanged, or raise ArithmeticOverflow if it leaves the int32 range."""
    if not INT32_MIN <= value <= INT32_MAX:
        raise ArithmeticOverflow(
            f"Result {value} is outside the signed 32-bit range [{INT32_MIN}, {INT32_MAX}]",
            operation=operation,
        )
    return value


class Counter:
    """
    Mutable integer owned by a single registry.

    The counter does no locking of its own; the registry serializes every
    call that touches it. A step that would overflow raises
    ArithmeticOverflow and leaves the value unchanged.
    """

    def __init__(self, initial_value: int = 0):
        self._value = checked_int32(initial_value)

    @property
    def value(self) -> int:
        return self._value

    def step(self, delta: int, operation: str | None = None) -> int:
        """Add delta to the counter and return the new value."""
        self._value = checked_int32(self._value + delta, operation)
        return self._value

    def __repr__(self) -> str:
        return f"Counter(value={self._value})"
