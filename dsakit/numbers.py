"""Number sequences and digit manipulation."""

from __future__ import annotations

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


def fibonacci(count: int) -> list[int]:
    """Return the first count Fibonacci numbers, always at least 0 and 1."""
    terms = [0, 1]
    while len(terms) < count:
        terms.append(terms[-1] + terms[-2])
    return terms


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of x, keeping its sign.

    Returns 0 when the reversed value would not fit in a signed 32-bit integer.
    """
    if not _INT_MIN <= x <= _INT_MAX:
        raise ValueError("x must fit in a signed 32-bit integer")
    sign = -1 if x < 0 else 1
    magnitude = abs(x)
    reversed_value = 0
    limit = _INT_MAX // 10
    while magnitude:
        magnitude, digit = divmod(magnitude, 10)
        if abs(reversed_value) > limit:
            return 0
        reversed_value = reversed_value * 10 + sign * digit
    return reversed_value