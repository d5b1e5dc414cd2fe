"""Bitwise operators, shifts and power-of-two checks on 32-bit integers."""

from __future__ import annotations

from dataclasses import dataclass

_INT_BITS = 32
_INT_MIN = -(1 << (_INT_BITS - 1))
_INT_MAX = (1 << (_INT_BITS - 1)) - 1


@dataclass(frozen=True)
class BitwiseResult:
    """The results of AND, OR, NOT (of the first operand) and XOR."""

    a: int
    b: int
    and_: int
    or_: int
    not_: int
    xor: int


def _check_int32(value: int, name: str) -> None:
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"{name} must fit in a signed 32-bit integer")


def _check_shift(shift: int) -> None:
    if not 0 <= shift < _INT_BITS:
        raise ValueError(f"shift must lie between 0 and {_INT_BITS - 1}")


def _wrap_int32(value: int) -> int:
    value &= (1 << _INT_BITS) - 1
    if value > _INT_MAX:
        value -= 1 << _INT_BITS
    return value


def to_binary8(value: int) -> str:
    """Return the lowest 8 bits of value in two's complement, as 0s and 1s."""
    return format(value & 0xFF, "08b")


def bitwise_operations(a: int, b: int) -> BitwiseResult:
    """Apply AND, OR, XOR to a and b, and NOT to a."""
    _check_int32(a, "a")
    _check_int32(b, "b")
    return BitwiseResult(a=a, b=b, and_=a & b, or_=a | b, not_=~a, xor=a ^ b)


def left_shift(value: int, shift: int) -> int:
    """Shift value left by shift bits, wrapping as a signed 32-bit integer."""
    _check_int32(value, "value")
    _check_shift(shift)
    return _wrap_int32(value << shift)


def right_shift(value: int, shift: int) -> int:
    """Shift value right by shift bits, filling with the sign bit."""
    _check_int32(value, "value")
    _check_shift(shift)
    return value >> shift


def is_power_of_two(n: int) -> bool:
    """Return True if n is a positive power of two."""
    if n <= 0:
        return False
    return n & (n - 1) == 0