"""Small arithmetic routines and number triangles."""

from __future__ import annotations

import math

_MASK32 = 0xFFFFFFFF
_SIGN32 = 0x80000000


def calculate(op: str, a: float, b: float) -> float:
    """Apply ``+``, ``-``, ``*`` or ``/`` to two operands.

    Division by zero follows floating-point rules and gives an infinity or NaN.
    """
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        if b == 0:
            if a == 0 or math.isnan(a):
                return math.nan
            return math.copysign(math.inf, a) * math.copysign(1.0, b)
        return a / b
    raise ValueError("Error! operator is not correct")


def factorial(n: int) -> int:
    """Product of ``1 .. n``; 1 when ``n`` is zero or negative."""
    return math.prod(range(1, n + 1))


def max_without_comparison(a: int, b: int) -> int:
    """The larger of two integers, found from their sum and distance."""
    return (a + b + abs(a - b)) // 2


def bitwise_add(a: int, b: int) -> int:
    """Add two 32-bit signed integers with XOR and carries, wrapping on overflow."""
    a &= _MASK32
    b &= _MASK32
    while b:
        carry = ((a & b) << 1) & _MASK32
        a ^= b
        b = carry
    return a - (1 << 32) if a & _SIGN32 else a


def to_binary(n: int) -> str:
    """Binary digits of a non-negative integer, most significant first."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return "0"
    digits = []
    while n:
        n, bit = divmod(n, 2)
        digits.append(str(bit))
    return "".join(reversed(digits))


def floyds_triangle(rows: int) -> list[list[int]]:
    """Rows of consecutive numbers from 1, row ``i`` holding ``i`` of them."""
    triangle = []
    start = 1
    for length in range(1, rows + 1):
        triangle.append(list(range(start, start + length)))
        start += length
    return triangle


def pascals_triangle(rows: int) -> list[list[int]]:
    """The first ``rows`` rows of Pascal's triangle."""
    triangle: list[list[int]] = []
    for index in range(rows):
        if index == 0:
            triangle.append([1])
            continue
        above = triangle[-1]
        triangle.append([1] + [x + y for x, y in zip(above, above[1:])] + [1])
    return triangle