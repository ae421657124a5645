"""Fibonacci by matrix powers and addition by bit operations."""

from __future__ import annotations

_Matrix = tuple[tuple[int, int], tuple[int, int]]

_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def _multiply(a: _Matrix, b: _Matrix) -> _Matrix:
    (a00, a01), (a10, a11) = a
    (b00, b01), (b10, b11) = b
    return (
        (a00 * b00 + a01 * b10, a00 * b01 + a01 * b11),
        (a10 * b00 + a11 * b10, a10 * b01 + a11 * b11),
    )


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n < 2:
        return n
    result: _Matrix = ((1, 0), (0, 1))
    base: _Matrix = ((1, 1), (1, 0))
    exponent = n - 1
    while exponent:
        if exponent & 1:
            result = _multiply(result, base)
        base = _multiply(base, base)
        exponent >>= 1
    return result[0][0]


def get_sum(a: int, b: int) -> int:
    """Add two 32-bit signed integers with bit operations only, wrapping on overflow."""
    a &= _MASK
    b &= _MASK
    while b:
        carry = ((a & b) << 1) & _MASK
        a ^= b
        b = carry
    return a - (1 << 32) if a & _SIGN_BIT else a