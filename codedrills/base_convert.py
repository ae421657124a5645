"""Conversion of a number written as ``digits(base)`` into another base."""

from __future__ import annotations

import re
import string

_DIGITS = string.digits + string.ascii_lowercase
_BASE_PATTERN = re.compile(r"\+?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1
_WORD = 2**64


def _parse(digits: str, base: int) -> int:
    if not 2 <= base <= 36:
        raise ValueError(f"base {base} is out of range 2..36")
    sign = 1
    if digits[:1] in ("+", "-"):
        sign = -1 if digits[0] == "-" else 1
        digits = digits[1:]
    if not digits:
        raise ValueError("no digits to convert")
    value = 0
    for char in digits:
        position = _DIGITS.find(char.lower()) if char.isascii() else -1
        if not 0 <= position < base:
            raise ValueError(f"invalid digit {char!r} for base {base}")
        value = value * base + position
    value *= sign
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError("number does not fit in a signed 64-bit integer")
    return value


def convert_base(num_str: str, to_base: int) -> str:
    """Convert ``num_str`` such as ``"1111(2)"`` to its digits in ``to_base``.

    Digits above nine are written as lower-case letters. Zero yields an
    empty string; negative numbers are taken as their unsigned 64-bit value.
    """
    parts = num_str.split("(")
    if len(parts) < 2:
        raise ValueError(f"missing '(base)' in {num_str!r}")
    base_text = parts[1].rstrip(")")
    if not _BASE_PATTERN.fullmatch(base_text):
        raise ValueError(f"invalid base {base_text!r}")
    if to_base < 2:
        raise ValueError(f"target base {to_base} must be at least 2")

    number = _parse(parts[0].strip(), int(base_text)) % _WORD
    digits = []
    while number:
        number, remainder = divmod(number, to_base)
        digits.append(chr(ord("0") + remainder) if remainder < 10 else chr(ord("a") + remainder - 10))
    return "".join(reversed(digits))