"""Conversions between number bases and from Roman numerals."""

from __future__ import annotations

from typing import Optional

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def _binary_text(digits: str | int) -> str:
    text = str(digits).strip()
    if not text or any(ch not in "01" for ch in text):
        raise ValueError(f"not a binary number: {digits!r}")
    return text


def binary_to_decimal(digits: str | int) -> int:
    """Value of a number written with the digits 0 and 1."""
    return int(_binary_text(digits), 2)


def binary_to_octal(digits: str | int) -> str:
    """Octal digits of a binary number, grouping the bits in threes."""
    return format(int(_binary_text(digits), 2), "o")


def _to_base(n: int, fmt: str) -> str:
    if n < 0:
        raise ValueError("n must be non-negative")
    return format(n, fmt)


def decimal_to_binary(n: int) -> str:
    return _to_base(n, "b")


def decimal_to_octal(n: int) -> str:
    return _to_base(n, "o")


def roman_to_decimal(numeral: str) -> int:
    """Value of a Roman numeral; a smaller symbol before a larger one is subtracted from it."""
    try:
        values = [_ROMAN[ch] for ch in numeral]
    except KeyError as exc:
        raise ValueError(f"not a Roman symbol: {exc.args[0]!r}") from None
    result = 0
    pending: Optional[int] = None
    for value in values:
        if pending is None:
            pending = value
        elif pending >= value:
            result += pending
            pending = value
        else:
            result += value - pending
            pending = None
    if pending is not None:
        result += pending
    return result