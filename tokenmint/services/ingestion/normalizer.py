"""Normalizer utility functions for token amounts.

Balance files are written by hand and by earlier mint runs, so amounts show
up as JSON numbers, as plain strings, and as strings with comma grouping
("1,234.5"). These helpers turn all of them into one fixed-point integer
representation and back.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any

from tokenmint.core.config import DENOMINATOR

# Plain decimal notation with an optional exponent, no NaN/Infinity
_DECIMAL_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

_SCALE_DIGITS = len(str(DENOMINATOR)) - 1


def normalize_amount(value: Any) -> Decimal:
    """Convert a raw JSON value to a Decimal token amount.

    Args:
        value: A JSON number (int or Decimal) or a numeric string, optionally
            using commas as grouping separators.

    Returns:
        The amount as a finite Decimal.

    Raises:
        ValueError: If the value has the wrong type or is not a decimal number.
    """
    # bool is a subclass of int; JSON true/false is not an amount
    if isinstance(value, bool):
        raise ValueError(f"Invalid value type {type(value).__name__}: {value!r}")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Invalid token amount: {value!r}")
        return value
    if isinstance(value, str):
        cleaned = value.replace(",", "").strip()
        if not _DECIMAL_RE.match(cleaned):
            raise ValueError(f"Invalid token amount: {value!r}")
        try:
            return Decimal(cleaned)
        except InvalidOperation as exc:
            raise ValueError(f"Invalid token amount: {value!r}") from exc
    raise ValueError(f"Invalid value type {type(value).__name__}: {value!r}")


def exceeds_denominator(amount: Decimal) -> bool:
    """True when an amount is larger than the fixed-point denominator.

    Such an amount almost always means a decimal point was missed.
    """
    return amount > DENOMINATOR


def to_scaled(amount: Decimal) -> int:
    """Scale a decimal amount by DENOMINATOR, truncating toward zero.

    Computed on the exact integer ratio of ``amount``, for any number of
    significant digits.
    """
    numerator, denominator = amount.as_integer_ratio()
    scaled = abs(numerator) * DENOMINATOR // denominator
    return scaled if numerator >= 0 else -scaled


def to_decimal(scaled: int) -> Decimal:
    """Inverse of :func:`to_scaled`."""
    return Decimal(scaled).scaleb(-_SCALE_DIGITS)


def format_amount(scaled: int) -> str:
    """Render a scaled amount with exactly nine decimal places."""
    return f"{to_decimal(scaled):.{_SCALE_DIGITS}f}"


def format_decimal(scaled: int) -> str:
    """Render a scaled amount with no trailing zeros ("80.5", "-100")."""
    text = f"{to_decimal(scaled).normalize():f}"
    return "0" if text in ("-0", "0") else text
