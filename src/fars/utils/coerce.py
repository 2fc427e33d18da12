"""Centralized integer coercion for years and state codes."""

import math
from typing import Any


def as_integer(value: Any) -> int:
    """Coerce a numeric-like value to ``int``, truncating toward zero.

    Accepts ints, floats, numpy scalars and numeric strings (``"2015"``,
    ``"2015.7"``).

    Args:
        value: Value to coerce.

    Returns:
        The truncated integer.

    Raises:
        ValueError: If *value* is a non-numeric string, NaN or infinite.
        TypeError: If *value* is not a number or string (e.g. ``None``).
    """
    if isinstance(value, bool):
        raise TypeError(f"Expected a number, got bool: {value!r}")
    if isinstance(value, str):
        value = value.strip()
    number = float(value)
    if math.isnan(number) or math.isinf(number):
        raise ValueError(f"Cannot convert {value!r} to an integer")
    return int(number)
