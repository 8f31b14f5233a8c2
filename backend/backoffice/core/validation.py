"""
Type checks for raw JSON request values

JSON booleans arrive as Python bools, which are also ints; they are never
accepted where a number is expected. The JSON parser also accepts NaN and
Infinity, which are not numbers here either.
"""
import math
from numbers import Number
from typing import Any


def is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool) and math.isfinite(value)


def is_integer(value: Any) -> bool:
    """True for ints and for floats with no fractional part (2.0)"""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()
