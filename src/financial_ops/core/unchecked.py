"""
Unchecked decimal engine: scale-aligning arithmetic with wrapping semantics.

Each operation takes two magnitudes and their scales and returns
(result, result_scale):

- add/sub: align to the larger scale, then combine; result scale = larger scale.
- multiply: raw product; result scale = value_scale + other_scale.
- divide: (value * 10^other_scale) / other; result scale = value_scale.
- rem: (value * 10^value_scale) % other; result scale = value_scale.
  other_scale is accepted but unused. Divide and rem build their factor from
  different scales and must stay that way.

Overflow wraps modulo 2^bits. A zero divisor raises ZeroDivisionError. Use the
checked engine when either must be reported instead.
"""

from __future__ import annotations

from typing import Tuple

from .int_types import IntType, DEFAULT_INT_TYPE
from .scaling import require_operands, scale_factor

# Debug printing control
DEBUG_UNCHECKED = False

def _dbg(msg: str) -> None:
    if DEBUG_UNCHECKED:
        print(msg)


# ----------------------------
# Scale-aligned operations
# ----------------------------

def add_decimals(
    value: int,
    other: int,
    value_scale: int,
    other_scale: int,
    int_type: IntType = DEFAULT_INT_TYPE,
) -> Tuple[int, int]:
    """Add two scaled magnitudes, aligning to the larger scale."""
    require_operands(value, other, value_scale, other_scale, int_type)
    if value_scale > other_scale:
        factor = scale_factor(value_scale - other_scale, int_type, operation="add")
        result = int_type.wrapping_add(value, int_type.wrapping_mul(other, factor))
        _dbg(f"add: scale other by {factor} -> ({result}, {value_scale})")
        return result, value_scale
    factor = scale_factor(other_scale - value_scale, int_type, operation="add")
    result = int_type.wrapping_add(int_type.wrapping_mul(value, factor), other)
    _dbg(f"add: scale value by {factor} -> ({result}, {other_scale})")
    return result, other_scale


def sub_decimals(
    value: int,
    other: int,
    value_scale: int,
    other_scale: int,
    int_type: IntType = DEFAULT_INT_TYPE,
) -> Tuple[int, int]:
    """Subtract other from value, aligning to the larger scale."""
    require_operands(value, other, value_scale, other_scale, int_type)
    if value_scale > other_scale:
        factor = scale_factor(value_scale - other_scale, int_type, operation="sub")
        result = int_type.wrapping_sub(value, int_type.wrapping_mul(other, factor))
        _dbg(f"sub: scale other by {factor} -> ({result}, {value_scale})")
        return result, value_scale
    factor = scale_factor(other_scale - value_scale, int_type, operation="sub")
    result = int_type.wrapping_sub(int_type.wrapping_mul(value, factor), other)
    _dbg(f"sub: scale value by {factor} -> ({result}, {other_scale})")
    return result, other_scale


def multiply_decimals(
    value: int,
    other: int,
    value_scale: int,
    other_scale: int,
    int_type: IntType = DEFAULT_INT_TYPE,
) -> Tuple[int, int]:
    require_operands(value, other, value_scale, other_scale, int_type)
    return int_type.wrapping_mul(value, other), value_scale + other_scale


def divide_decimals(
    value: int,
    other: int,
    value_scale: int,
    other_scale: int,
    int_type: IntType = DEFAULT_INT_TYPE,
) -> Tuple[int, int]:
    """Divide value by other; the divisor's scale is absorbed into the dividend.

    Truncates toward zero. Raises ZeroDivisionError when other == 0.
    """
    require_operands(value, other, value_scale, other_scale, int_type)
    factor = scale_factor(other_scale, int_type, operation="divide")
    adjusted = int_type.wrapping_mul(value, factor)
    _dbg(f"divide: adjusted={adjusted}, den={other}")
    return int_type.wrapping_div(adjusted, other), value_scale


def rem_decimals(
    value: int,
    other: int,
    value_scale: int,
    other_scale: int,
    int_type: IntType = DEFAULT_INT_TYPE,
) -> Tuple[int, int]:
    """Remainder of value against other, with value pre-scaled by 10^value_scale.

    other_scale is validated and otherwise ignored. Raises ZeroDivisionError
    when other == 0.
    """
    require_operands(value, other, value_scale, other_scale, int_type)
    factor = scale_factor(value_scale, int_type, operation="rem")
    adjusted = int_type.wrapping_mul(value, factor)
    _dbg(f"rem: adjusted={adjusted}, den={other}")
    return int_type.wrapping_rem(adjusted, other), value_scale


__all__ = [
    "add_decimals",
    "sub_decimals",
    "multiply_decimals",
    "divide_decimals",
    "rem_decimals",
]
