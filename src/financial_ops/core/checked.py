"""
Checked decimal engine: the unchecked algorithm routed through checked primitives.

Same operations and scale rules as `unchecked.py`; on success each returns
(result, result_scale). Failures are raised, never wrapped:

- DecimalOverflowError: any checked step left the width's range, including
  the scale-factor application and signed MIN / -1.
- DecimalDivisionByZeroError: divide/rem divisor is zero. Checked before any
  scaling, so a zero divisor is never reported as an overflow.
- ScaleRangeError (an overflow): 10^n itself does not fit the width.

Alignment notes:
# - The first failing step short-circuits; no partial result is returned.
# - Results agree bit-for-bit with the unchecked engine whenever nothing fails.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .exc import DecimalDivisionByZeroError, DecimalOverflowError
from .int_types import IntType, DEFAULT_INT_TYPE
from .scaling import require_operands, scale_factor

# Debug printing control
DEBUG_CHECKED = False

def _dbg(msg: str) -> None:
    if DEBUG_CHECKED:
        print(msg)


def _ok(step: Optional[int], operation: str) -> int:
    """Unwrap a checked step or raise overflow for `operation`."""
    if step is None:
        _dbg(f"{operation}: checked step failed -> overflow")
        raise DecimalOverflowError(operation=operation)
    return step


def _require_divisor(other: int, operation: str) -> None:
    if other == 0:
        _dbg(f"{operation}: zero divisor")
        raise DecimalDivisionByZeroError(operation=operation)


# ----------------------------
# Scale-aligned operations (checked)
# ----------------------------

def add_decimals_checked(
    value: int,
    other: int,
    value_scale: int,
    other_scale: int,
    int_type: IntType = DEFAULT_INT_TYPE,
) -> Tuple[int, int]:
    """Add two scaled magnitudes, aligning to the larger scale.

    Raises DecimalOverflowError if scaling or the sum leaves the width.
    """
    require_operands(value, other, value_scale, other_scale, int_type)
    if value_scale > other_scale:
        factor = scale_factor(value_scale - other_scale, int_type, operation="add")
        scaled = _ok(int_type.checked_mul(other, factor), "add")
        return _ok(int_type.checked_add(value, scaled), "add"), value_scale
    factor = scale_factor(other_scale - value_scale, int_type, operation="add")
    scaled = _ok(int_type.checked_mul(value, factor), "add")
    return _ok(int_type.checked_add(scaled, other), "add"), other_scale


def sub_decimals_checked(
    value: int,
    other: int,
    value_scale: int,
    other_scale: int,
    int_type: IntType = DEFAULT_INT_TYPE,
) -> Tuple[int, int]:
    """Subtract other from value, aligning to the larger scale.

    Raises DecimalOverflowError if scaling or the difference leaves the width
    (for unsigned widths this includes any negative result).
    """
    require_operands(value, other, value_scale, other_scale, int_type)
    if value_scale > other_scale:
        factor = scale_factor(value_scale - other_scale, int_type, operation="sub")
        scaled = _ok(int_type.checked_mul(other, factor), "sub")
        return _ok(int_type.checked_sub(value, scaled), "sub"), value_scale
    factor = scale_factor(other_scale - value_scale, int_type, operation="sub")
    scaled = _ok(int_type.checked_mul(value, factor), "sub")
    return _ok(int_type.checked_sub(scaled, other), "sub"), other_scale


def multiply_decimals_checked(
    value: int,
    other: int,
    value_scale: int,
    other_scale: int,
    int_type: IntType = DEFAULT_INT_TYPE,
) -> Tuple[int, int]:
    require_operands(value, other, value_scale, other_scale, int_type)
    return _ok(int_type.checked_mul(value, other), "multiply"), value_scale + other_scale


def divide_decimals_checked(
    value: int,
    other: int,
    value_scale: int,
    other_scale: int,
    int_type: IntType = DEFAULT_INT_TYPE,
) -> Tuple[int, int]:
    """Divide value by other, absorbing other_scale into the dividend.

    Truncates toward zero. The divisor is tested for zero first.
    """
    require_operands(value, other, value_scale, other_scale, int_type)
    _require_divisor(other, "divide")
    factor = scale_factor(other_scale, int_type, operation="divide")
    adjusted = _ok(int_type.checked_mul(value, factor), "divide")
    _dbg(f"divide: adjusted={adjusted}, den={other}")
    return _ok(int_type.checked_div(adjusted, other), "divide"), value_scale


def rem_decimals_checked(
    value: int,
    other: int,
    value_scale: int,
    other_scale: int,
    int_type: IntType = DEFAULT_INT_TYPE,
) -> Tuple[int, int]:
    """Remainder of value (pre-scaled by 10^value_scale) against other.

    other_scale is validated and otherwise ignored. The divisor is tested
    for zero first.
    """
    require_operands(value, other, value_scale, other_scale, int_type)
    _require_divisor(other, "rem")
    factor = scale_factor(value_scale, int_type, operation="rem")
    adjusted = _ok(int_type.checked_mul(value, factor), "rem")
    _dbg(f"rem: adjusted={adjusted}, den={other}")
    return _ok(int_type.checked_rem(adjusted, other), "rem"), value_scale


__all__ = [
    "add_decimals_checked",
    "sub_decimals_checked",
    "multiply_decimals_checked",
    "divide_decimals_checked",
    "rem_decimals_checked",
]
