"""
Scale bookkeeping shared by the unchecked and checked engines.

Holds operand validation and the scale factor 10^n. The factor is validated
against the integer width before it is built: an unrepresentable factor raises
ScaleRangeError instead of wrapping.
"""

from __future__ import annotations

from typing import Optional

from .constants import SCALE_BASE
from .exc import OperandDomainError, ScaleRangeError
from .int_types import IntType


def require_scale(scale: int, name: str = "scale") -> int:
    """Return scale if it is a non-negative int, else raise OperandDomainError."""
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise OperandDomainError(f"{name} must be int, got {type(scale).__name__}")
    if scale < 0:
        raise OperandDomainError(f"{name} must be >= 0, got {scale}")
    return scale


def require_magnitude(value: int, int_type: IntType, name: str = "value") -> int:
    """Return value if it is an int inside the width, else raise OperandDomainError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise OperandDomainError(f"{name} must be int, got {type(value).__name__}")
    if not int_type.contains(value):
        raise OperandDomainError(
            f"{name}={value} outside {int_type} range [{int_type.min_value}, {int_type.max_value}]"
        )
    return value


def require_int_type(int_type: IntType) -> IntType:
    """Return int_type if it is an IntType, else raise OperandDomainError."""
    if not isinstance(int_type, IntType):
        raise OperandDomainError(f"int_type must be IntType, got {type(int_type).__name__}")
    return int_type


def require_operands(value: int, other: int, value_scale: int, other_scale: int, int_type: IntType) -> None:
    """Validate both magnitudes against int_type and both scales."""
    require_magnitude(value, int_type, "value")
    require_magnitude(other, int_type, "other")
    require_scale(value_scale, "value_scale")
    require_scale(other_scale, "other_scale")


def scale_factor(exponent: int, int_type: IntType, *, operation: Optional[str] = None) -> int:
    """Return 10^exponent as a value of int_type.

    Raises ScaleRangeError when the factor exceeds the width.
    """
    require_scale(exponent, "exponent")
    if exponent > int_type.max_scale:
        raise ScaleRangeError(exponent, int_type, operation=operation)
    return int_type.from_int(SCALE_BASE ** exponent)


__all__ = [
    "require_scale",
    "require_magnitude",
    "require_int_type",
    "require_operands",
    "scale_factor",
]
