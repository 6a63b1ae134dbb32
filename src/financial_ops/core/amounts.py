"""
Amount primitive: ScaledAmount (integer magnitude + decimal scale + width).

- The engines take magnitude and scale as sibling arguments; ScaledAmount
  bundles them with the integer width for callers that prefer a value type.
- Arithmetic operators go through the checked engine, so overflow and zero
  divisors raise instead of wrapping.
- Comparisons and hashing are numeric: (100, 2) == (1, 0).
- Decimal is used only at the I/O boundary (from_decimal / to_decimal).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from .checked import (
    add_decimals_checked,
    sub_decimals_checked,
    multiply_decimals_checked,
    divide_decimals_checked,
    rem_decimals_checked,
)
from .exc import OperandDomainError
from .fmt import to_decimal, to_string_decimals
from .int_types import IntType, DEFAULT_INT_TYPE
from .scaling import require_int_type, require_magnitude, require_scale


@dataclass(frozen=True, eq=False)
class ScaledAmount:
    """Fixed-point amount: value * 10^-scale, bounded by int_type."""
    value: int
    scale: int
    int_type: IntType = field(default=DEFAULT_INT_TYPE)

    def __post_init__(self):
        require_int_type(self.int_type)
        require_scale(self.scale)
        require_magnitude(self.value, self.int_type)

    # ------------- constructors -------------

    @classmethod
    def zero(cls, scale: int = 0, int_type: IntType = DEFAULT_INT_TYPE) -> "ScaledAmount":
        return cls(0, scale, int_type)

    @classmethod
    def from_decimal(cls, x: Decimal, scale: int, int_type: IntType = DEFAULT_INT_TYPE) -> "ScaledAmount":
        """Bridge from Decimal at a fixed scale. Never rounds.

        Raises OperandDomainError when x has more fractional digits than
        `scale` allows or the magnitude does not fit int_type.
        """
        if not isinstance(x, Decimal):
            raise OperandDomainError("from_decimal(): expected Decimal")
        if x.is_nan() or x.is_infinite():
            raise OperandDomainError("from_decimal(): invalid Decimal")
        require_int_type(int_type)
        require_scale(scale)
        sign, raw_digits, exp = x.as_tuple()
        # Drop trailing zeros so the digit count bounds the magnitude.
        digits = "".join(str(d) for d in raw_digits).rstrip("0")
        if not digits:
            return cls(0, scale, int_type)
        shift = exp + (len(raw_digits) - len(digits)) + scale
        if shift < 0:
            raise OperandDomainError(f"from_decimal(): {x} is not representable at scale {scale}")
        # value >= 10^(len(digits) - 1 + shift); reject before building the power.
        if len(digits) - 1 + shift > int_type.max_scale:
            raise OperandDomainError(f"from_decimal(): {x} at scale {scale} does not fit {int_type}")
        m = int(digits) * 10 ** shift
        if sign:
            m = -m
        return cls(m, scale, int_type)

    # ------------- conversions -------------

    def to_decimal(self) -> Decimal:
        """Decimal view for logs/printing only."""
        return to_decimal(self.value, self.scale)

    def to_string(self) -> str:
        return to_string_decimals(self.value, self.scale)

    def __str__(self) -> str:
        return self.to_string()

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.value == 0

    # ------------- comparisons (integer domain) -------------

    def _cmp_core(self, other: "ScaledAmount") -> int:
        # Align to the larger scale with unbounded ints; comparison cannot overflow.
        m1, m2 = self.value, other.value
        if self.scale > other.scale:
            m2 *= 10 ** (self.scale - other.scale)
        elif other.scale > self.scale:
            m1 *= 10 ** (other.scale - self.scale)
        return (m1 > m2) - (m1 < m2)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScaledAmount):
            return NotImplemented
        return self._cmp_core(other) == 0

    def __hash__(self) -> int:
        return hash(self.to_decimal())

    def __lt__(self, other: "ScaledAmount") -> bool:
        if not isinstance(other, ScaledAmount):
            return NotImplemented
        return self._cmp_core(other) < 0

    def __le__(self, other: "ScaledAmount") -> bool:
        if not isinstance(other, ScaledAmount):
            return NotImplemented
        return self._cmp_core(other) <= 0

    def __gt__(self, other: "ScaledAmount") -> bool:
        if not isinstance(other, ScaledAmount):
            return NotImplemented
        return self._cmp_core(other) > 0

    def __ge__(self, other: "ScaledAmount") -> bool:
        if not isinstance(other, ScaledAmount):
            return NotImplemented
        return self._cmp_core(other) >= 0

    # ------------- arithmetic (checked engine) -------------

    def _apply(self, op, other: "ScaledAmount") -> "ScaledAmount":
        if not isinstance(other, ScaledAmount):
            raise OperandDomainError("ScaledAmount arithmetic requires ScaledAmount operands")
        if other.int_type != self.int_type:
            raise OperandDomainError(
                f"ScaledAmount width mismatch: {self.int_type} vs {other.int_type}"
            )
        value, scale = op(self.value, other.value, self.scale, other.scale, self.int_type)
        return ScaledAmount(value, scale, self.int_type)

    def __add__(self, other: "ScaledAmount") -> "ScaledAmount":
        return self._apply(add_decimals_checked, other)

    def __sub__(self, other: "ScaledAmount") -> "ScaledAmount":
        return self._apply(sub_decimals_checked, other)

    def __mul__(self, other: "ScaledAmount") -> "ScaledAmount":
        return self._apply(multiply_decimals_checked, other)

    def __truediv__(self, other: "ScaledAmount") -> "ScaledAmount":
        return self._apply(divide_decimals_checked, other)

    def __mod__(self, other: "ScaledAmount") -> "ScaledAmount":
        return self._apply(rem_decimals_checked, other)


__all__ = [
    "ScaledAmount",
]
