"""
Fixed-width integer primitives: range, wrapping and checked arithmetic.

- IntType describes one two's-complement width (bits + signedness).
- Checked ops return None when the exact result leaves the range or the
  divisor is zero; they never raise.
- Wrapping ops reduce modulo 2^bits, the way a release-mode native integer
  behaves. A zero divisor raises the host ZeroDivisionError.
- Division truncates toward zero and the remainder keeps the dividend's sign,
  which differs from Python's floor-based `//` and `%`.

Engines in `unchecked.py` / `checked.py` only rely on the methods below, so any
object providing them can stand in for IntType.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .constants import DEFAULT_INT_TYPE_NAME, POINTER_BITS, max_scale_exponent
from .exc import OperandDomainError


# ----------------------------
# Truncating division (integer domain)
# ----------------------------

def _trunc_divmod(a: int, b: int) -> Tuple[int, int]:
    """Quotient rounded toward zero and matching remainder (sign of a)."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - b * q


# ----------------------------
# Width descriptor
# ----------------------------

@dataclass(frozen=True)
class IntType:
    """Two's-complement integer width used to bound magnitudes."""
    name: str
    bits: int
    signed: bool

    def __post_init__(self):
        if self.bits <= 0:
            raise OperandDomainError(f"IntType bits must be > 0, got {self.bits}")

    def __str__(self) -> str:
        return self.name

    # ------------- range -------------

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def max_scale(self) -> int:
        """Largest n such that 10^n is representable in this width."""
        return max_scale_exponent(self.max_value)

    def contains(self, v: int) -> bool:
        return self.min_value <= v <= self.max_value

    def wrap(self, v: int) -> int:
        """Reduce an unbounded int into this width (modulo 2^bits)."""
        m = v & ((1 << self.bits) - 1)
        if self.signed and m > self.max_value:
            m -= 1 << self.bits
        return m

    def _fit(self, v: int) -> Optional[int]:
        return v if self.contains(v) else None

    # ------------- constructors -------------

    def from_int(self, v: int) -> int:
        """Build a value of this width from a small non-negative integer.

        Raises OperandDomainError when v is negative or does not fit.
        """
        if v < 0:
            raise OperandDomainError(f"{self.name}.from_int expects v >= 0, got {v}")
        if v > self.max_value:
            raise OperandDomainError(f"{v} does not fit {self.name}")
        return v

    # ------------- checked arithmetic -------------

    def checked_add(self, a: int, b: int) -> Optional[int]:
        return self._fit(a + b)

    def checked_sub(self, a: int, b: int) -> Optional[int]:
        return self._fit(a - b)

    def checked_mul(self, a: int, b: int) -> Optional[int]:
        return self._fit(a * b)

    def checked_div(self, a: int, b: int) -> Optional[int]:
        if b == 0:
            return None
        q, _ = _trunc_divmod(a, b)
        return self._fit(q)

    def checked_rem(self, a: int, b: int) -> Optional[int]:
        if b == 0:
            return None
        q, r = _trunc_divmod(a, b)
        # MIN % -1 is reported as overflow because the paired quotient overflows.
        if not self.contains(q):
            return None
        return r

    # ------------- wrapping arithmetic -------------

    def wrapping_add(self, a: int, b: int) -> int:
        return self.wrap(a + b)

    def wrapping_sub(self, a: int, b: int) -> int:
        return self.wrap(a - b)

    def wrapping_mul(self, a: int, b: int) -> int:
        return self.wrap(a * b)

    def wrapping_div(self, a: int, b: int) -> int:
        q, _ = _trunc_divmod(a, b)
        return self.wrap(q)

    def wrapping_rem(self, a: int, b: int) -> int:
        _, r = _trunc_divmod(a, b)
        return self.wrap(r)


# ----------------------------
# Width registry
# ----------------------------

U8 = IntType("u8", 8, False)
U16 = IntType("u16", 16, False)
U32 = IntType("u32", 32, False)
U64 = IntType("u64", 64, False)
U128 = IntType("u128", 128, False)
I8 = IntType("i8", 8, True)
I16 = IntType("i16", 16, True)
I32 = IntType("i32", 32, True)
I64 = IntType("i64", 64, True)
I128 = IntType("i128", 128, True)
USIZE = IntType("usize", POINTER_BITS, False)
ISIZE = IntType("isize", POINTER_BITS, True)

INT_TYPES: Dict[str, IntType] = {
    t.name: t
    for t in (U8, U16, U32, U64, U128, I8, I16, I32, I64, I128, USIZE, ISIZE)
}

#: Width used when callers do not pick one.
DEFAULT_INT_TYPE: IntType = INT_TYPES[DEFAULT_INT_TYPE_NAME]


def int_type(name: str) -> IntType:
    """Look up a width by name ("u64", "i32", "usize", ...)."""
    try:
        return INT_TYPES[name.lower()]
    except (KeyError, AttributeError):
        raise OperandDomainError(f"unknown integer type: {name!r}") from None


__all__ = [
    "IntType",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "USIZE",
    "ISIZE",
    "INT_TYPES",
    "DEFAULT_INT_TYPE",
    "int_type",
]
