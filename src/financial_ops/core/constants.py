"""
financial_ops Core Constants (integer domain)
=============================================

Only fixed-width integer constants live here. Formatting helpers that rely on
Decimal live in `fmt.py`.
"""

# NOTE: Widths are bit counts of two's-complement integers; usize/isize follow the host.

import struct

# ---------------------------------------------------------------------------
# Integer widths
# ---------------------------------------------------------------------------

#: Host pointer width in bits (drives usize/isize).
POINTER_BITS: int = struct.calcsize("P") * 8

#: Width used when callers do not pick one.
DEFAULT_INT_TYPE_NAME: str = "u64"


# ---------------------------------------------------------------------------
# Scale factor
# ---------------------------------------------------------------------------

#: Base of the scale factor (10^scale).
SCALE_BASE: int = 10


def max_scale_exponent(max_value: int) -> int:
    """Largest n with SCALE_BASE**n <= max_value (0 when max_value < SCALE_BASE)."""
    n = 0
    p = SCALE_BASE
    while p <= max_value:
        n += 1
        p *= SCALE_BASE
    return n


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "POINTER_BITS",
    "DEFAULT_INT_TYPE_NAME",
    "SCALE_BASE",
    "max_scale_exponent",
]
