# Top-level API for financial_ops (integer-domain).
"""
Top-level API for financial_ops (integer-domain).

Scaled (fixed-point) decimal arithmetic over fixed-width integers. A decimal
value is a raw integer magnitude plus a scale (decimal places) tracked next
to it:

  - unchecked engine: add/sub/multiply/divide/rem with wrapping semantics
  - checked engine: same operations, raising on overflow or a zero divisor
  - IntType widths (u8 ... i128, usize, isize) supplying the primitives
  - ScaledAmount: value type bundling magnitude, scale and width

Example::

    >>> from financial_ops import add_decimals_checked, U64
    >>> add_decimals_checked(10000, 200, 4, 2, U64)
    (30000, 4)
"""

from __future__ import annotations

from .core import (
    IntType,
    U8,
    U16,
    U32,
    U64,
    U128,
    I8,
    I16,
    I32,
    I64,
    I128,
    USIZE,
    ISIZE,
    int_type,
    add_decimals,
    sub_decimals,
    multiply_decimals,
    divide_decimals,
    rem_decimals,
    add_decimals_checked,
    sub_decimals_checked,
    multiply_decimals_checked,
    divide_decimals_checked,
    rem_decimals_checked,
    pad_to_width,
    to_string_decimals,
    ScaledAmount,
    DecimalErrorKind,
    DecimalOperationError,
    DecimalOverflowError,
    DecimalDivisionByZeroError,
    ScaleRangeError,
    OperandDomainError,
)

__version__ = "0.1.0"

__all__ = [
    # widths
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
    "int_type",
    # unchecked engine
    "add_decimals",
    "sub_decimals",
    "multiply_decimals",
    "divide_decimals",
    "rem_decimals",
    # checked engine
    "add_decimals_checked",
    "sub_decimals_checked",
    "multiply_decimals_checked",
    "divide_decimals_checked",
    "rem_decimals_checked",
    # formatting
    "pad_to_width",
    "to_string_decimals",
    # value type
    "ScaledAmount",
    # exceptions
    "DecimalErrorKind",
    "DecimalOperationError",
    "DecimalOverflowError",
    "DecimalDivisionByZeroError",
    "ScaleRangeError",
    "OperandDomainError",
]
