"""
financial_ops Core
==================

Unified exports for fixed-width integer primitives and the scaled-decimal
engines. All arithmetic stays in the integer domain; Decimal helpers are
provided *only* for I/O formatting.
"""

# NOTE:
#   Magnitudes are plain ints bounded by an IntType width. The unchecked engine
#   wraps on overflow; the checked engine raises DecimalOperationError subclasses.

# Integer-domain constants
from .constants import (
    POINTER_BITS,
    DEFAULT_INT_TYPE_NAME,
    SCALE_BASE,
    max_scale_exponent,
)

# Fixed-width primitives (checked / wrapping ops)
from .int_types import (
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
    INT_TYPES,
    DEFAULT_INT_TYPE,
    int_type,
)

# Scale bookkeeping
from .scaling import (
    require_scale,
    require_magnitude,
    require_int_type,
    require_operands,
    scale_factor,
)

# Unchecked engine
from .unchecked import (
    add_decimals,
    sub_decimals,
    multiply_decimals,
    divide_decimals,
    rem_decimals,
)

# Checked engine
from .checked import (
    add_decimals_checked,
    sub_decimals_checked,
    multiply_decimals_checked,
    divide_decimals_checked,
    rem_decimals_checked,
)

# Formatting helpers (non-core arithmetic)
from .fmt import pad_to_width, to_string_decimals, to_decimal

# Amount primitive
from .amounts import ScaledAmount

# Core exceptions
from .exc import (
    DecimalErrorKind,
    DecimalOperationError,
    DecimalOverflowError,
    DecimalDivisionByZeroError,
    ScaleRangeError,
    OperandDomainError,
)

__all__ = [
    # constants
    "POINTER_BITS",
    "DEFAULT_INT_TYPE_NAME",
    "SCALE_BASE",
    "max_scale_exponent",
    # int types
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
    # scaling
    "require_scale",
    "require_magnitude",
    "require_int_type",
    "require_operands",
    "scale_factor",
    # unchecked
    "add_decimals",
    "sub_decimals",
    "multiply_decimals",
    "divide_decimals",
    "rem_decimals",
    # checked
    "add_decimals_checked",
    "sub_decimals_checked",
    "multiply_decimals_checked",
    "divide_decimals_checked",
    "rem_decimals_checked",
    # fmt
    "pad_to_width",
    "to_string_decimals",
    "to_decimal",
    # amounts
    "ScaledAmount",
    # exceptions
    "DecimalErrorKind",
    "DecimalOperationError",
    "DecimalOverflowError",
    "DecimalDivisionByZeroError",
    "ScaleRangeError",
    "OperandDomainError",
]
