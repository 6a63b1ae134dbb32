"""
Core exception types for financial_ops.core.

These are dependency-free and may be imported by all core modules.
"""

from enum import Enum

__all__ = [
    "DecimalErrorKind",
    "DecimalOperationError",
    "DecimalOverflowError",
    "DecimalDivisionByZeroError",
    "ScaleRangeError",
    "OperandDomainError",
]


class DecimalErrorKind(Enum):
    """Failure kinds reported by the checked engine."""
    OVERFLOW = "overflow"
    DIVISION_BY_ZERO = "division_by_zero"


_MESSAGES = {
    DecimalErrorKind.OVERFLOW: "An overflow occurred during the operation.",
    DecimalErrorKind.DIVISION_BY_ZERO: "A division by zero occurred during the operation.",
}


class DecimalOperationError(ArithmeticError):
    """Base class for checked decimal failures.

    Attributes
    ----------
    kind : DecimalErrorKind
        Which failure occurred. Subclasses fix it.
    operation : str | None
        Name of the engine operation that failed, for context.
    """

    kind: DecimalErrorKind = DecimalErrorKind.OVERFLOW

    def __init__(self, message=None, *, operation=None):
        super().__init__(message or _MESSAGES[self.kind])
        self.operation = operation


class DecimalOverflowError(DecimalOperationError, OverflowError):
    """Raised when a checked step leaves the range of the integer width."""
    kind = DecimalErrorKind.OVERFLOW


class DecimalDivisionByZeroError(DecimalOperationError, ZeroDivisionError):
    """Raised when a divide or remainder divisor is zero."""
    kind = DecimalErrorKind.DIVISION_BY_ZERO


class ScaleRangeError(DecimalOverflowError):
    """Raised when the scale factor 10^n does not fit the integer width.

    Attributes
    ----------
    exponent : int
        The requested power of ten.
    int_type : Any
        The width the factor had to fit.
    """

    def __init__(self, exponent, int_type, *, operation=None):
        super().__init__(
            f"Scale factor 10^{exponent} does not fit {int_type}",
            operation=operation,
        )
        self.exponent = exponent
        self.int_type = int_type


class OperandDomainError(ValueError):
    """Raised when inputs violate basic preconditions (type, range, scale sign)."""
    pass
