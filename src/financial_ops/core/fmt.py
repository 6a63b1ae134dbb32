"""
Formatting helpers (non-core arithmetic).

Core arithmetic stays in the integer domain. The helpers here render a
(magnitude, scale) pair for logs, tests and display; Decimal is used only for
the display bridge.
"""

from decimal import Decimal

from .exc import OperandDomainError
from .scaling import require_scale

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


# ---------------------------------------------------------------------------
# Text helpers
# ---------------------------------------------------------------------------

def pad_to_width(text: str, width: int, pad_char: str = "0") -> str:
    """Left-pad text with pad_char until it is at least width characters long.

    Longer text is returned unchanged, e.g.:
      pad_to_width("Hello", 10, "-") -> '-----Hello'
      pad_to_width("World", 5, "*")  -> 'World'
    """
    if len(pad_char) != 1:
        raise OperandDomainError(f"pad_char must be a single character, got {pad_char!r}")
    if len(text) >= width:
        return text
    return pad_char * (width - len(text)) + text


def to_string_decimals(value: int, decimals: int) -> str:
    """Render a scaled magnitude as '<integer>.<fraction>'.

    The fraction is |value| mod 10^decimals left-padded with '0' to exactly
    `decimals` digits. Negative magnitudes get a leading '-'. Exact for any
    width (no float round-trip), e.g.:
      to_string_decimals(123456789, 2) -> '1234567.89'
      to_string_decimals(0, 5)         -> '0.00000'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise OperandDomainError(f"to_string_decimals(): value must be int, got {type(value).__name__}")
    require_scale(decimals, "decimals")
    sign = "-" if value < 0 else ""
    integer_part, fractional_part = divmod(abs(value), 10 ** decimals)
    _dbg(f"to_string_decimals: int={integer_part}, frac={fractional_part}, decimals={decimals}")
    return f"{sign}{integer_part}.{pad_to_width(str(fractional_part), decimals, '0')}"


# ---------------------------------------------------------------------------
# Logging/display conversion helpers
# ---------------------------------------------------------------------------

def to_decimal(value: int, scale: int) -> Decimal:
    """Convert a scaled magnitude into a Decimal for logging/printing only."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise OperandDomainError(f"to_decimal(): value must be int, got {type(value).__name__}")
    require_scale(scale)
    # Built from the digit tuple so no context precision is applied.
    sign, digits, _ = Decimal(value).as_tuple()
    return Decimal((sign, digits, -scale))


__all__ = [
    "pad_to_width",
    "to_string_decimals",
    "to_decimal",
]
