import random

import pytest

from financial_ops.core import checked as ck
from financial_ops.core import unchecked as uc
from financial_ops.core.checked import (
    add_decimals_checked,
    sub_decimals_checked,
    multiply_decimals_checked,
    divide_decimals_checked,
    rem_decimals_checked,
)
from financial_ops.core.int_types import U8, U16, U32, U64, I8, I16, I32
from financial_ops.core.scaling import require_operands, scale_factor
from financial_ops.core.exc import (
    DecimalErrorKind,
    DecimalOperationError,
    DecimalOverflowError,
    DecimalDivisionByZeroError,
    ScaleRangeError,
    OperandDomainError,
)


# -----------------------------
# Literal scenarios
# -----------------------------

@pytest.mark.parametrize(
    "fn,a,sa,b,sb,expected",
    [
        (add_decimals_checked, 10000, 4, 200, 2, (30000, 4)),
        (sub_decimals_checked, 30000, 4, 200, 2, (10000, 4)),
        (multiply_decimals_checked, 30000, 4, 200, 2, (6000000, 6)),
        (divide_decimals_checked, 60000, 4, 200, 2, (30000, 4)),
        (rem_decimals_checked, 60000, 4, 200, 2, (0, 4)),
        (divide_decimals_checked, 12345, 2, 45, 2, (27433, 2)),
    ],
)
def test_u64_literal_scenarios(fn, a, sa, b, sb, expected):
    got = fn(a, b, sa, sb, U64)
    print(f"[{fn.__name__}] ({a},{sa}) , ({b},{sb}) -> {got} (expect {expected})")
    assert got == expected


@pytest.mark.parametrize(
    "fn,expected",
    [
        (add_decimals_checked, (12390, 2)),
        (sub_decimals_checked, (12300, 2)),
        (multiply_decimals_checked, (555525, 4)),
        (divide_decimals_checked, (27433, 2)),
        (rem_decimals_checked, (15, 2)),
    ],
)
def test_u32_equal_scales(fn, expected):
    assert fn(12345, 45, 2, 2, U32) == expected


def test_rem_ignores_divisor_scale_divide_does_not():
    print("[asymmetry] rem builds its factor from value_scale, divide from other_scale")
    assert divide_decimals_checked(12345, 45, 2, 0, U32) == (274, 2)
    assert rem_decimals_checked(12345, 45, 2, 0, U32) == (15, 2)
    assert rem_decimals_checked(12345, 45, 2, 30, U32) == (15, 2)


# -----------------------------
# Division by zero
# -----------------------------

@pytest.mark.parametrize("fn", [divide_decimals_checked, rem_decimals_checked])
@pytest.mark.parametrize(
    "a,sa,sb,t",
    [
        (0, 0, 0, U64),
        (60000, 4, 2, U64),
        (2 ** 64 - 1, 0, 19, U64),   # scaling would overflow
        (2 ** 64 - 1, 25, 25, U64),  # 10^25 does not even fit u64
        (-128, 0, 0, I8),
    ],
)
def test_zero_divisor_is_division_by_zero_never_overflow(fn, a, sa, sb, t):
    print(f"[div-by-zero] {fn.__name__}(({a},{sa}), (0,{sb})) {t} -> expect DivisionByZero")
    with pytest.raises(DecimalDivisionByZeroError) as ei:
        fn(a, 0, sa, sb, t)
    assert ei.value.kind is DecimalErrorKind.DIVISION_BY_ZERO
    assert not isinstance(ei.value, DecimalOverflowError)
    assert isinstance(ei.value, ZeroDivisionError)
    assert str(ei.value) == "A division by zero occurred during the operation."


# -----------------------------
# Overflow
# -----------------------------

@pytest.mark.parametrize(
    "fn,a,b,sa,sb,t,why",
    [
        (add_decimals_checked, 2 ** 64 - 1, 1, 0, 0, U64, "sum exceeds u64"),
        (add_decimals_checked, 1, 2 ** 63, 1, 0, U64, "scaling other by 10"),
        (add_decimals_checked, 2 ** 63, 1, 0, 1, U64, "scaling value by 10"),
        (sub_decimals_checked, 1, 2, 0, 0, U64, "negative result in unsigned"),
        (sub_decimals_checked, 1, 7000, 1, 0, U16, "scaled other exceeds u16"),
        (sub_decimals_checked, -32768, 1, 0, 0, I16, "below i16 min"),
        (multiply_decimals_checked, 65536, 65536, 0, 0, U32, "product exceeds u32"),
        (divide_decimals_checked, 2 ** 63, 3, 0, 1, U64, "dividend scaling"),
        (divide_decimals_checked, -128, -1, 0, 0, I8, "MIN / -1"),
        (rem_decimals_checked, 26, 7, 1, 0, U8, "dividend scaling 260"),
        (rem_decimals_checked, -128, -1, 0, 0, I8, "MIN % -1"),
    ],
)
def test_overflow_reported(fn, a, b, sa, sb, t, why):
    print(f"[overflow] {fn.__name__} {t}: {why}")
    with pytest.raises(DecimalOverflowError) as ei:
        fn(a, b, sa, sb, t)
    assert ei.value.kind is DecimalErrorKind.OVERFLOW
    assert isinstance(ei.value, OverflowError)
    assert str(ei.value) == "An overflow occurred during the operation."


def test_overflow_carries_operation_name():
    with pytest.raises(DecimalOperationError) as ei:
        multiply_decimals_checked(2 ** 32, 2 ** 32, 0, 0, U64)
    assert ei.value.operation == "multiply"


def test_scale_factor_out_of_range_is_overflow():
    print("[scale-range] 10^3 does not fit u8 -> ScaleRangeError (an overflow)")
    with pytest.raises(ScaleRangeError) as ei:
        add_decimals_checked(0, 0, 3, 0, U8)
    assert isinstance(ei.value, DecimalOverflowError)
    assert ei.value.kind is DecimalErrorKind.OVERFLOW
    assert ei.value.exponent == 3
    assert ei.value.int_type is U8
    assert ei.value.operation == "add"


def test_scale_factor_operation_defaults_to_none():
    assert scale_factor(2, U8) == 100
    with pytest.raises(ScaleRangeError) as ei:
        scale_factor(3, U8)
    assert ei.value.operation is None


def test_invalid_operands_are_not_decimal_failures():
    with pytest.raises(OperandDomainError):
        add_decimals_checked(1, 1, -1, 0, U64)
    with pytest.raises(OperandDomainError):
        divide_decimals_checked(1, 2 ** 64, 0, 0, U64)


_ALL_ENGINE_OPS = [
    getattr(mod, f"{name}{suffix}")
    for mod, suffix in ((uc, ""), (ck, "_checked"))
    for name in ("add_decimals", "sub_decimals", "multiply_decimals", "divide_decimals", "rem_decimals")
]


@pytest.mark.parametrize("fn", _ALL_ENGINE_OPS, ids=lambda f: f.__name__)
@pytest.mark.parametrize(
    "args",
    [
        (1, 1, 0, -1, U64),       # negative other_scale
        (1, 256, 0, 0, U8),       # other outside width
        (-1, 0, 0, 0, U32),       # value outside width, zero divisor
        (1, 1.0, 0, 0, U64),      # float other
        (1, 1, 0, True, U64),     # bool scale
    ],
)
def test_both_engines_validate_operands_identically(fn, args):
    print(f"[preconditions] {fn.__name__}{args} -> expect OperandDomainError")
    with pytest.raises(OperandDomainError):
        fn(*args)
    with pytest.raises(OperandDomainError):
        require_operands(*args)


def test_require_operands_accepts_in_range_values():
    assert require_operands(0, 2 ** 64 - 1, 0, 30, U64) is None
    assert require_operands(-128, 127, 3, 0, I8) is None


# -----------------------------
# Agreement with the unchecked engine
# -----------------------------

def _trunc_div(n: int, d: int) -> int:
    q = abs(n) // abs(d)
    return -q if (n < 0) != (d < 0) else q


def _exact(name, a, b, sa, sb, t):
    """Unbounded reference; None when any intermediate step leaves t's range."""
    def fit(v):
        if not t.contains(v):
            raise OverflowError
        return v

    try:
        if name in ("add", "sub"):
            sign = 1 if name == "add" else -1
            if sa > sb:
                return fit(a + sign * fit(b * 10 ** (sa - sb))), sa
            return fit(fit(a * 10 ** (sb - sa)) + sign * b), sb
        if name == "multiply":
            return fit(a * b), sa + sb
        if name == "divide":
            n = fit(a * 10 ** sb)
            return fit(_trunc_div(n, b)), sa
        n = fit(a * 10 ** sa)
        q = fit(_trunc_div(n, b))
        return n - b * q, sa
    except OverflowError:
        return None


_OPS = ["add", "sub", "multiply", "divide", "rem"]


@pytest.mark.parametrize("t", [U16, I16, U32, I32])
def test_checked_agrees_with_unchecked_or_reports_overflow(t):
    rng = random.Random(20240611 + t.bits + t.signed)
    checked_ok = overflowed = 0
    for _ in range(400):
        a = rng.randint(t.min_value, t.max_value) >> rng.randint(0, t.bits - 1)
        b = rng.randint(t.min_value, t.max_value) >> rng.randint(0, t.bits - 1)
        sa, sb = rng.randint(0, 3), rng.randint(0, 3)
        for name in _OPS:
            if name in ("divide", "rem") and b == 0:
                continue
            ref = _exact(name, a, b, sa, sb, t)
            c_fn = getattr(ck, f"{name}_decimals_checked")
            u_fn = getattr(uc, f"{name}_decimals")
            if ref is None:
                overflowed += 1
                with pytest.raises(DecimalOverflowError):
                    c_fn(a, b, sa, sb, t)
                continue
            checked_ok += 1
            got = c_fn(a, b, sa, sb, t)
            assert got == ref
            assert u_fn(a, b, sa, sb, t) == got
    print(f"[agreement] {t}: ok={checked_ok}, overflow={overflowed}")
    assert checked_ok > 0 and overflowed > 0


def test_add_then_sub_recovers_dividend_at_max_scale():
    for a, sa, b, sb in [(10000, 4, 200, 2), (7, 0, 123, 3), (999, 2, 1, 2)]:
        s, ss = add_decimals_checked(a, b, sa, sb, U64)
        back, sback = sub_decimals_checked(s, b, ss, sb, U64)
        print(f"[round-trip] ({a},{sa}) (+/-) ({b},{sb}) -> ({back},{sback})")
        assert sback == max(sa, sb)
        assert back == a * 10 ** (sback - sa)


def test_debug_output_on_failure(debug_engines, capsys):
    with pytest.raises(DecimalDivisionByZeroError):
        divide_decimals_checked(1, 0, 0, 0)
    assert "zero divisor" in capsys.readouterr().out
