"""Demo: scaled-decimal arithmetic, unchecked vs checked.

Scenarios covered:
S1) add / sub with different scales (align to the larger scale)
S2) multiply (scales add)
S3) divide / rem (dividend scale kept; rem ignores the divisor scale)
S4) truncating division on an inexact quotient
S5) zero divisor: native error vs DivisionByZero
S6) overflow: wrapped value vs Overflow
"""
from __future__ import annotations

from typing import Callable, List, NamedTuple
import argparse
import sys

from financial_ops import (
    DecimalOperationError,
    OperandDomainError,
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
    int_type,
    to_string_decimals,
)

# ---------- pretty printers ----------

def brief(value: int, scale: int) -> str:
    return f"({value}, {scale}) = {to_string_decimals(value, scale)}"


def run_pair(title: str, unchecked_fn: Callable, checked_fn: Callable, a: int, b: int, sa: int, sb: int, t) -> None:
    print(f"\n=== {title} [{t}] ===")
    if not (t.contains(a) and t.contains(b)):
        print(f"- skipped: operands do not fit {t}")
        return
    print(f"- a: {brief(a, sa)}")
    print(f"- b: {brief(b, sb)}")
    try:
        value, scale = unchecked_fn(a, b, sa, sb, t)
        print(f"  • unchecked: {brief(value, scale)}")
    except ZeroDivisionError as exc:
        print(f"  • unchecked: raised {type(exc).__name__}: {exc}")
    except OperandDomainError as exc:
        print(f"  • unchecked: precondition failed: {exc}")
    except DecimalOperationError as exc:
        print(f"  • unchecked: {exc}")
    try:
        value, scale = checked_fn(a, b, sa, sb, t)
        print(f"  • checked  : {brief(value, scale)}")
    except DecimalOperationError as exc:
        print(f"  • checked  : {exc.kind.value} ({exc})")


class Scenario(NamedTuple):
    sid: str
    fn: Callable[[], None]


def build_scenarios(t) -> List[Scenario]:
    scenarios: List[Scenario] = []

    def add(sid: str, fn: Callable[[], None]) -> None:
        scenarios.append(Scenario(sid, fn))

    add("S1", lambda: (
        run_pair("S1a) add 1.0000 + 2.00", add_decimals, add_decimals_checked, 10000, 200, 4, 2, t),
        run_pair("S1b) sub 3.0000 - 2.00", sub_decimals, sub_decimals_checked, 30000, 200, 4, 2, t),
    ))
    add("S2", lambda: run_pair("S2) multiply 3.0000 * 2.00", multiply_decimals, multiply_decimals_checked, 30000, 200, 4, 2, t))
    add("S3", lambda: (
        run_pair("S3a) divide 6.0000 / 2.00", divide_decimals, divide_decimals_checked, 60000, 200, 4, 2, t),
        run_pair("S3b) rem 6.0000 % 2.00", rem_decimals, rem_decimals_checked, 60000, 200, 4, 2, t),
    ))
    add("S4", lambda: run_pair("S4) divide 123.45 / 0.45 (truncates)", divide_decimals, divide_decimals_checked, 12345, 45, 2, 2, t))
    add("S5", lambda: run_pair("S5) divide by zero", divide_decimals, divide_decimals_checked, 100, 0, 2, 2, t))
    add("S6", lambda: run_pair("S6) sub below range", sub_decimals, sub_decimals_checked, t.min_value, 1, 0, 0, t))
    return scenarios


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Scaled-decimal arithmetic demo")
    parser.add_argument("--int-type", type=str, default="u64", help="Integer width (u8..u128, i8..i128, usize, isize)")
    parser.add_argument("--only", type=str, default=None, help="Comma-separated scenario ids to run (e.g., S1,S4)")
    parser.add_argument("--skip", type=str, default=None, help="Comma-separated scenario ids to skip")
    args = parser.parse_args(argv)

    t = int_type(args.int_type)

    # --------------- Filter & run ---------------
    only_set = None
    skip_set = None
    if args.only:
        only_set = set([s.strip() for s in args.only.split(',') if s.strip()])
    if args.skip:
        skip_set = set([s.strip() for s in args.skip.split(',') if s.strip()])

    for sc in build_scenarios(t):
        if only_set is not None and sc.sid not in only_set:
            continue
        if skip_set is not None and sc.sid in skip_set:
            continue
        sc.fn()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
