from __future__ import annotations
from typing import List

import pytest

# Import project primitives
from financial_ops.core import INT_TYPES, IntType
from financial_ops.core import checked, unchecked, fmt


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def all_int_types() -> List[IntType]:
    return list(INT_TYPES.values())


@pytest.fixture()
def debug_engines(monkeypatch):
    """Turn on the engines' debug printing for one test."""
    monkeypatch.setattr(checked, "DEBUG_CHECKED", True)
    monkeypatch.setattr(unchecked, "DEBUG_UNCHECKED", True)
    monkeypatch.setattr(fmt, "DEBUG_FMT", True)
    yield
