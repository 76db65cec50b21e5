from __future__ import annotations

from typing import Callable

import pytest

# Import project primitives
from scalar_decimal.core import Curve25519Scalar, DecimalLiteral, Precision


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def lit() -> Callable[[str], DecimalLiteral]:
    """Literal factory, mirroring what the SQL literal parser hands over."""
    return DecimalLiteral


@pytest.fixture()
def nines_74() -> str:
    """Largest integer literal that can still widen by one digit."""
    return "9" * 74


@pytest.fixture()
def max_limbs_digits() -> str:
    """Decimal digits of 2^256 - 1 (four all-ones limbs)."""
    return str((1 << 256) - 1)


@pytest.fixture()
def p19() -> Precision:
    return Precision.new(19)


@pytest.fixture()
def minus_134() -> Curve25519Scalar:
    return Curve25519Scalar.from_i64(-134)
