"""
Formatting helpers (non-core arithmetic).

Core arithmetic uses scalars and ints. Python's `decimal.Decimal` appears only
here, for display, logs and tests. Conversions are built from digit tuples so
the global decimal context never rounds them.
"""

from decimal import Decimal as PyDecimal
from typing import Sequence

from .decimals import Decimal
from .exc import ConversionError


def to_py_decimal(d: Decimal) -> PyDecimal:
    """Exact stdlib Decimal view of `d` (signed interpretation of the scalar).

    Requires a scalar exposing `to_signed_int()`.
    """
    if not hasattr(d.value, "to_signed_int"):
        raise ConversionError("to_py_decimal(): scalar has no signed integer view")
    v = d.value.to_signed_int()
    digits = tuple(int(c) for c in str(abs(v)))
    return PyDecimal((1 if v < 0 else 0, digits, -d.scale))


def fmt_decimal(d: Decimal) -> str:
    """Plain positional text, keeping all `scale` fractional digits.

      value=-134, scale=2  ->  '-1.34'
      value=5,    scale=3  ->  '0.005'
    """
    return format(to_py_decimal(d), "f")


def fmt_limbs(limbs: Sequence[int]) -> str:
    """Little-endian limbs as 0x-prefixed 16-digit hex words, for debugging."""
    return "[" + ", ".join(f"0x{limb:016x}" for limb in limbs) + "]"


__all__ = [
    "to_py_decimal",
    "fmt_decimal",
    "fmt_limbs",
]
