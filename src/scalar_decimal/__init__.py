# Top-level API for scalar_decimal.
"""
Top-level API for scalar_decimal.

Precision-safe normalisation of decimal literals into scalar field elements:
  - Precision: bounded significant-digit count (1..=75)
  - Decimal: (value, precision, scale) over a scalar field
  - match_decimal: bring a raw literal to a column scale, widening only

Everything else (limb decoding, columns, formatting) lives in `scalar_decimal.core`.
"""

from __future__ import annotations

from .core import (
    MAX_SUPPORTED_PRECISION,
    Precision,
    Curve25519Scalar,
    DecimalLiteral,
    Decimal,
    match_decimal,
    scale_scalar,
    ConversionError,
    PrecisionParseError,
    DecimalRoundingError,
)

__version__ = "0.1.0"

__all__ = [
    "MAX_SUPPORTED_PRECISION",
    "Precision",
    "Curve25519Scalar",
    "DecimalLiteral",
    "Decimal",
    "match_decimal",
    "scale_scalar",
    "ConversionError",
    "PrecisionParseError",
    "DecimalRoundingError",
]
