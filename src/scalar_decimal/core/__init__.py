"""
scalar_decimal Core
===================

Unified exports for the precision-safe decimal normalisation engine.
Every numeric value ends up as a scalar field element; all scale changes are
exact widenings (multiplication by powers of ten), never rounding.
Python's `decimal` module is used *only* for I/O formatting.
"""

# NOTE:
#   Precision -> limb decoding -> literal matching -> Decimal (with scale_scalar).
#   Columns sit on top and only consume (precision, scale, scalars) triples.

# Integer-domain constants
from .constants import (
    MAX_SUPPORTED_PRECISION,
    I64_MIN_PRECISION,
    I128_MIN_PRECISION,
    LIMB_BITS,
    LIMB_COUNT,
    CURVE25519_ORDER,
    CURVE25519_MAX_SIGNED,
)

# Precision and scalars
from .precision import Precision
from .scalar import Scalar, Curve25519Scalar

# Literals and limb decoding
from .literal import DecimalLiteral, DecimalLiteralLike
from .limbs import (
    Sign,
    decimal_string_to_scaled_limbs,
    int_to_limbs,
    limbs_to_int,
)

# Matching and decimals
from .matching import get_limbs_and_sign, match_decimal
from .decimals import Decimal, scale_scalar

# Columns
from .column import (
    ColumnKind,
    ColumnType,
    OwnedColumn,
    Decimal75Column,
    try_from_scalars,
    decimal75,
    decimal75_from_literals,
)

# Formatting helpers (non-core arithmetic)
from .fmt import to_py_decimal, fmt_decimal, fmt_limbs

# Core exceptions
from .exc import (
    DecimalError,
    InvalidPrecisionError,
    ScalarDomainError,
    ConversionError,
    PrecisionParseError,
    DecimalRoundingError,
    DecimalLiteralError,
    ColumnError,
    ScalarConversionError,
    TypeCastError,
)

__all__ = [
    # constants
    "MAX_SUPPORTED_PRECISION",
    "I64_MIN_PRECISION",
    "I128_MIN_PRECISION",
    "LIMB_BITS",
    "LIMB_COUNT",
    "CURVE25519_ORDER",
    "CURVE25519_MAX_SIGNED",
    # precision / scalars
    "Precision",
    "Scalar",
    "Curve25519Scalar",
    # literals / limbs
    "DecimalLiteral",
    "DecimalLiteralLike",
    "Sign",
    "decimal_string_to_scaled_limbs",
    "int_to_limbs",
    "limbs_to_int",
    # matching / decimals
    "get_limbs_and_sign",
    "match_decimal",
    "Decimal",
    "scale_scalar",
    # columns
    "ColumnKind",
    "ColumnType",
    "OwnedColumn",
    "Decimal75Column",
    "try_from_scalars",
    "decimal75",
    "decimal75_from_literals",
    # fmt
    "to_py_decimal",
    "fmt_decimal",
    "fmt_limbs",
    # exceptions
    "DecimalError",
    "InvalidPrecisionError",
    "ScalarDomainError",
    "ConversionError",
    "PrecisionParseError",
    "DecimalRoundingError",
    "DecimalLiteralError",
    "ColumnError",
    "ScalarConversionError",
    "TypeCastError",
]
