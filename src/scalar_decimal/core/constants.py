"""
scalar_decimal Core Constants (integer domain)
==============================================

Only integer constants live here. `MAX_SUPPORTED_PRECISION` is the single
domain bound shared by Precision, the limb decoder and the scale matcher.
"""

# NOTE: Precision counts significant decimal digits; scale is never negative here.

# ---------------------------------------------------------------------------
# Decimal domain bounds
# ---------------------------------------------------------------------------

#: Largest number of significant decimal digits a Decimal75 value may carry.
#: 10^75 < 2^250, so the magnitude always fits below the field's signed half.
MAX_SUPPORTED_PRECISION: int = 75

#: Smallest precision able to hold every i64 (19 digits) / i128 (39 digits).
I64_MIN_PRECISION: int = 19
I128_MIN_PRECISION: int = 39


# ---------------------------------------------------------------------------
# Limb geometry (fixed 256-bit intermediate)
# ---------------------------------------------------------------------------

LIMB_BITS: int = 64
LIMB_COUNT: int = 4
LIMB_MASK: int = (1 << LIMB_BITS) - 1


# ---------------------------------------------------------------------------
# Machine integer ranges (two's complement)
# ---------------------------------------------------------------------------

I8_MIN: int = -(1 << 7)
I8_MAX: int = (1 << 7) - 1
I16_MIN: int = -(1 << 15)
I16_MAX: int = (1 << 15) - 1
I32_MIN: int = -(1 << 31)
I32_MAX: int = (1 << 31) - 1
I64_MIN: int = -(1 << 63)
I64_MAX: int = (1 << 63) - 1
I128_MIN: int = -(1 << 127)
I128_MAX: int = (1 << 127) - 1


# ---------------------------------------------------------------------------
# Curve25519 scalar field
# ---------------------------------------------------------------------------

#: Prime order of the Ristretto/Curve25519 scalar field: 2^252 + 27742317777372353535851937790883648493.
CURVE25519_ORDER: int = (1 << 252) + 27742317777372353535851937790883648493

#: Largest value interpreted as non-negative: (order - 1) / 2.
CURVE25519_MAX_SIGNED: int = (CURVE25519_ORDER - 1) // 2


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "MAX_SUPPORTED_PRECISION",
    "I64_MIN_PRECISION",
    "I128_MIN_PRECISION",
    "LIMB_BITS",
    "LIMB_COUNT",
    "LIMB_MASK",
    "I8_MIN",
    "I8_MAX",
    "I16_MIN",
    "I16_MAX",
    "I32_MIN",
    "I32_MAX",
    "I64_MIN",
    "I64_MAX",
    "I128_MIN",
    "I128_MAX",
    "CURVE25519_ORDER",
    "CURVE25519_MAX_SIGNED",
]
