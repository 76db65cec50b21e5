"""
Matching incoming decimal literals to a column scale.

Pairs decimals that are equal in value but written with differing scales and
precisions, e.g. at scale 3:

    1.0   (p = 2, s = 1)  ->  1000
    1.000 (p = 4, s = 3)  ->  1000

Scaling up is lossless as long as the resulting precision stays within
MAX_SUPPORTED_PRECISION. Scaling down is rounding and is always rejected.

Decision table (evaluated in order):
  1. precision > 75                               -> PrecisionParseError
  2. scale > target                               -> DecimalRoundingError
  3. scale < target and precision + (target - scale) <= 75
                                                  -> widen to target
  4. precision + target > 75 and target > scale   -> PrecisionParseError
  5. otherwise                                    -> decode at own scale
"""

from __future__ import annotations

from typing import Tuple, Type

from .constants import MAX_SUPPORTED_PRECISION
from .exc import DecimalRoundingError, PrecisionParseError
from .limbs import Limbs, Sign, decimal_string_to_scaled_limbs
from .literal import DecimalLiteralLike
from .scalar import Curve25519Scalar, S

# Debug printing control
DEBUG_MATCHING = False

def _dbg(msg: str) -> None:
    if DEBUG_MATCHING:
        print(msg)


def get_limbs_and_sign(d: DecimalLiteralLike, scale: int) -> Tuple[Limbs, Sign]:
    """Decide how to bring literal `d` to `scale` and decode it into limbs."""
    precision = d.precision()
    d_scale = d.scale()
    _dbg(f"match: literal={d.value()!r} p={precision} s={d_scale} target={scale}")

    if precision > MAX_SUPPORTED_PRECISION:
        raise PrecisionParseError(
            "Error while attempting decimal match: max precision exceeded"
        )
    # Scaling down is lossy, akin to rounding.
    if d_scale > scale:
        raise DecimalRoundingError(
            f"matching decimal would cause precision overflow: incoming scale = {d_scale} "
            f"is greater than target scale = {scale}"
        )
    if d_scale < scale and precision + (scale - d_scale) <= MAX_SUPPORTED_PRECISION:
        return decimal_string_to_scaled_limbs(d.value(), d_scale, scale)
    if precision + scale > MAX_SUPPORTED_PRECISION and scale > d_scale:
        raise PrecisionParseError(
            f"Scaling factor {precision + scale} exceeds maximum allowed precision"
        )
    return decimal_string_to_scaled_limbs(d.value(), d_scale, None)


def match_decimal(
    d: DecimalLiteralLike,
    scale: int,
    scalar_cls: Type[S] = Curve25519Scalar,  # type: ignore[assignment]
) -> S:
    """Return literal `d` as a signed scalar at `scale`.

    Raises PrecisionParseError or DecimalRoundingError per the decision table.
    """
    limbs, sign = get_limbs_and_sign(d, scale)
    scalar = scalar_cls.from_limbs(limbs)
    if sign is Sign.MINUS:
        return -scalar
    return scalar


__all__ = [
    "get_limbs_and_sign",
    "match_decimal",
]
