"""
Decimal values over a scalar field: value * 10^-scale with a bounded precision.

- Decimal is immutable; every operation returns a new value.
- Only widening (scale increase) is allowed, and only with enough precision
  headroom. Anything that would discard a digit raises DecimalRoundingError.
- scale_scalar multiplies by 10 in the field; it never detects wraparound.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Type

from .constants import I64_MIN_PRECISION, I128_MIN_PRECISION
from .exc import DecimalRoundingError
from .precision import Precision
from .scalar import Curve25519Scalar, S


def scale_scalar(s: S, scale: int) -> S:
    """Return s * 10^scale. Negative scaling is not allowed; overflow is not checked."""
    if scale < 0:
        raise DecimalRoundingError("Scale factor must be non-negative")
    ten = type(s).from_i64(10)
    res = s
    for _ in range(scale):
        res = res * ten
    return res


def _check_int_headroom(precision: Precision, scale: int, minimal: int) -> None:
    raw_precision = precision.value()
    if raw_precision < minimal:
        raise DecimalRoundingError(f"Precision must be at least {minimal}")
    if scale < 0 or raw_precision < minimal + scale:
        raise DecimalRoundingError("Can not scale down a decimal")


@dataclass(frozen=True)
class Decimal(Generic[S]):
    """Decimal with a scalar raw value, a Precision and a non-negative scale."""
    value: S
    precision: Precision
    scale: int

    @classmethod
    def new(cls, value: S, precision: Precision, scale: int) -> "Decimal[S]":
        return cls(value, precision, scale)

    def with_precision_and_scale(self, new_precision: Precision, new_scale: int) -> "Decimal[S]":
        """Widen to (new_precision, new_scale).

        Fails with DecimalRoundingError if the scale would shrink or the new
        precision cannot hold the extra digits.
        """
        scale_factor = new_scale - self.scale
        if scale_factor < 0 or new_precision.value() < self.precision.value() + scale_factor:
            raise DecimalRoundingError(
                f"Cannot rescale decimal (p={self.precision.value()}, s={self.scale}) "
                f"to (p={new_precision.value()}, s={new_scale})"
            )
        scaled_value = scale_scalar(self.value, scale_factor)
        return Decimal(scaled_value, new_precision, new_scale)

    @classmethod
    def from_i64(
        cls,
        value: int,
        precision: Precision,
        scale: int,
        scalar_cls: Type[S] = Curve25519Scalar,  # type: ignore[assignment]
    ) -> "Decimal[S]":
        """Decimal holding an i64 widened to `scale` (precision >= 19 + scale)."""
        _check_int_headroom(precision, scale, I64_MIN_PRECISION)
        scaled_value = scale_scalar(scalar_cls.from_i64(value), scale)
        return cls(scaled_value, precision, scale)

    @classmethod
    def from_i128(
        cls,
        value: int,
        precision: Precision,
        scale: int,
        scalar_cls: Type[S] = Curve25519Scalar,  # type: ignore[assignment]
    ) -> "Decimal[S]":
        """Decimal holding an i128 widened to `scale` (precision >= 39 + scale)."""
        _check_int_headroom(precision, scale, I128_MIN_PRECISION)
        scaled_value = scale_scalar(scalar_cls.from_i128(value), scale)
        return cls(scaled_value, precision, scale)


__all__ = [
    "scale_scalar",
    "Decimal",
]
