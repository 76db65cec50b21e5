"""
Scalar field elements.

- `Scalar` is the capability set the decimal layer relies on:
  ring arithmetic (+, -, *, unary -), construction from i64/i128 and from a
  fixed 4-limb little-endian magnitude, and the constants ZERO/ONE/MAX_SIGNED.
- `Curve25519Scalar` is the concrete prime field used by default. Values are
  stored canonically in [0, order); anything above MAX_SIGNED reads as negative.

Arithmetic wraps modulo the field order. No overflow is reported: precision
bookkeeping in the decimal layer is the only guard against semantic overflow.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Protocol, Sequence, Tuple, TypeVar

from .constants import (
    CURVE25519_ORDER,
    CURVE25519_MAX_SIGNED,
    LIMB_BITS,
    LIMB_COUNT,
    LIMB_MASK,
    I64_MIN,
    I64_MAX,
    I128_MIN,
    I128_MAX,
)
from .exc import ScalarDomainError

S = TypeVar("S", bound="Scalar")


class Scalar(Protocol):
    """Capability set required from a field element type."""

    ZERO: ClassVar["Scalar"]
    ONE: ClassVar["Scalar"]
    MAX_SIGNED: ClassVar["Scalar"]

    @classmethod
    def from_i64(cls: type[S], value: int) -> S: ...

    @classmethod
    def from_i128(cls: type[S], value: int) -> S: ...

    @classmethod
    def from_limbs(cls: type[S], limbs: Sequence[int]) -> S: ...

    def __add__(self: S, other: S) -> S: ...

    def __sub__(self: S, other: S) -> S: ...

    def __mul__(self: S, other: S) -> S: ...

    def __neg__(self: S) -> S: ...


def _check_range(value: int, lo: int, hi: int, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ScalarDomainError(f"{what} expects an int, got {value!r}")
    if value < lo or value > hi:
        raise ScalarDomainError(f"{what} out of range: {value}")


@dataclass(frozen=True)
class Curve25519Scalar:
    """Element of the Curve25519 scalar field, canonical value in [0, order)."""
    value: int

    ORDER: ClassVar[int] = CURVE25519_ORDER
    ZERO: ClassVar["Curve25519Scalar"]
    ONE: ClassVar["Curve25519Scalar"]
    MAX_SIGNED: ClassVar["Curve25519Scalar"]

    def __post_init__(self):
        if not 0 <= self.value < CURVE25519_ORDER:
            raise ScalarDomainError("Curve25519Scalar value must be canonical; use from_int")

    # ------------- constructors -------------

    @classmethod
    def from_int(cls, value: int) -> "Curve25519Scalar":
        """Reduce an arbitrary Python int into the field (negatives wrap)."""
        return cls(value % CURVE25519_ORDER)

    @classmethod
    def from_i64(cls, value: int) -> "Curve25519Scalar":
        _check_range(value, I64_MIN, I64_MAX, "from_i64")
        return cls.from_int(value)

    @classmethod
    def from_i128(cls, value: int) -> "Curve25519Scalar":
        _check_range(value, I128_MIN, I128_MAX, "from_i128")
        return cls.from_int(value)

    @classmethod
    def from_limbs(cls, limbs: Sequence[int]) -> "Curve25519Scalar":
        """Build from exactly four little-endian 64-bit words, reducing mod order."""
        if len(limbs) != LIMB_COUNT:
            raise ScalarDomainError(f"expected {LIMB_COUNT} limbs, got {len(limbs)}")
        acc = 0
        for i, limb in enumerate(limbs):
            _check_range(limb, 0, LIMB_MASK, "limb")
            acc |= limb << (LIMB_BITS * i)
        return cls.from_int(acc)

    # ------------- conversions -------------

    def to_signed_int(self) -> int:
        """Signed view: values above MAX_SIGNED map to value - order."""
        if self.value > CURVE25519_MAX_SIGNED:
            return self.value - CURVE25519_ORDER
        return self.value

    def to_limbs(self) -> Tuple[int, int, int, int]:
        v = self.value
        return tuple((v >> (LIMB_BITS * i)) & LIMB_MASK for i in range(LIMB_COUNT))  # type: ignore[return-value]

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.value == 0

    def is_negative(self) -> bool:
        return self.value > CURVE25519_MAX_SIGNED

    # ------------- arithmetic (mod order) -------------

    def __add__(self, other: "Curve25519Scalar") -> "Curve25519Scalar":
        if not isinstance(other, Curve25519Scalar):
            return NotImplemented
        return Curve25519Scalar((self.value + other.value) % CURVE25519_ORDER)

    def __sub__(self, other: "Curve25519Scalar") -> "Curve25519Scalar":
        if not isinstance(other, Curve25519Scalar):
            return NotImplemented
        return Curve25519Scalar((self.value - other.value) % CURVE25519_ORDER)

    def __mul__(self, other: "Curve25519Scalar") -> "Curve25519Scalar":
        if not isinstance(other, Curve25519Scalar):
            return NotImplemented
        return Curve25519Scalar((self.value * other.value) % CURVE25519_ORDER)

    def __neg__(self) -> "Curve25519Scalar":
        return Curve25519Scalar((-self.value) % CURVE25519_ORDER)

    def __repr__(self) -> str:
        return f"Curve25519Scalar({self.to_signed_int()})"


Curve25519Scalar.ZERO = Curve25519Scalar(0)
Curve25519Scalar.ONE = Curve25519Scalar(1)
Curve25519Scalar.MAX_SIGNED = Curve25519Scalar(CURVE25519_MAX_SIGNED)


__all__ = [
    "Scalar",
    "Curve25519Scalar",
]
