"""
Limit-enforced decimal precision.

A Precision is the declared count of significant decimal digits of a value,
bounded to 1..=MAX_SUPPORTED_PRECISION. Every construction path (direct,
`new`, `deserialize`, `dataclasses.replace`) runs the same validation in
`__post_init__`, so no out-of-range instance is ever observable.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import MAX_SUPPORTED_PRECISION
from .exc import InvalidPrecisionError


@dataclass(frozen=True, order=True)
class Precision:
    """Bounded precision in 1..=75 (serialised as a plain 8-bit integer)."""
    raw: int

    def __post_init__(self):
        # bool is an int subclass; True would otherwise slip through as 1.
        if isinstance(self.raw, bool) or not isinstance(self.raw, int):
            raise InvalidPrecisionError(f"Precision must be an integer, got {self.raw!r}")
        if not 1 <= self.raw <= MAX_SUPPORTED_PRECISION:
            raise InvalidPrecisionError(
                f"Precision must be larger than zero and less than {MAX_SUPPORTED_PRECISION + 1}"
            )

    # ------------- constructors -------------

    @classmethod
    def new(cls, value: int) -> "Precision":
        return cls(value)

    @classmethod
    def deserialize(cls, raw: object) -> "Precision":
        """Rebuild a Precision from its serialised form.

        The serialised form is a u8; anything else, or an in-range-u8 that
        violates the precision bound, is rejected with InvalidPrecisionError
        (the same error as the constructor).
        """
        if isinstance(raw, bool) or not isinstance(raw, int) or not 0 <= raw <= 0xFF:
            raise InvalidPrecisionError(f"Precision must deserialize from a u8, got {raw!r}")
        return cls(raw)

    # ------------- accessors -------------

    def value(self) -> int:
        return self.raw

    def serialize(self) -> int:
        return self.raw

    def __int__(self) -> int:
        return self.raw


__all__ = [
    "Precision",
]
