"""
Decimal text to fixed 4x64-bit limbs.

The magnitude of a decimal digit string (point removed) is returned as four
little-endian 64-bit words together with its sign. Widening to a target scale
appends '0' digits to the fractional part, which is exact and avoids any
multiplication in the field.

Digits beyond 256 bits are truncated; with at most MAX_SUPPORTED_PRECISION
digits the magnitude always fits (10^75 < 2^250).
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Sequence, Tuple

from .constants import LIMB_BITS, LIMB_COUNT, LIMB_MASK, MAX_SUPPORTED_PRECISION
from .literal import split_literal

# Debug printing control
DEBUG_LIMBS = False

def _dbg(msg: str) -> None:
    if DEBUG_LIMBS:
        print(msg)


Limbs = Tuple[int, int, int, int]


class Sign(IntEnum):
    """Sign of a decoded magnitude; zero has NO_SIGN."""
    MINUS = -1
    NO_SIGN = 0
    PLUS = 1


def int_to_limbs(magnitude: int) -> Limbs:
    """Split a non-negative int into exactly four little-endian words (truncating)."""
    if magnitude < 0:
        raise ValueError("int_to_limbs expects a non-negative magnitude")
    return tuple((magnitude >> (LIMB_BITS * i)) & LIMB_MASK for i in range(LIMB_COUNT))  # type: ignore[return-value]


def limbs_to_int(limbs: Sequence[int]) -> int:
    """Inverse of int_to_limbs."""
    acc = 0
    for i, limb in enumerate(limbs):
        acc |= limb << (LIMB_BITS * i)
    return acc


#: Digits converted per int() call; stays below the interpreter's int-string limit.
_PARSE_CHUNK = 4000
_MAGNITUDE_MASK = (1 << (LIMB_BITS * LIMB_COUNT)) - 1


def _parse_truncated(digits: str) -> int:
    """Parse a digit string of any length, keeping only its low 256 bits."""
    acc = 0
    for i in range(0, len(digits), _PARSE_CHUNK):
        chunk = digits[i:i + _PARSE_CHUNK]
        acc = (acc * 10 ** len(chunk) + int(chunk)) & _MAGNITUDE_MASK
    return acc


def zeros_to_append(digit_count: int, source_scale: int, target_scale: Optional[int]) -> int:
    """Number of '0' digits needed to move `source_scale` up to `target_scale`.

    Clamped to [0, MAX_SUPPORTED_PRECISION - digit_count]; None means none.
    """
    if target_scale is None:
        return 0
    wanted = max(target_scale - source_scale, 0)
    room = max(MAX_SUPPORTED_PRECISION - digit_count, 0)
    return min(wanted, room)


def decimal_string_to_scaled_limbs(
    text: str,
    source_scale: int,
    target_scale: Optional[int] = None,
) -> Tuple[Limbs, Sign]:
    """Parse `-?digits(.digits)?` into (limbs, sign), optionally widened to `target_scale`.

    Examples:
        >>> decimal_string_to_scaled_limbs("123.45", 2, 3)
        ((123450, 0, 0, 0), <Sign.PLUS: 1>)
        >>> decimal_string_to_scaled_limbs("-123.45", 2)
        ((12345, 0, 0, 0), <Sign.MINUS: -1>)

    Raises DecimalLiteralError for malformed text.
    """
    negative, int_part, frac_part = split_literal(text)
    digits = int_part + frac_part
    append = zeros_to_append(len(digits), source_scale, target_scale)
    _dbg(f"limbs: text={text!r} source_scale={source_scale} target={target_scale} append={append}")

    magnitude = _parse_truncated(digits + "0" * append)
    if not digits.strip("0"):
        sign = Sign.NO_SIGN
    elif negative:
        sign = Sign.MINUS
    else:
        sign = Sign.PLUS
    limbs = int_to_limbs(magnitude)
    _dbg(f"limbs: magnitude={magnitude} -> {limbs}, sign={sign.name}")
    return limbs, sign


__all__ = [
    "Limbs",
    "Sign",
    "int_to_limbs",
    "limbs_to_int",
    "zeros_to_append",
    "decimal_string_to_scaled_limbs",
]
