"""
Raw decimal literals.

The scale matcher consumes any object exposing `precision()`, `scale()` and
`value()` (digit text). `DecimalLiteral` is the concrete form produced from
SQL literal text:

- trailing fractional zeros do not count: "1.500" has scale 1, precision 2;
- leading digits do count, including a lone integer zero: "0.05" has precision 3;
- the text is kept with its point, in canonical form ("-0.0" becomes "0").
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Protocol

from .exc import DecimalLiteralError

#: Accepted literal syntax. No exponent, no leading '+', no separators.
LITERAL_RE = re.compile(r"(-)?([0-9]+)(?:\.([0-9]+))?")


class DecimalLiteralLike(Protocol):
    """Interface of a parsed decimal literal."""

    def precision(self) -> int: ...

    def scale(self) -> int: ...

    def value(self) -> str: ...


def split_literal(text: str):
    """Split literal text into (negative, integer_digits, fraction_digits).

    Raises DecimalLiteralError if the text is not `-?digits(.digits)?`.
    """
    if not isinstance(text, str):
        raise DecimalLiteralError(f"decimal literal must be text, got {type(text).__name__}")
    m = LITERAL_RE.fullmatch(text)
    if m is None:
        raise DecimalLiteralError(f"malformed decimal literal: {text!r}")
    return m.group(1) is not None, m.group(2), m.group(3) or ""


@dataclass(frozen=True)
class DecimalLiteral:
    """Canonical decimal literal with implied precision and scale."""
    text: str
    _precision: int = field(init=False, repr=False)
    _scale: int = field(init=False, repr=False)

    def __post_init__(self):
        negative, int_part, frac_part = split_literal(self.text)
        frac_part = frac_part.rstrip("0")
        int_part = int_part.lstrip("0") or "0"
        if int_part == "0" and not frac_part:
            negative = False
        canonical = ("-" if negative else "") + int_part + ("." + frac_part if frac_part else "")
        object.__setattr__(self, "text", canonical)
        object.__setattr__(self, "_scale", len(frac_part))
        object.__setattr__(self, "_precision", len(int_part) + len(frac_part))

    def precision(self) -> int:
        return self._precision

    def scale(self) -> int:
        return self._scale

    def value(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


__all__ = [
    "LITERAL_RE",
    "DecimalLiteralLike",
    "DecimalLiteral",
    "split_literal",
]
