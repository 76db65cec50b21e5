"""
Owned columns: a closed set of typed value sequences.

Each variant is a frozen dataclass holding a tuple of values; `OwnedColumn`
is their union. Conversions from scalars dispatch over `ColumnKind` and end
in an explicit failure, so a new kind cannot be silently ignored.

Decimal75 columns carry (precision, scale, scalars). The column is where a
declared precision is re-validated against the values it actually holds.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence, Tuple, Union

from .constants import (
    I8_MIN, I8_MAX,
    I16_MIN, I16_MAX,
    I32_MIN, I32_MAX,
    I64_MIN, I64_MAX,
    I128_MIN, I128_MAX,
)
from .decimals import Decimal
from .exc import ColumnError, DecimalRoundingError, ScalarConversionError, TypeCastError
from .literal import DecimalLiteralLike
from .matching import match_decimal
from .precision import Precision
from .scalar import Curve25519Scalar


# ---------------------------------------------------------------------------
# Column types
# ---------------------------------------------------------------------------

class ColumnKind(Enum):
    BOOLEAN = "BOOLEAN"
    TINYINT = "TINYINT"
    SMALLINT = "SMALLINT"
    INT = "INT"
    BIGINT = "BIGINT"
    INT128 = "INT128"
    VARCHAR = "VARCHAR"
    DECIMAL75 = "DECIMAL75"
    SCALAR = "SCALAR"


@dataclass(frozen=True)
class ColumnType:
    """Column type tag; DECIMAL75 carries (precision, scale), other kinds carry nothing."""
    kind: ColumnKind
    precision: Optional[Precision] = None
    scale: Optional[int] = None

    def __post_init__(self):
        if self.kind is ColumnKind.DECIMAL75:
            if self.precision is None or self.scale is None:
                raise ColumnError("DECIMAL75 column type requires precision and scale")
            if self.scale < 0:
                raise ColumnError("negative scale is not supported")
        elif self.precision is not None or self.scale is not None:
            raise ColumnError(f"{self.kind.value} column type takes no precision/scale")

    @classmethod
    def decimal75(cls, precision: Precision, scale: int) -> "ColumnType":
        return cls(ColumnKind.DECIMAL75, precision, scale)

    def __str__(self) -> str:
        if self.kind is ColumnKind.DECIMAL75:
            return f"DECIMAL75({self.precision.value()}, {self.scale})"
        return self.kind.value


# ---------------------------------------------------------------------------
# Column variants
# ---------------------------------------------------------------------------

class _ColumnOps:
    """Shared behaviour for all variants (each defines `values` and `KIND`)."""

    KIND: ColumnKind

    def __len__(self) -> int:
        return len(self.values)

    def is_empty(self) -> bool:
        return not self.values

    def slice(self, start: int, end: int):
        return replace(self, values=self.values[start:end])

    def column_type(self) -> ColumnType:
        return ColumnType(self.KIND)


@dataclass(frozen=True)
class BooleanColumn(_ColumnOps):
    values: Tuple[bool, ...]
    KIND = ColumnKind.BOOLEAN


@dataclass(frozen=True)
class TinyIntColumn(_ColumnOps):
    values: Tuple[int, ...]
    KIND = ColumnKind.TINYINT


@dataclass(frozen=True)
class SmallIntColumn(_ColumnOps):
    values: Tuple[int, ...]
    KIND = ColumnKind.SMALLINT


@dataclass(frozen=True)
class IntColumn(_ColumnOps):
    values: Tuple[int, ...]
    KIND = ColumnKind.INT


@dataclass(frozen=True)
class BigIntColumn(_ColumnOps):
    values: Tuple[int, ...]
    KIND = ColumnKind.BIGINT


@dataclass(frozen=True)
class Int128Column(_ColumnOps):
    values: Tuple[int, ...]
    KIND = ColumnKind.INT128


@dataclass(frozen=True)
class VarCharColumn(_ColumnOps):
    values: Tuple[str, ...]
    KIND = ColumnKind.VARCHAR


@dataclass(frozen=True)
class ScalarColumn(_ColumnOps):
    values: Tuple[Curve25519Scalar, ...]
    KIND = ColumnKind.SCALAR


@dataclass(frozen=True)
class Decimal75Column(_ColumnOps):
    """Decimal column: every value is a scalar at the shared (precision, scale)."""
    precision: Precision
    scale: int
    values: Tuple[Curve25519Scalar, ...]
    KIND = ColumnKind.DECIMAL75

    def column_type(self) -> ColumnType:
        return ColumnType.decimal75(self.precision, self.scale)

    def decimals(self) -> Iterator[Decimal]:
        for v in self.values:
            yield Decimal(v, self.precision, self.scale)

    def validate_precision(self) -> None:
        """Check every value has at most `precision` significant digits."""
        bound = 10 ** self.precision.value()
        for i, v in enumerate(self.values):
            if abs(v.to_signed_int()) >= bound:
                raise DecimalRoundingError(
                    f"value at row {i} exceeds declared precision {self.precision.value()}"
                )

    @classmethod
    def from_decimals(cls, decimals: Iterable[Decimal]) -> "Decimal75Column":
        """Collect decimals sharing one (precision, scale); an empty input is rejected."""
        items = list(decimals)
        if not items:
            raise ColumnError("cannot infer precision/scale from an empty sequence")
        precision, scale = items[0].precision, items[0].scale
        for d in items[1:]:
            if d.precision != precision or d.scale != scale:
                raise ColumnError(
                    f"mixed decimal types: ({precision.value()}, {scale}) vs "
                    f"({d.precision.value()}, {d.scale})"
                )
        return cls(precision, scale, tuple(d.value for d in items))


OwnedColumn = Union[
    BooleanColumn,
    TinyIntColumn,
    SmallIntColumn,
    IntColumn,
    BigIntColumn,
    Int128Column,
    VarCharColumn,
    Decimal75Column,
    ScalarColumn,
]


# ---------------------------------------------------------------------------
# Conversions from scalars
# ---------------------------------------------------------------------------

def _ints_in_range(scalars: Sequence[Curve25519Scalar], lo: int, hi: int) -> Tuple[int, ...]:
    out = []
    for s in scalars:
        v = s.to_signed_int()
        if v < lo or v > hi:
            raise ScalarConversionError("Overflow in scalar conversions")
        out.append(v)
    return tuple(out)


def try_from_scalars(scalars: Sequence[Curve25519Scalar], column_type: ColumnType) -> OwnedColumn:
    """Build a column of `column_type` from raw scalars (signed interpretation)."""
    kind = column_type.kind
    if kind is ColumnKind.BOOLEAN:
        return BooleanColumn(tuple(v == 1 for v in _ints_in_range(scalars, 0, 1)))
    if kind is ColumnKind.TINYINT:
        return TinyIntColumn(_ints_in_range(scalars, I8_MIN, I8_MAX))
    if kind is ColumnKind.SMALLINT:
        return SmallIntColumn(_ints_in_range(scalars, I16_MIN, I16_MAX))
    if kind is ColumnKind.INT:
        return IntColumn(_ints_in_range(scalars, I32_MIN, I32_MAX))
    if kind is ColumnKind.BIGINT:
        return BigIntColumn(_ints_in_range(scalars, I64_MIN, I64_MAX))
    if kind is ColumnKind.INT128:
        return Int128Column(_ints_in_range(scalars, I128_MIN, I128_MAX))
    if kind is ColumnKind.SCALAR:
        return ScalarColumn(tuple(scalars))
    if kind is ColumnKind.DECIMAL75:
        return Decimal75Column(column_type.precision, column_type.scale, tuple(scalars))
    if kind is ColumnKind.VARCHAR:
        raise TypeCastError(ColumnType(ColumnKind.SCALAR), column_type)
    raise ColumnError(f"unhandled column kind: {kind}")


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def decimal75(precision: int, scale: int, values: Iterable[int]) -> Decimal75Column:
    """Decimal75 column from raw integer values (already at `scale`).

    Example:
        decimal75(12, 1, [1, 2, 3])  ->  0.1, 0.2, 0.3 at (12, 1)
    """
    return Decimal75Column(
        Precision.new(precision),
        scale,
        tuple(Curve25519Scalar.from_int(v) for v in values),
    )


def decimal75_from_literals(
    literals: Iterable[DecimalLiteralLike],
    precision: Precision,
    scale: int,
    validate: bool = True,
) -> Decimal75Column:
    """Match each literal to `scale` and collect the results.

    Rows are independent; the first failing row's error propagates unchanged.
    With `validate`, rows wider than `precision` raise DecimalRoundingError.
    """
    values = tuple(match_decimal(lit, scale, Curve25519Scalar) for lit in literals)
    col = Decimal75Column(precision, scale, values)
    if validate:
        col.validate_precision()
    return col


__all__ = [
    "ColumnKind",
    "ColumnType",
    "BooleanColumn",
    "TinyIntColumn",
    "SmallIntColumn",
    "IntColumn",
    "BigIntColumn",
    "Int128Column",
    "VarCharColumn",
    "ScalarColumn",
    "Decimal75Column",
    "OwnedColumn",
    "try_from_scalars",
    "decimal75",
    "decimal75_from_literals",
]
