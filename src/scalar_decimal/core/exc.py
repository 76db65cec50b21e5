"""
Core exception types for scalar_decimal.core.

These are dependency-free and may be imported by all core modules.
Every failure here is a deterministic function of its inputs: retrying with
the same arguments cannot succeed.
"""

__all__ = [
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


class DecimalError(Exception):
    """Root of every error raised by scalar_decimal."""
    pass


class InvalidPrecisionError(DecimalError, ValueError):
    """Raised when a precision is not an integer in 1..=MAX_SUPPORTED_PRECISION."""
    pass


class ScalarDomainError(DecimalError, ValueError):
    """Raised when a machine integer or limb falls outside its declared width."""
    pass


class ConversionError(DecimalError):
    """Base class for failures while converting literals/decimals into scalars."""
    pass


class PrecisionParseError(ConversionError):
    """Raised when a source precision, or a requested widening, exceeds the domain maximum."""
    pass


class DecimalRoundingError(ConversionError):
    """Raised when an operation would have to discard digits (scale decrease or no headroom)."""
    pass


class DecimalLiteralError(ConversionError):
    """Raised when literal text does not match `-?digits(.digits)?`."""
    pass


class ColumnError(DecimalError):
    """Base class for owned column construction/conversion failures."""
    pass


class ScalarConversionError(ColumnError):
    """Raised when a scalar does not fit the target column's value type."""
    pass


class TypeCastError(ColumnError):
    """Raised when scalars cannot be cast into the requested column type.

    Attributes
    ----------
    from_type : Any
        Column type the values come from.
    to_type : Any
        Column type that was requested.
    """

    def __init__(self, from_type, to_type):
        super().__init__(f"Cannot cast column of type {from_type} to {to_type}")
        self.from_type = from_type
        self.to_type = to_type
