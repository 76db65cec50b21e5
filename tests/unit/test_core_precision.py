import dataclasses

import pytest

from scalar_decimal.core import MAX_SUPPORTED_PRECISION, Precision, InvalidPrecisionError


@pytest.mark.parametrize("v", [1, 2, 19, 39, 74, MAX_SUPPORTED_PRECISION])
def test_precision_accepts_in_range(v):
    print(f"[precision-ok] Precision.new({v}) -> expect value() == {v}")
    p = Precision.new(v)
    assert p.value() == v
    assert Precision(v) == p


@pytest.mark.parametrize("v", [0, 76, 255, -1, 1000])
def test_precision_rejects_out_of_range(v):
    print(f"[precision-range] Precision.new({v}) -> expect InvalidPrecisionError")
    with pytest.raises(InvalidPrecisionError):
        Precision.new(v)


@pytest.mark.parametrize("v", [True, 3.0, "3", None])
def test_precision_rejects_non_integers(v):
    print(f"[precision-type] Precision.new({v!r}) -> expect InvalidPrecisionError")
    with pytest.raises(InvalidPrecisionError):
        Precision.new(v)  # type: ignore[arg-type]


def test_precision_serialise_round_trip():
    print("[precision-serde] serialize(42) -> 42; deserialize(42) -> Precision(42)")
    p = Precision.new(42)
    assert p.serialize() == 42
    assert Precision.deserialize(p.serialize()) == p


@pytest.mark.parametrize("raw", [0, 76, 255, 256, -1, "12", 12.0])
def test_precision_deserialise_rejects_with_constructor_error(raw):
    print(f"[precision-deserialize] raw={raw!r} -> expect InvalidPrecisionError")
    with pytest.raises(InvalidPrecisionError):
        Precision.deserialize(raw)


def test_precision_replace_is_validated():
    print("[precision-replace] dataclasses.replace cannot bypass the bound")
    p = Precision.new(10)
    with pytest.raises(InvalidPrecisionError):
        dataclasses.replace(p, raw=76)


def test_precision_is_hashable_and_ordered():
    a, b = Precision.new(3), Precision.new(7)
    assert len({a, Precision.new(3), b}) == 2
    assert a < b
