import pytest

from scalar_decimal.core import (
    MAX_SUPPORTED_PRECISION,
    Curve25519Scalar,
    DecimalLiteral,
    DecimalRoundingError,
    PrecisionParseError,
    Sign,
    get_limbs_and_sign,
    match_decimal,
)


def _scalar(v: int) -> Curve25519Scalar:
    return Curve25519Scalar.from_int(v)


# -----------------------------
# Exact matches and widening
# -----------------------------

@pytest.mark.parametrize(
    "text,target,limbs,sign",
    [
        ("123.45", 2, (12345, 0, 0, 0), Sign.PLUS),
        ("123.45", 3, (123450, 0, 0, 0), Sign.PLUS),
        ("12345", 2, (1234500, 0, 0, 0), Sign.PLUS),
        ("-123.45", 2, (12345, 0, 0, 0), Sign.MINUS),
    ],
)
def test_match_limbs_and_sign(lit, text, target, limbs, sign):
    print(f"[match-limbs] {text!r} at target {target} -> expect {limbs}, {sign.name}")
    got_limbs, got_sign = get_limbs_and_sign(lit(text), target)
    assert got_limbs == limbs
    assert got_sign is sign


@pytest.mark.parametrize(
    "text,target",
    [
        ("123.45", 2),
        ("123.45", 3),
        ("12345", 2),
        ("-99.99", 10),
        ("0.5", 74),
        ("-1.5", 74),
        ("1", 74),
        ("0." + "0" * 72 + "1", 74),
    ],
)
def test_widening_is_exact(lit, text, target):
    d = lit(text)
    print(f"[match-exact] {text!r} (p={d.precision()}, s={d.scale()}) at target {target}")
    assert d.precision() + (target - d.scale()) <= MAX_SUPPORTED_PRECISION
    raw = int(d.value().replace(".", ""))
    expected = _scalar(raw * 10 ** (target - d.scale()))
    assert match_decimal(d, target) == expected


def test_sign_preserved(lit):
    print("[match-sign] match('-123.45', 2) == -match('123.45', 2)")
    neg = match_decimal(lit("-123.45"), 2)
    pos = match_decimal(lit("123.45"), 2)
    assert neg == -pos
    assert neg.to_signed_int() == -12345


def test_zero_matches_to_zero(lit):
    assert match_decimal(lit("-0.00"), 5) == Curve25519Scalar.ZERO


@pytest.mark.parametrize(
    "texts,target",
    [
        (["1.5", "1.50000", "01.5"], 4),
        (["-2.25", "-2.250", "-002.25"], 6),
        (["100", "100.0"], 2),
    ],
)
def test_equal_values_match_to_equal_scalars(lit, texts, target):
    print(f"[match-equal] {texts} at target {target} -> one scalar")
    results = {match_decimal(lit(t), target) for t in texts}
    assert len(results) == 1


# -----------------------------
# Rejections
# -----------------------------

def test_cannot_scale_down(lit):
    print("[match-down] '361.0004' (s=4) at target 1 -> DecimalRoundingError")
    with pytest.raises(DecimalRoundingError):
        match_decimal(lit("361.0004"), 1)


def test_negative_target_is_a_scale_down(lit):
    with pytest.raises(DecimalRoundingError):
        match_decimal(lit("1"), -1)


@pytest.mark.parametrize("target", [1, 2, 30, 74])
def test_precision_above_max_rejected(lit, target):
    print(f"[match-p76] 76 nines at target {target} -> PrecisionParseError")
    with pytest.raises(PrecisionParseError):
        match_decimal(lit("9" * 76), target)


def test_cannot_scale_past_max_precision(lit):
    print("[match-overflow] 71-digit literal at target 30 -> PrecisionParseError")
    d = lit("1234567890" * 7 + "0.0")
    assert d.scale() == 0
    with pytest.raises(PrecisionParseError):
        get_limbs_and_sign(d, 30)


# -----------------------------
# Extrema (boundary behaviour pinned on purpose)
# -----------------------------

def test_extrema_nines(lit, nines_74):
    print("[match-extrema] 74 nines: target 1 ok, target 2 fails")
    assert match_decimal(lit(nines_74 + ".0"), 1) == _scalar(int(nines_74) * 10)
    with pytest.raises(PrecisionParseError):
        match_decimal(lit(nines_74 + ".0"), 2)
    # trailing zeros do not count towards precision
    assert match_decimal(lit(nines_74 + ".00000"), 1) == _scalar(int(nines_74) * 10)
    with pytest.raises(PrecisionParseError):
        match_decimal(lit("9" * 75 + ".1"), 2)


def test_extrema_smallest_fractions(lit):
    print("[match-extrema] smallest representable fractions at target 74")
    target = MAX_SUPPORTED_PRECISION - 1
    # leading zero counts towards precision: p=75, s=74, no widening needed
    assert match_decimal(lit("0." + "0" * 73 + "1"), target) == Curve25519Scalar.ONE
    # p=74, s=73 widens to the boundary
    assert match_decimal(lit("0." + "0" * 72 + "1"), target) == _scalar(10)
    # p=76 is out of range
    with pytest.raises(PrecisionParseError):
        match_decimal(lit("0." + "0" * 74 + "1"), target)
    # a trailing zero brings it back to p=75
    assert match_decimal(lit("0." + "0" * 73 + "10"), target) == Curve25519Scalar.ONE


def test_extrema_one(lit):
    print("[match-extrema] '1.0' at target 75 fails, at 74 gives 10^74")
    with pytest.raises(PrecisionParseError):
        match_decimal(lit("1.0"), MAX_SUPPORTED_PRECISION)
    assert match_decimal(lit("1.0"), MAX_SUPPORTED_PRECISION - 1) == _scalar(10 ** 74)


# -----------------------------
# Foreign literal types
# -----------------------------

class _RawLiteral:
    """Literal as a foreign parser might hand it over (no normalisation)."""

    def __init__(self, text: str, precision: int, scale: int) -> None:
        self._text, self._p, self._s = text, precision, scale

    def precision(self) -> int:
        return self._p

    def scale(self) -> int:
        return self._s

    def value(self) -> str:
        return self._text


def test_any_literal_like_object_is_accepted():
    print("[match-protocol] duck-typed literal '-4.2' (p=2, s=1) at target 3 -> -4200")
    assert match_decimal(_RawLiteral("-4.2", 2, 1), 3).to_signed_int() == -4200


def test_declared_precision_drives_the_decision():
    print("[match-protocol] declared p=76 is rejected even for short text")
    with pytest.raises(PrecisionParseError):
        match_decimal(_RawLiteral("1", 76, 0), 0)
