import pytest

from bitdecimal.arithmetic import (
    add,
    align_scales,
    bank_round,
    div,
    floor,
    is_less_magnitude,
    mod,
    mul,
    negate,
    round_decimal,
    sub,
    truncate,
)
from bitdecimal.core import (
    ConversionError,
    Decimal128,
    DecimalDivisionByZero,
    ValueTooLargeError,
    ValueTooSmallError,
)

NEG = 0x80000000
MAXW = 0xFFFFFFFF


def d(low, flags=0, mid=0, high=0):
    return Decimal128(low=low, mid=mid, high=high, flags=flags)


def words(value):
    return (value.low, value.mid, value.high, value.flags)


@pytest.mark.parametrize(
    "a,b,expected",
    [(10, 5, 15), (5, 5, 10), (5, 3, 8), (0, 0, 0), (8, 2, 10), (2, 8, 10)],
)
def test_add_positive(a, b, expected):
    assert words(add(d(a), d(b))) == (expected, 0, 0, 0)


def test_add_mixed_signs():
    assert words(add(d(15, NEG), d(2))) == (13, 0, 0, NEG)
    assert words(add(d(15), d(15, NEG))) == (0, 0, 0, 0)
    assert words(add(d(8, NEG), d(2))) == (6, 0, 0, NEG)
    assert words(add(d(2, NEG), d(8))) == (6, 0, 0, 0)


def test_add_overflow():
    with pytest.raises(ValueTooLargeError):
        add(d(MAXW, 0, MAXW, MAXW), d(1))
    with pytest.raises(ValueTooSmallError):
        add(d(MAXW, NEG, MAXW, MAXW), d(2, NEG))


def test_add_different_scales():
    assert words(add(d(15, 1 << 16), d(2))) == (35, 0, 0, 1 << 16)


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (d(2, NEG), d(2), (4, 0, 0, NEG)),
        (d(2), d(2, NEG), (4, 0, 0, 0)),
        (d(2, NEG), d(2, NEG), (0, 0, 0, 0)),
        (d(2), d(2), (0, 0, 0, 0)),
        (d(8), d(2), (6, 0, 0, 0)),
        (d(2), d(8), (6, 0, 0, NEG)),
        (d(8, NEG), d(2), (10, 0, 0, NEG)),
        (d(2, NEG), d(8), (10, 0, 0, NEG)),
        (d(8, NEG), d(2, NEG), (6, 0, 0, NEG)),
        (d(2, NEG), d(8, NEG), (6, 0, 0, 0)),
    ],
)
def test_sub(a, b, expected):
    assert words(sub(a, b)) == expected


def test_sub_negative_minus_positive_overflow():
    with pytest.raises(ValueTooSmallError):
        sub(d(MAXW, NEG, MAXW, MAXW), d(1))


def test_mul_cases():
    assert words(mul(d(50, NEG), d(32, 1 << 16))) == (1600, 0, 0, 2147549184)
    assert words(mul(d(2), d(23))) == (46, 0, 0, 0)
    assert words(mul(d(2, NEG), d(23))) == (46, 0, 0, NEG)
    assert words(mul(d(2, NEG), d(23, NEG))) == (46, 0, 0, 0)
    assert words(mul(d(2, 2 << 16), d(23, 3 << 16))) == (46, 0, 0, 327680)
    assert words(mul(d(155), d(1))) == (155, 0, 0, 0)


def test_mul_overflow_and_scale():
    with pytest.raises(ValueTooSmallError):
        mul(d(MAXW, NEG, MAXW, MAXW), d(23))
    with pytest.raises(ValueTooLargeError):
        mul(d(MAXW, 0, MAXW, MAXW), d(23))
    with pytest.raises(ValueTooSmallError):
        mul(d(1, 15 << 16), d(1, 14 << 16))


def test_div():
    assert words(div(d(2, NEG), d(2))) == (1, 0, 0, NEG)
    assert words(div(d(2), d(2, NEG))) == (1, 0, 0, NEG)
    assert words(div(d(2, NEG), d(2, NEG))) == (1, 0, 0, 0)
    assert words(div(d(7), d(2))) == (3, 0, 0, 0)


def test_div_by_zero():
    with pytest.raises(DecimalDivisionByZero):
        div(d(2, NEG), d(0))
    with pytest.raises(ZeroDivisionError):
        div(d(2), d(0))


def test_mod():
    assert words(mod(d(7), d(3))) == (1, 0, 0, 0)
    with pytest.raises(DecimalDivisionByZero):
        mod(d(7), d(0))


def test_negate():
    assert negate(d(12, NEG, 12, 12)).flags == 0
    assert negate(d(12, 0, 12, 12)).flags == NEG
    assert words(negate(d(2))) == (2, 0, 0, NEG)


def test_truncate():
    assert words(truncate(d(342, NEG | (2 << 16)))) == (3, 0, 0, NEG)
    assert words(truncate(d(7, 0, 7, 7))) == (7, 7, 7, 0)
    with pytest.raises(ConversionError):
        truncate(d(1, 29 << 16))


def test_floor():
    assert words(floor(d(34, 1 << 16))) == (3, 0, 0, 0)
    assert words(floor(d(34, NEG | (1 << 16)))) == (4, 0, 0, NEG)
    assert words(floor(d(2))) == (2, 0, 0, 0)


@pytest.mark.parametrize(
    "value,expected",
    [
        (d(362, 2 << 16), (4, 0, 0, 0)),
        (d(25, NEG | (1 << 16)), (3, 0, 0, NEG)),
        (d(26, 1 << 16), (3, 0, 0, 0)),
        (d(115, 1 << 16), (12, 0, 0, 0)),
        (d(118, 1 << 16), (12, 0, 0, 0)),
        (d(7, 0, 7, 7), (7, 7, 7, 0)),
    ],
)
def test_round(value, expected):
    assert words(round_decimal(value)) == expected


def test_bank_round():
    assert words(bank_round(d(27, 1 << 16))) == (3, 0, 0, 0)
    assert words(bank_round(d(23, 1 << 16))) == (2, 0, 0, 0)
    assert words(bank_round(d(27, NEG | (1 << 16)))) == (3, 0, 0, NEG)


def test_align_scales():
    first, second, scale = align_scales(d(15, 1 << 16), d(2))
    assert scale == 1
    assert (first.mantissa, second.mantissa) == (15, 20)
    assert first.scale == second.scale == 1


def test_is_less_magnitude():
    assert is_less_magnitude(d(2), d(8))
    assert not is_less_magnitude(d(8), d(2))
    assert is_less_magnitude(d(2, NEG), d(8, NEG))
    assert is_less_magnitude(d(8, NEG), d(2))
    assert not is_less_magnitude(d(2), d(8, NEG))