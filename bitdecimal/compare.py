"""Comparison of two decimals after bringing them to a common scale."""

from __future__ import annotations

from collections.abc import Iterator

from .core import Decimal128, normalize


def _word_pairs(first: Decimal128, second: Decimal128) -> Iterator[tuple[int, int]]:
    """Yield matching words of both values, most significant (flags) first."""
    yield first.flags, second.flags
    yield first.high, second.high
    yield first.mid, second.mid
    yield first.low, second.low


def is_equal(first: Decimal128, second: Decimal128) -> bool:
    """True when both values have the same sign, scale and mantissa after normalizing."""
    first, second, _ = normalize(first, second)
    return first == second


def is_not_equal(first: Decimal128, second: Decimal128) -> bool:
    """True when the values are not equal."""
    return not is_equal(first, second)


def is_greater(first: Decimal128, second: Decimal128) -> bool:
    """True when ``first`` is greater than ``second``.

    Values of different sign are ordered by sign alone. Otherwise the words
    are scanned from the most significant down and the scan stops at the
    first pair that makes the answer true.
    """
    first, second, _ = normalize(first, second)
    if first.negative != second.negative:
        return not first.negative
    result = False
    for a, b in _word_pairs(first, second):
        if a > b:
            result = not first.negative
        elif a < b:
            result = first.negative
        if result:
            break
    return result


def is_less(first: Decimal128, second: Decimal128) -> bool:
    """True when ``first`` is less than ``second``.

    Values of different sign are ordered by sign alone. Otherwise the words
    are scanned from the most significant down and the scan stops at the
    first pair that makes the answer true.
    """
    first, second, _ = normalize(first, second)
    if first.negative != second.negative:
        return first.negative
    result = False
    for a, b in _word_pairs(first, second):
        if a < b:
            result = not first.negative
        elif a > b:
            result = first.negative
        if result:
            break
    return result


def is_greater_or_equal(first: Decimal128, second: Decimal128) -> bool:
    """True when ``first`` is greater than or equal to ``second``."""
    first, second, _ = normalize(first, second)
    return is_greater(first, second) or is_equal(first, second)


def is_less_or_equal(first: Decimal128, second: Decimal128) -> bool:
    """True when ``first`` is less than or equal to ``second``."""
    first, second, _ = normalize(first, second)
    return is_less(first, second) or is_equal(first, second)