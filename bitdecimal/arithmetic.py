"""Arithmetic and rounding on 128-bit decimals."""

from __future__ import annotations

from .core import (
    MANTISSA_BITS,
    MAX_SCALE,
    ConversionError,
    Decimal128,
    DecimalDivisionByZero,
    ValueTooLargeError,
    ValueTooSmallError,
)

_WORD_MASK = 0xFFFFFFFF
_MANTISSA_LIMIT = 1 << MANTISSA_BITS
# A mantissa whose high word reaches this value cannot be multiplied by ten.
_TIMES_TEN_HIGH_LIMIT = 429496730


def _build(mantissa: int, scale: int, negative: bool) -> Decimal128:
    value = Decimal128(
        low=mantissa & _WORD_MASK,
        mid=(mantissa >> 32) & _WORD_MASK,
        high=(mantissa >> 64) & _WORD_MASK,
    )
    return value.with_scale(scale).with_sign(negative)


def _overflow(negative: bool) -> ArithmeticError:
    return ValueTooSmallError("result is too small") if negative else ValueTooLargeError(
        "result is too large"
    )


def negate(value: Decimal128) -> Decimal128:
    """Return the value multiplied by -1."""
    return value.with_sign(not value.negative)


def truncate(value: Decimal128) -> Decimal128:
    """Drop the fractional digits, keeping the sign; the result has scale 0."""
    if value.scale > MAX_SCALE:
        raise ConversionError(f"scale {value.scale} exceeds {MAX_SCALE}")
    return _build(value.mantissa // 10**value.scale, 0, value.negative)


def floor(value: Decimal128) -> Decimal128:
    """Round towards negative infinity.

    A negative value always has one added to its truncated magnitude.
    """
    if not value.negative:
        return truncate(value)
    magnitude = truncate(value.with_sign(False))
    return add(magnitude, Decimal128(low=1)).with_scale(0).with_sign(True)


def round_decimal(value: Decimal128) -> Decimal128:
    """Round to the nearest integer, halves away from zero."""
    if value.scale > MAX_SCALE:
        raise ConversionError(f"scale {value.scale} exceeds {MAX_SCALE}")
    divisor = 10**value.scale
    quotient, remainder = divmod(value.mantissa, divisor)
    if value.scale and 2 * remainder >= divisor:
        quotient += 1
    return _build(quotient, 0, value.negative)


def bank_round(value: Decimal128) -> Decimal128:
    """Round to an integer, rounding up when the dropped remainder exceeds
    five units of its own leading digit."""
    if value.scale > MAX_SCALE:
        raise ConversionError(f"scale {value.scale} exceeds {MAX_SCALE}")
    quotient, remainder = divmod(value.mantissa, 10**value.scale)
    if remainder and remainder > 5 * 10 ** (len(str(remainder)) - 1):
        quotient += 1
    return _build(quotient, 0, value.negative)


def _align(higher: Decimal128, lower: Decimal128) -> tuple[Decimal128, Decimal128, int]:
    diff = higher.scale - lower.scale
    mantissa = lower.mantissa
    while diff > 0 and (mantissa >> 64) < _TIMES_TEN_HIGH_LIMIT:
        mantissa *= 10
        diff -= 1
    target = higher.scale
    if diff > 0:
        higher = bank_round(higher.with_scale(diff))
        target -= diff
    return higher.with_scale(target), _build(mantissa, target, lower.negative), target


def align_scales(
    first: Decimal128, second: Decimal128
) -> tuple[Decimal128, Decimal128, int]:
    """Bring both values to a common scale and return them with that scale.

    The value with the smaller scale is multiplied by ten while it can be;
    if it cannot reach the larger scale, the other value is rounded down to it.
    """
    if first.scale == second.scale:
        return first, second, first.scale
    if first.scale < second.scale:
        raised_second, raised_first, reached = _align(second, first)
        return raised_first, raised_second, reached
    return _align(first, second)


def is_less_magnitude(first: Decimal128, second: Decimal128) -> bool:
    """Order by sign when signs differ, otherwise by aligned magnitude."""
    if first.negative != second.negative:
        return first.negative
    first, second, _ = align_scales(first, second)
    return first.mantissa < second.mantissa


def add(first: Decimal128, second: Decimal128) -> Decimal128:
    """Return ``first + second``."""
    if first.negative == second.negative:
        first, second, scale = align_scales(first, second)
        total = first.mantissa + second.mantissa
        if total >= _MANTISSA_LIMIT and scale == 0:
            raise _overflow(first.negative)
        return _build(total % _MANTISSA_LIMIT, scale, first.negative)
    if first.negative:
        return sub(second, first.with_sign(False))
    return sub(first, second.with_sign(False))


def sub(first: Decimal128, second: Decimal128) -> Decimal128:
    """Return ``first - second``."""
    if not first.negative and second.negative:
        return add(first, second.with_sign(False))
    if first.negative and not second.negative:
        try:
            total = add(first.with_sign(False), second)
        except ValueTooLargeError as error:
            raise ValueTooSmallError("result is too small") from error
        return total.with_sign(True)

    swapped = is_less_magnitude(first, second)
    if swapped:
        first, second = second, first
    first, second, scale = align_scales(first, second)
    difference = first.mantissa - second.mantissa
    negative = (first.negative != swapped) and difference != 0
    return _build(difference, scale, negative)


def mul(first: Decimal128, second: Decimal128) -> Decimal128:
    """Return ``first * second``."""
    negative = first.negative != second.negative
    scale = first.scale + second.scale
    if scale > MAX_SCALE:
        raise ValueTooSmallError(f"result scale {scale} exceeds {MAX_SCALE}")
    product = first.mantissa * second.mantissa
    if product >= _MANTISSA_LIMIT:
        raise _overflow(negative)
    return _build(product, scale, negative)


def div(first: Decimal128, second: Decimal128) -> Decimal128:
    """Return the integer quotient of the mantissas at scale ``first - second``."""
    if second.is_zero:
        raise DecimalDivisionByZero("division by zero")
    negative = first.negative != second.negative
    quotient = first.mantissa // second.mantissa
    scale = first.scale - second.scale
    if scale < 0:
        quotient *= 10**-scale
        scale = 0
        if quotient >= _MANTISSA_LIMIT:
            raise _overflow(negative)
    return _build(quotient, scale, negative)


def mod(first: Decimal128, second: Decimal128) -> Decimal128:
    """Return ``first - div(first, second) * second``."""
    if second.is_zero:
        raise DecimalDivisionByZero("division by zero")
    return sub(first, mul(div(first, second), second))