"""Conversions between decimals and Python ints and single-precision floats."""

from __future__ import annotations

import math
import struct

from .core import MANTISSA_BITS, ConversionError, Decimal128

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
FLOAT_DIGITS = 7
_MAX_DECIMAL = float(2**MANTISSA_BITS)
_INT31_MASK = (1 << 31) - 1


def _to_float32(value: float) -> float:
    """Round a float to single precision; out-of-range values become infinities."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def from_int(value: int) -> Decimal128:
    """Build a decimal of scale 0 from a 32-bit signed integer."""
    if not INT32_MIN <= value <= INT32_MAX:
        raise ConversionError(f"{value} is not a 32-bit signed integer")
    return Decimal128(low=abs(value)).with_sign(value < 0)


def from_float(value: float) -> Decimal128:
    """Build a decimal from a float taken at single precision and 7 significant digits."""
    number = _to_float32(value)
    if math.isnan(number) or math.isinf(number) or abs(number) > _MAX_DECIMAL:
        raise ConversionError(f"{value!r} cannot be represented as a decimal")
    negative = number < 0
    number = abs(number)

    digits = _to_float32(float(f"{number:.{FLOAT_DIGITS}g}"))
    scale = 0
    while not digits.is_integer():
        digits = _to_float32(digits * 10)
        scale += 1

    mantissa = int(digits)
    if mantissa > INT32_MAX:
        raise ConversionError(f"{value!r} does not fit a 32-bit mantissa")
    return Decimal128(low=mantissa).with_scale(scale).with_sign(negative)


def to_int(value: Decimal128) -> int:
    """Return the 31 bits that start at the scale position, signed.

    Raises ConversionError when any bit from ``scale + 31`` to 95 is set.
    """
    scale = value.scale
    if scale + 31 < MANTISSA_BITS - 1:
        if value.mantissa >> (scale + 31):
            raise ConversionError("decimal does not fit a 32-bit signed integer")
    whole = value.mantissa | (value.flags << MANTISSA_BITS)
    data = (whole >> scale) & _INT31_MASK
    return -data if value.negative else data


def to_float(value: Decimal128) -> float:
    """Return the value as a single-precision float."""
    result = value.mantissa / 10**value.scale
    if value.negative:
        result = -result
    return _to_float32(result)