"""The 128-bit decimal value, its error types and low-level mantissa helpers.

A value holds a 96-bit unsigned mantissa in three 32-bit words (``low``,
``mid``, ``high``) and a ``flags`` word. Bits 16-23 of ``flags`` hold the
scale (the power of ten the mantissa is divided by) and bit 31 holds the sign.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

MAX_SCALE = 28
WORD_BITS = 32
MANTISSA_BITS = 96
TOTAL_BITS = 128
SIGN_BIT = 127

_WORD_MASK = (1 << WORD_BITS) - 1
_MANTISSA_MASK = (1 << MANTISSA_BITS) - 1
_SCALE_SHIFT = 16
_SCALE_FIELD = 0x00FF0000
_SCALE_CLEAR = 0xFF00FFFF
_WORD_NAMES = ("low", "mid", "high", "flags")


class DecimalError(ArithmeticError):
    """Base class for errors raised by decimal operations."""

    code = 0


class ValueTooLargeError(DecimalError):
    """The result is too large to hold or is positive infinity."""

    code = 1


class ValueTooSmallError(DecimalError):
    """The result is too small to hold or is negative infinity."""

    code = 2


class DecimalDivisionByZero(DecimalError, ZeroDivisionError):
    """Division by a zero decimal."""

    code = 3


class ConversionError(DecimalError):
    """A value cannot be converted to or from a decimal."""

    code = 1


def _check_index(index: int) -> None:
    if not 0 <= index < TOTAL_BITS:
        raise IndexError(f"bit index {index} is outside 0..{TOTAL_BITS - 1}")


@dataclass(frozen=True)
class Decimal128:
    """An immutable decimal made of four 32-bit words."""

    low: int = 0
    mid: int = 0
    high: int = 0
    flags: int = 0

    def __post_init__(self) -> None:
        for name, word in zip(_WORD_NAMES, self._words()):
            if not isinstance(word, int) or not 0 <= word <= _WORD_MASK:
                raise ValueError(f"{name} must be an unsigned 32-bit integer, got {word!r}")

    def _words(self) -> tuple[int, int, int, int]:
        return (self.low, self.mid, self.high, self.flags)

    def _with_mantissa(self, mantissa: int) -> Decimal128:
        mantissa &= _MANTISSA_MASK
        return replace(
            self,
            low=mantissa & _WORD_MASK,
            mid=(mantissa >> WORD_BITS) & _WORD_MASK,
            high=(mantissa >> (2 * WORD_BITS)) & _WORD_MASK,
        )

    def bit(self, index: int) -> int:
        """Return the bit at ``index`` (0..127) as 0 or 1."""
        _check_index(index)
        word, offset = divmod(index, WORD_BITS)
        return (self._words()[word] >> offset) & 1

    def with_bit(self, index: int, value) -> Decimal128:
        """Return a copy with the bit at ``index`` set when ``value`` is true, cleared otherwise."""
        _check_index(index)
        word, offset = divmod(index, WORD_BITS)
        words = list(self._words())
        if value:
            words[word] |= 1 << offset
        else:
            words[word] &= ~(1 << offset) & _WORD_MASK
        return Decimal128(*words)

    def with_sign(self, negative) -> Decimal128:
        """Return a copy whose sign bit is set when ``negative`` is true."""
        return self.with_bit(SIGN_BIT, negative)

    def with_scale(self, scale: int) -> Decimal128:
        """Return a copy with the scale field replaced by ``scale`` (0..255)."""
        if not 0 <= scale <= 0xFF:
            raise ValueError(f"scale {scale} does not fit the 8-bit scale field")
        flags = (self.flags & _SCALE_CLEAR) | (scale << _SCALE_SHIFT)
        return replace(self, flags=flags)

    @property
    def negative(self) -> bool:
        """True when the sign bit is set."""
        return bool(self.bit(SIGN_BIT))

    @property
    def scale(self) -> int:
        """The power of ten the mantissa is divided by."""
        return (self.flags & _SCALE_FIELD) >> _SCALE_SHIFT

    @property
    def mantissa(self) -> int:
        """The 96-bit unsigned mantissa as an integer."""
        return self.low | (self.mid << WORD_BITS) | (self.high << (2 * WORD_BITS))

    @property
    def is_zero(self) -> bool:
        """True when the mantissa is zero, whatever the sign and scale."""
        return self.mantissa == 0


def multiply_mantissa_by_10(value: Decimal128) -> Decimal128:
    """Multiply the mantissa by ten, dropping any carry out of bit 95."""
    return value._with_mantissa(value.mantissa * 10)


def shift_left(value: Decimal128) -> Decimal128:
    """Shift the mantissa one bit to the left, dropping bit 95."""
    return value._with_mantissa(value.mantissa << 1)


def normalize(first: Decimal128, second: Decimal128) -> tuple[Decimal128, Decimal128, int]:
    """Bring two values towards a common scale.

    The value with the smaller scale has its mantissa multiplied by ten until
    the scales match or its top mantissa bit is set. Returns both values and
    the scale reached.
    """
    if first.scale == second.scale:
        return first, second, first.scale
    if first.scale < second.scale:
        raised_second, raised_first, reached = _raise_scale(second, first)
        return raised_first, raised_second, reached
    return _raise_scale(first, second)


def _raise_scale(higher: Decimal128, lower: Decimal128) -> tuple[Decimal128, Decimal128, int]:
    target = higher.scale
    reached = lower.scale
    while reached != target and not lower.bit(MANTISSA_BITS - 1):
        reached += 1
        lower = multiply_mantissa_by_10(lower)
    return higher, lower.with_scale(reached), reached