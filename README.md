# bitdecimal

`bitdecimal` provides `Decimal128`, an immutable decimal number stored as
four unsigned 32-bit words: `low`, `mid` and `high` together hold a 96-bit
unsigned mantissa, and `flags` holds the scale (bits 16-23, the power of ten
the mantissa is divided by) and the sign (bit 31). Arithmetic, comparison,
rounding and conversion all work on that layout.

It is a library only; it has no command-line program.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `bitdecimal.core`

- `Decimal128(low=0, mid=0, high=0, flags=0)`: each word must be an
  unsigned 32-bit integer, otherwise `ValueError` is raised.
  - `bit(index)` returns bit 0..127; `with_bit(index, value)` returns a copy
    with that bit set or cleared. Other indexes raise `IndexError`.
  - `negative`, `scale`, `mantissa`, `is_zero` are read-only properties.
  - `with_sign(negative)` and `with_scale(scale)` return modified copies;
    `with_scale` accepts 0..255.
- `normalize(first, second)`: multiplies the mantissa of the value with the
  smaller scale by ten until the scales match or its top mantissa bit is
  set; returns both values and the scale reached.
- `multiply_mantissa_by_10(value)` and `shift_left(value)`: mantissa helpers
  that drop anything carried past bit 95.
- Error types: `DecimalError` (base, an `ArithmeticError`),
  `ValueTooLargeError`, `ValueTooSmallError`, `DecimalDivisionByZero` (also a
  `ZeroDivisionError`) and `ConversionError`.

### `bitdecimal.compare`

`is_less`, `is_less_or_equal`, `is_greater`, `is_greater_or_equal`,
`is_equal`, `is_not_equal`. Both values are first brought to a common scale
with `normalize`. Values of different sign are ordered by sign alone, and
equality compares sign, scale and mantissa, so a positive and a negative
zero are not equal.

### `bitdecimal.convert`

- `from_int(value)`: a 32-bit signed integer to a decimal of scale 0;
  anything outside that range raises `ConversionError`.
- `from_float(value)`: the value is taken at single precision and seven
  significant digits. NaN, infinities, magnitudes above 2**96 and mantissas
  that do not fit 31 bits raise `ConversionError`.
- `to_int(value)`: returns the 31 bits starting at the scale position, with
  the sign applied; raises `ConversionError` when any higher mantissa bit is
  set.
- `to_float(value)`: the value as a single-precision float.

### `bitdecimal.arithmetic`

- `add`, `sub`, `mul`: operands are brought to a common scale with
  `align_scales` where needed. `add` raises on overflow only at scale 0;
  `mul` raises `ValueTooSmallError` when the combined scale exceeds 28 and
  `ValueTooLargeError`/`ValueTooSmallError` (by result sign) when the
  product does not fit 96 bits.
- `div(first, second)`: the integer quotient of the two mantissas at scale
  `first.scale - second.scale`; a zero divisor raises
  `DecimalDivisionByZero`.
- `mod(first, second)`: `first - div(first, second) * second`.
- `negate(value)`: flips the sign.
- `truncate(value)`: drops fractional digits, keeping the sign.
- `floor(value)`: truncates a positive value; for a negative value it always
  adds one to the truncated magnitude, even when there was no fraction.
- `round_decimal(value)`: rounds to an integer, halves away from zero.
- `bank_round(value)`: rounds up when the dropped remainder exceeds five
  units of its own leading digit.
- `align_scales(first, second)`: multiplies the value with the smaller scale
  by ten while it can; if it cannot reach the larger scale, the other value
  is rounded down to the reachable scale.
- `is_less_magnitude(first, second)`: orders by sign when signs differ,
  otherwise by aligned mantissa.

Scales above 28 make `truncate`, `round_decimal` and `bank_round` raise
`ConversionError`.

## Example

```python
from bitdecimal.convert import from_int, to_int
from bitdecimal.arithmetic import add, mul, floor
from bitdecimal.compare import is_less

a = from_int(10)
b = from_int(5)
print(to_int(add(a, b)))              # 15

print(to_int(mul(from_int(-2), from_int(23))))   # -46

print(is_less(b, a))                  # True

value = from_int(-34).with_scale(1)   # -3.4
print(to_int(floor(value)))           # -4
```