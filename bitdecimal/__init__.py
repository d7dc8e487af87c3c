"""Decimal numbers with a 96-bit mantissa, a power-of-ten scale and a sign bit,
with arithmetic, comparison, rounding and int/float conversion."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "compare", "convert", "core"]