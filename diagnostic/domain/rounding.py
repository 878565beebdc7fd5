from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def _quantize(value: float, digits: int) -> Decimal:
    # Decimal(float) is the exact binary value, so 2.675 rounds down and 3.125 up.
    exponent = Decimal(1).scaleb(-digits)
    return Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


def round_half_up(value: float, digits: int) -> float:
    """Round to ``digits`` decimals, halves away from zero."""
    return float(_quantize(value, digits))


def to_fixed(value: float, digits: int) -> str:
    """Fixed-point text of ``value`` with exactly ``digits`` decimals."""
    return f"{_quantize(value, digits):.{digits}f}"
