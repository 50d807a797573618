"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

MONEY_QUANTUM = Decimal("0.01")
ZERO = Decimal("0.00")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, adapters or user input.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value cannot be read as a number.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Not a numeric value: {value!r}")
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValueError(f"Not a numeric value: {value!r}") from exc


def quantize_money(value) -> Decimal:
    """Round a monetary value to two fractional digits.

    Args:
        value: Raw numeric value.

    Returns:
        Decimal: Value quantized to cents.
    """
    return coerce_decimal(value).quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def has_at_most_two_places(value: Decimal) -> bool:
    """Return True when the value carries no digits below cents."""
    if not value.is_finite():
        return False
    try:
        return value == value.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return False


__all__ = [
    "MONEY_QUANTUM",
    "ZERO",
    "coerce_decimal",
    "quantize_money",
    "has_at_most_two_places",
]
