"""Helpers for Decimal and date normalization."""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize_cents(value: Decimal) -> Decimal:
    """Round a Decimal to cents using ROUND_HALF_UP."""
    return coerce_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def coerce_date(value) -> date:
    """Normalize store values (date, datetime or ISO string) to a date.

    Args:
        value: Raw date value from SQL or adapters.

    Returns:
        date: Calendar date without time-of-day.

    Raises:
        ValueError: If the value cannot be interpreted as a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    raise ValueError(f"Unsupported date value: {value!r}")


__all__ = ["CENT", "coerce_decimal", "quantize_cents", "coerce_date"]
