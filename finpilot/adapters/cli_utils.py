"""Shared helpers for the command-line adapters."""

from datetime import date


def parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def parse_int(value: str | None, logger, name: str) -> int | None:
    """Parse an integer environment value, warning when invalid."""
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid {name} '{value}'. Expected an integer.")
        return None


def format_amount(value) -> str:
    """Format an amount with two decimals and thousands separators."""
    return f"{value:,.2f}"


__all__ = ["parse_date", "parse_int", "format_amount"]
