"""Calendar period helpers."""

from datetime import date

from dateutil.relativedelta import relativedelta


def month_bounds(day: date) -> tuple[date, date]:
    """Return the first and last day of the month containing ``day``."""
    start = day.replace(day=1)
    return start, start + relativedelta(months=1, days=-1)


def year_bounds(year: int) -> tuple[date, date]:
    """Return January 1st and December 31st of ``year``."""
    return date(year, 1, 1), date(year, 12, 31)


__all__ = ["month_bounds", "year_bounds"]
