"""Cash-flow bucketing over a date range.

The bucket size follows the span of the range: more than 90 days is
grouped by month, more than 15 days by week (weeks start on Monday), and
anything shorter by day. Every period of the range gets a bucket, so the
output is dense and ordered.
"""

from collections.abc import Iterable, Iterator
from datetime import date, timedelta
from decimal import Decimal

from dateutil.relativedelta import relativedelta

from finpilot.domain.constants import (
    DAY,
    INCOME,
    MONTH,
    MONTHLY_SPAN_DAYS,
    WEEK,
    WEEKLY_SPAN_DAYS,
)
from finpilot.domain.errors import InvalidRangeError
from finpilot.domain.models import (
    AggregationBucket,
    CashflowProjection,
    LedgerEntry,
)
from finpilot.utils.decimal_utils import coerce_date, coerce_decimal


def select_granularity(start: date, end: date) -> str:
    """Return the bucket granularity for a date range.

    Args:
        start: First day of the range.
        end: Last day of the range.

    Returns:
        str: ``month``, ``week`` or ``day``.
    """
    span_days = (end - start).days
    if span_days > MONTHLY_SPAN_DAYS:
        return MONTH
    if span_days > WEEKLY_SPAN_DAYS:
        return WEEK
    return DAY


def period_start(value: date, granularity: str) -> date:
    """Return the first day of the period containing ``value``."""
    if granularity == DAY:
        return value
    if granularity == WEEK:
        return value - timedelta(days=value.weekday())
    if granularity == MONTH:
        return value.replace(day=1)
    raise ValueError(f"Unsupported granularity: {granularity}")


def iter_periods(start: date, end: date, granularity: str) -> Iterator[date]:
    """Yield the start of every period overlapping ``[start, end]``."""
    step = {
        DAY: relativedelta(days=1),
        WEEK: relativedelta(weeks=1),
        MONTH: relativedelta(months=1),
    }[granularity]
    current = period_start(start, granularity)
    while current <= end:
        yield current
        current = current + step


def aggregate_cashflow(
    entries: Iterable[LedgerEntry],
    start: date,
    end: date,
) -> CashflowProjection:
    """Bucket ledger entries over ``[start, end]`` with a running balance.

    Args:
        entries: Ledger snapshot; entries outside the range are ignored.
        start: First day of the range (inclusive).
        end: Last day of the range (inclusive).

    Returns:
        CashflowProjection: Dense buckets and range totals.

    Raises:
        InvalidRangeError: If ``start`` is after ``end``.
    """
    start = coerce_date(start)
    end = coerce_date(end)
    if start > end:
        raise InvalidRangeError(
            f"Start date {start.isoformat()} is after end date "
            f"{end.isoformat()}"
        )

    granularity = select_granularity(start, end)
    periods = list(iter_periods(start, end, granularity))
    income_totals = {period: Decimal("0") for period in periods}
    expense_totals = {period: Decimal("0") for period in periods}

    for entry in entries:
        entry_date = coerce_date(entry.entry_date)
        if entry_date < start or entry_date > end:
            continue
        key = period_start(entry_date, granularity)
        amount = coerce_decimal(entry.amount)
        if entry.direction == INCOME:
            income_totals[key] += amount
        else:
            expense_totals[key] += amount

    buckets: list[AggregationBucket] = []
    cumulative = Decimal("0")
    total_income = Decimal("0")
    total_expense = Decimal("0")
    for period in periods:
        income = income_totals[period]
        expense = expense_totals[period]
        cumulative += income - expense
        total_income += income
        total_expense += expense
        buckets.append(
            AggregationBucket(
                period_start=period,
                total_income=income,
                total_expense=expense,
                cumulative_balance=cumulative,
            )
        )

    return CashflowProjection(
        granularity=granularity,
        buckets=buckets,
        total_income=total_income,
        total_expense=total_expense,
    )


__all__ = [
    "select_granularity",
    "period_start",
    "iter_periods",
    "aggregate_cashflow",
]
