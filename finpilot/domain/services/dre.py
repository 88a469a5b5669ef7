"""Cash-basis income statement (DRE) rollups."""

from collections.abc import Iterable
from decimal import Decimal

from finpilot.domain.constants import INCOME, UNCATEGORIZED
from finpilot.domain.errors import InvalidRangeError
from finpilot.domain.models import DREResult, LedgerEntry, ResultSummary
from finpilot.utils.decimal_utils import (
    coerce_date,
    coerce_decimal,
    quantize_cents,
)


def compute_monthly_dre(
    entries: Iterable[LedgerEntry],
    month: int,
    year: int,
) -> DREResult:
    """Compute the DRE for one calendar month.

    Args:
        entries: Ledger snapshot; entries from other months are ignored.
        month: Calendar month, 1 (January) to 12.
        year: Calendar year.

    Returns:
        DREResult: Revenue, expense, margin and per-category totals.

    Raises:
        InvalidRangeError: If ``month`` is outside 1..12.
    """
    if not 1 <= month <= 12:
        raise InvalidRangeError(f"Invalid month: {month}")

    revenue = Decimal("0")
    expense = Decimal("0")
    revenue_by_category: dict[str, Decimal] = {}
    expense_by_category: dict[str, Decimal] = {}
    entry_count = 0
    for entry in entries:
        entry_date = coerce_date(entry.entry_date)
        if entry_date.year != year or entry_date.month != month:
            continue
        entry_count += 1
        amount = coerce_decimal(entry.amount)
        category = entry.category_id or UNCATEGORIZED
        if entry.direction == INCOME:
            revenue += amount
            revenue_by_category[category] = (
                revenue_by_category.get(category, Decimal("0")) + amount
            )
        else:
            expense += amount
            expense_by_category[category] = (
                expense_by_category.get(category, Decimal("0")) + amount
            )

    return DREResult(
        year=year,
        month=month,
        revenue=revenue,
        expense=expense,
        margin=compute_margin(revenue, revenue - expense),
        revenue_by_category=revenue_by_category,
        expense_by_category=expense_by_category,
        entry_count=entry_count,
    )


def compute_yearly_dre(
    entries: Iterable[LedgerEntry],
    year: int,
) -> list[DREResult]:
    """Return the 12 monthly DREs of ``year``, January first."""
    snapshot = list(entries)
    return [
        compute_monthly_dre(snapshot, month, year) for month in range(1, 13)
    ]


def compute_margin(revenue: Decimal, result: Decimal) -> Decimal:
    """Return the result as a percentage of revenue (0 without revenue)."""
    if revenue <= 0:
        return Decimal("0.00")
    return quantize_cents(result / revenue * Decimal("100"))


def summarize_entries(entries: Iterable[LedgerEntry]) -> ResultSummary:
    """Return revenue and expense totals of a set of entries."""
    revenue = Decimal("0")
    expense = Decimal("0")
    for entry in entries:
        amount = coerce_decimal(entry.amount)
        if entry.direction == INCOME:
            revenue += amount
        else:
            expense += amount
    return ResultSummary(revenue=revenue, expense=expense)


def compute_counterparty_result(
    entries: Iterable[LedgerEntry],
    counterparty_id: str,
) -> ResultSummary:
    """Return the result of the entries linked to one client or supplier."""
    return summarize_entries(
        entry for entry in entries if entry.counterparty_id == counterparty_id
    )


__all__ = [
    "compute_monthly_dre",
    "compute_yearly_dre",
    "compute_margin",
    "summarize_entries",
    "compute_counterparty_result",
]
