"""Tests for the DRE rollups."""

from datetime import date
from decimal import Decimal

import pytest

from finpilot.domain.constants import EXPENSE, INCOME, UNCATEGORIZED
from finpilot.domain.errors import InvalidRangeError
from finpilot.domain.models import LedgerEntry
from finpilot.domain.services.dre import (
    compute_counterparty_result,
    compute_margin,
    compute_monthly_dre,
    compute_yearly_dre,
    summarize_entries,
)


def _entry(
    direction: str,
    amount: str,
    entry_date: date,
    category_id: str | None = None,
    counterparty_id: str | None = None,
) -> LedgerEntry:
    return LedgerEntry(
        entry_id=None,
        direction=direction,
        amount=Decimal(amount),
        entry_date=entry_date,
        category_id=category_id,
        counterparty_id=counterparty_id,
    )


ENTRIES = [
    _entry(INCOME, "1000.00", date(2024, 3, 5), "sales"),
    _entry(INCOME, "250.00", date(2024, 3, 20)),
    _entry(EXPENSE, "400.00", date(2024, 3, 10), "rent"),
    _entry(EXPENSE, "100.00", date(2024, 3, 31), "rent"),
    _entry(INCOME, "300.00", date(2024, 7, 1), "sales"),
    _entry(EXPENSE, "999.00", date(2023, 3, 15), "rent"),
]


def test_compute_monthly_dre_filters_by_month_and_year() -> None:
    """Only entries of the requested month count."""
    result = compute_monthly_dre(ENTRIES, 3, 2024)

    assert result.revenue == Decimal("1250.00")
    assert result.expense == Decimal("500.00")
    assert result.result == Decimal("750.00")
    assert result.margin == Decimal("60.00")
    assert result.entry_count == 4
    assert result.revenue_by_category == {
        "sales": Decimal("1000.00"),
        UNCATEGORIZED: Decimal("250.00"),
    }
    assert result.expense_by_category == {"rent": Decimal("500.00")}


def test_compute_monthly_dre_empty_month_is_zero() -> None:
    """A month without entries yields an all-zero result."""
    result = compute_monthly_dre(ENTRIES, 2, 2024)

    assert result.revenue == Decimal("0")
    assert result.expense == Decimal("0")
    assert result.result == Decimal("0")
    assert result.margin == Decimal("0.00")
    assert result.entry_count == 0


@pytest.mark.parametrize("month", [0, 13])
def test_compute_monthly_dre_rejects_invalid_month(month: int) -> None:
    """Months outside 1..12 raise InvalidRangeError."""
    with pytest.raises(InvalidRangeError):
        compute_monthly_dre(ENTRIES, month, 2024)


def test_compute_yearly_dre_returns_twelve_months_summing_to_year() -> None:
    """The yearly DRE has 12 results whose sums match the year's totals."""
    results = compute_yearly_dre(ENTRIES, 2024)

    assert [result.month for result in results] == list(range(1, 13))
    assert all(result.year == 2024 for result in results)
    yearly = summarize_entries(
        entry for entry in ENTRIES if entry.entry_date.year == 2024
    )
    assert sum((r.revenue for r in results), Decimal("0")) == yearly.revenue
    assert sum((r.expense for r in results), Decimal("0")) == yearly.expense
    assert results[6].revenue == Decimal("300.00")


def test_compute_margin_handles_missing_revenue() -> None:
    """Margin is zero without revenue and rounded to cents otherwise."""
    assert compute_margin(Decimal("0"), Decimal("-50")) == Decimal("0.00")
    assert compute_margin(Decimal("3"), Decimal("1")) == Decimal("33.33")


def test_compute_counterparty_result_filters_entries() -> None:
    """Only the counterparty's entries are summarized."""
    entries = [
        _entry(INCOME, "80.00", date(2024, 1, 1), counterparty_id="c1"),
        _entry(EXPENSE, "30.00", date(2024, 1, 2), counterparty_id="c1"),
        _entry(INCOME, "500.00", date(2024, 1, 3), counterparty_id="c2"),
    ]

    summary = compute_counterparty_result(entries, "c1")

    assert summary.revenue == Decimal("80.00")
    assert summary.expense == Decimal("30.00")
    assert summary.result == Decimal("50.00")
