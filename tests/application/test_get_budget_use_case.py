"""Tests for the budget use cases."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from finpilot.application.use_cases.get_budget import (
    GetBudgetAlertsUseCase,
    GetBudgetOverviewUseCase,
)
from finpilot.domain.constants import EXPENSE
from finpilot.domain.models import Category, CategoryBudget, LedgerEntry
from finpilot.domain.services.budget import EXCEEDED


def _repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_budgets.return_value = [
        CategoryBudget(
            category_id="rent",
            month=date(2024, 5, 1),
            planned_expense=Decimal("1000"),
            category_name="Aluguel",
        )
    ]
    repository.fetch_entries.return_value = [
        LedgerEntry(
            "1",
            EXPENSE,
            Decimal("1200"),
            date(2024, 5, 5),
            category_id="rent",
        )
    ]
    repository.fetch_categories.return_value = [
        Category("rent", "Aluguel", EXPENSE)
    ]
    return repository


def test_alerts_use_month_of_given_day() -> None:
    """Alerts query the budgets and entries of the whole month."""
    repository = _repository()

    alerts = GetBudgetAlertsUseCase(
        repository,
        logger=MagicMock(),
    ).execute(date(2024, 5, 17))

    repository.fetch_budgets.assert_called_once_with(date(2024, 5, 1))
    repository.fetch_entries.assert_called_once_with(
        date(2024, 5, 1),
        date(2024, 5, 31),
    )
    assert len(alerts) == 1
    assert alerts[0].level == EXCEEDED
    assert alerts[0].over_budget == Decimal("200")


def test_overview_combines_categories() -> None:
    """The overview has one line per category."""
    lines = GetBudgetOverviewUseCase(
        _repository(),
        logger=MagicMock(),
    ).execute(date(2024, 5, 1))

    assert len(lines) == 1
    assert lines[0].realized_expense == Decimal("1200")
    assert lines[0].expense_status == EXCEEDED
