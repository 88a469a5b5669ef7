"""Domain models for monthly budgets."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class CategoryBudget:
    """Planned targets for one category in one calendar month."""

    category_id: str
    month: date
    planned_expense: Decimal
    planned_income: Decimal = Decimal("0")
    category_name: str | None = None
    category_type: str | None = None


@dataclass(frozen=True)
class RealizedAmounts:
    """Realized income and expense totals for a category."""

    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")


@dataclass(frozen=True)
class BudgetAlert:
    """Expense budget alert for a category at or above the threshold.

    Attributes:
        category_id: Category identifier.
        category_name: Display name (falls back to the identifier).
        planned: Planned expense amount.
        realized: Realized expense amount.
        ratio: ``realized / planned``.
        level: ``exceeded`` or ``near_limit``.
        over_budget: Amount over the plan (zero when near limit).
    """

    category_id: str
    category_name: str
    planned: Decimal
    realized: Decimal
    ratio: Decimal
    level: str
    over_budget: Decimal


@dataclass(frozen=True)
class BudgetLine:
    """Planning-table row combining a category with targets and results."""

    category_id: str
    category_name: str
    category_type: str
    planned_income: Decimal
    realized_income: Decimal
    planned_expense: Decimal
    realized_expense: Decimal
    income_status: str
    expense_status: str


__all__ = ["CategoryBudget", "RealizedAmounts", "BudgetAlert", "BudgetLine"]
