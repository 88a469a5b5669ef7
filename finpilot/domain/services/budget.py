"""Budget tracking: realized totals, status and threshold alerts."""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from finpilot.domain.constants import (
    BUDGET_ALERT_THRESHOLD,
    EXPENSE,
    INCOME,
)
from finpilot.domain.models import (
    BudgetAlert,
    BudgetLine,
    Category,
    CategoryBudget,
    LedgerEntry,
    RealizedAmounts,
)
from finpilot.utils.decimal_utils import coerce_decimal

EXCEEDED = "exceeded"
NEAR_LIMIT = "near_limit"
OK = "ok"
NO_TARGET = "no_target"
ACHIEVED = "achieved"
ALMOST_THERE = "almost_there"
IN_PROGRESS = "in_progress"


def evaluate_budget_alerts(
    budgets: Iterable[CategoryBudget],
    realized_by_category: Mapping[str, RealizedAmounts],
) -> list[BudgetAlert]:
    """Flag expense budgets whose realized spend reached the threshold.

    Args:
        budgets: Budget rows for the month under review.
        realized_by_category: Realized totals keyed by category id.

    Returns:
        list[BudgetAlert]: Alerts sorted by descending ratio.
    """
    alerts: list[BudgetAlert] = []
    for budget in budgets:
        if budget.category_type == INCOME:
            continue
        planned = coerce_decimal(budget.planned_expense)
        if planned <= 0:
            continue
        realized_amounts = realized_by_category.get(budget.category_id)
        realized = (
            coerce_decimal(realized_amounts.expense)
            if realized_amounts is not None
            else Decimal("0")
        )
        ratio = realized / planned
        if ratio < BUDGET_ALERT_THRESHOLD:
            continue
        exceeded = ratio > 1
        alerts.append(
            BudgetAlert(
                category_id=budget.category_id,
                category_name=budget.category_name or budget.category_id,
                planned=planned,
                realized=realized,
                ratio=ratio,
                level=EXCEEDED if exceeded else NEAR_LIMIT,
                over_budget=realized - planned if exceeded else Decimal("0"),
            )
        )
    return sorted(alerts, key=lambda alert: alert.ratio, reverse=True)


def compute_realized_by_category(
    entries: Iterable[LedgerEntry],
) -> dict[str, RealizedAmounts]:
    """Sum realized income and expense per category.

    Entries without a category do not count toward any budget.
    """
    income: dict[str, Decimal] = {}
    expense: dict[str, Decimal] = {}
    order: list[str] = []
    for entry in entries:
        category_id = entry.category_id
        if not category_id:
            continue
        if category_id not in income:
            order.append(category_id)
            income[category_id] = Decimal("0")
            expense[category_id] = Decimal("0")
        amount = coerce_decimal(entry.amount)
        if entry.direction == INCOME:
            income[category_id] += amount
        else:
            expense[category_id] += amount
    return {
        category_id: RealizedAmounts(
            income=income[category_id],
            expense=expense[category_id],
        )
        for category_id in order
    }


def classify_budget_line(
    planned: Decimal,
    realized: Decimal,
    side: str,
) -> str:
    """Return the planning-table status of one budget side.

    Args:
        planned: Planned amount for the side.
        realized: Realized amount for the side.
        side: ``income`` or ``expense``.

    Returns:
        str: Status label for the side.
    """
    planned = coerce_decimal(planned)
    if planned <= 0:
        return NO_TARGET
    ratio = coerce_decimal(realized) / planned
    if side == EXPENSE:
        if ratio > 1:
            return EXCEEDED
        if ratio >= BUDGET_ALERT_THRESHOLD:
            return NEAR_LIMIT
        return OK
    if ratio >= 1:
        return ACHIEVED
    if ratio >= BUDGET_ALERT_THRESHOLD:
        return ALMOST_THERE
    return IN_PROGRESS


def build_budget_overview(
    categories: Iterable[Category],
    budgets: Iterable[CategoryBudget],
    realized_by_category: Mapping[str, RealizedAmounts],
) -> list[BudgetLine]:
    """Combine every category with its targets and realized amounts."""
    budget_by_category = {budget.category_id: budget for budget in budgets}
    lines: list[BudgetLine] = []
    for category in categories:
        budget = budget_by_category.get(category.category_id)
        realized = realized_by_category.get(
            category.category_id,
            RealizedAmounts(),
        )
        planned_income = (
            coerce_decimal(budget.planned_income) if budget else Decimal("0")
        )
        planned_expense = (
            coerce_decimal(budget.planned_expense) if budget else Decimal("0")
        )
        lines.append(
            BudgetLine(
                category_id=category.category_id,
                category_name=category.name,
                category_type=category.direction,
                planned_income=planned_income,
                realized_income=realized.income,
                planned_expense=planned_expense,
                realized_expense=realized.expense,
                income_status=classify_budget_line(
                    planned_income,
                    realized.income,
                    INCOME,
                ),
                expense_status=classify_budget_line(
                    planned_expense,
                    realized.expense,
                    EXPENSE,
                ),
            )
        )
    return lines


__all__ = [
    "EXCEEDED",
    "NEAR_LIMIT",
    "OK",
    "NO_TARGET",
    "ACHIEVED",
    "ALMOST_THERE",
    "IN_PROGRESS",
    "evaluate_budget_alerts",
    "compute_realized_by_category",
    "classify_budget_line",
    "build_budget_overview",
]
