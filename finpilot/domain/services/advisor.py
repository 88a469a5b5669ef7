"""Financial summary handed to the AI advisor as prompt context."""

from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal

from finpilot.domain.models import BudgetLine, LedgerEntry
from finpilot.domain.services.dashboard import (
    compute_kpis,
    top_expense_categories,
)


def build_financial_summary(
    entries: Iterable[LedgerEntry],
    category_names: Mapping[str, str],
    budget_lines: Sequence[BudgetLine] = (),
    recent_limit: int = 5,
) -> dict:
    """Return a JSON-serializable summary of the user's finances.

    Amounts are rendered as strings so the summary survives JSON encoding
    without float rounding.
    """
    snapshot = sorted(
        entries,
        key=lambda entry: entry.entry_date,
        reverse=True,
    )
    kpis = compute_kpis(snapshot)
    top_expenses = top_expense_categories(
        snapshot,
        category_names,
        limit=5,
    )
    defined = [
        line
        for line in budget_lines
        if line.planned_expense > 0 or line.planned_income > 0
    ]
    return {
        "ledger": {
            "entries": kpis.entry_count,
            "revenue": str(kpis.revenue),
            "expense": str(kpis.expense),
            "profit": str(kpis.profit),
            "margin_percent": str(kpis.margin),
            "recent": [
                f"{entry.entry_date.isoformat()} {entry.description}: "
                f"{entry.amount} ({entry.direction})"
                for entry in snapshot[:recent_limit]
            ],
        },
        "top_expense_categories": [
            f"{item.category_name}: {item.amount}" for item in top_expenses
        ],
        "budget": {
            "categories_with_targets": len(defined),
            "planned_expense": _total(defined, "planned_expense"),
            "realized_expense": _total(defined, "realized_expense"),
            "planned_income": _total(defined, "planned_income"),
            "realized_income": _total(defined, "realized_income"),
        },
    }


def _total(lines: Sequence[BudgetLine], attribute: str) -> str:
    return str(
        sum(
            (getattr(line, attribute) for line in lines),
            start=Decimal("0"),
        )
    )


__all__ = ["build_financial_summary"]
