"""Dashboard figures derived from a ledger snapshot."""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from finpilot.domain.constants import (
    EXPENSE,
    OPEN_STATUSES,
    UNCATEGORIZED,
    UNCATEGORIZED_LABEL,
)
from finpilot.domain.models import (
    CategoryAmount,
    DashboardKpis,
    Installment,
    LedgerEntry,
)
from finpilot.domain.services.dre import compute_margin, summarize_entries
from finpilot.utils.decimal_utils import coerce_decimal


def compute_kpis(entries: Iterable[LedgerEntry]) -> DashboardKpis:
    """Return revenue, expense, profit and margin of the entries."""
    snapshot = list(entries)
    summary = summarize_entries(snapshot)
    return DashboardKpis(
        revenue=summary.revenue,
        expense=summary.expense,
        profit=summary.result,
        margin=compute_margin(summary.revenue, summary.result),
        entry_count=len(snapshot),
    )


def top_expense_categories(
    entries: Iterable[LedgerEntry],
    category_names: Mapping[str, str],
    limit: int = 3,
) -> list[CategoryAmount]:
    """Return the categories with the largest expense totals.

    Args:
        entries: Ledger snapshot.
        category_names: Category id to display name.
        limit: Maximum number of categories returned.

    Returns:
        list[CategoryAmount]: Largest expense categories first.
    """
    totals: dict[str, Decimal] = {}
    for entry in entries:
        if entry.direction != EXPENSE:
            continue
        key = entry.category_id or UNCATEGORIZED
        totals[key] = totals.get(key, Decimal("0")) + coerce_decimal(
            entry.amount
        )

    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [
        CategoryAmount(
            category_id=category_id,
            category_name=_category_label(category_id, category_names),
            amount=amount,
        )
        for category_id, amount in ranked[:limit]
    ]


def count_installments_by_status(
    installments: Iterable[Installment],
) -> dict[str, int]:
    """Count open installments per status (pending and overdue)."""
    counts = {status: 0 for status in OPEN_STATUSES}
    for item in installments:
        if item.status in counts:
            counts[item.status] += 1
    return counts


def _category_label(
    category_id: str,
    category_names: Mapping[str, str],
) -> str:
    if category_id == UNCATEGORIZED:
        return UNCATEGORIZED_LABEL
    return category_names.get(category_id, "Desconhecida")


__all__ = [
    "compute_kpis",
    "top_expense_categories",
    "count_installments_by_status",
]
