"""Domain services package."""

from .bank_accounts import (
    build_transfer_entries,
    compute_account_balance,
    compute_account_movement,
    reconcile_account,
)
from .budget import (
    build_budget_overview,
    classify_budget_line,
    compute_realized_by_category,
    evaluate_budget_alerts,
)
from .cashflow import aggregate_cashflow, select_granularity
from .dashboard import (
    compute_kpis,
    count_installments_by_status,
    top_expense_categories,
)
from .dre import (
    compute_counterparty_result,
    compute_monthly_dre,
    compute_yearly_dre,
    summarize_entries,
)
from .installments import (
    build_installment_schedule,
    mark_overdue,
    settle_installment,
    split_evenly,
)

__all__ = [
    "aggregate_cashflow",
    "select_granularity",
    "compute_monthly_dre",
    "compute_yearly_dre",
    "summarize_entries",
    "compute_counterparty_result",
    "evaluate_budget_alerts",
    "compute_realized_by_category",
    "classify_budget_line",
    "build_budget_overview",
    "settle_installment",
    "split_evenly",
    "build_installment_schedule",
    "mark_overdue",
    "compute_kpis",
    "top_expense_categories",
    "count_installments_by_status",
    "compute_account_movement",
    "compute_account_balance",
    "reconcile_account",
    "build_transfer_entries",
]
