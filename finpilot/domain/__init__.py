"""Domain package for business rules and core models."""

from .errors import (
    AlreadySettledError,
    FinanceError,
    InvalidAmountError,
    InvalidRangeError,
    InvalidStrategyError,
)
from .models import (
    AggregationBucket,
    CashflowProjection,
    CategoryBudget,
    DREResult,
    Installment,
    LedgerEntry,
    SettlementResult,
)
from .services import (
    aggregate_cashflow,
    compute_monthly_dre,
    compute_yearly_dre,
    evaluate_budget_alerts,
    settle_installment,
)

__all__ = [
    "FinanceError",
    "InvalidRangeError",
    "InvalidAmountError",
    "AlreadySettledError",
    "InvalidStrategyError",
    "LedgerEntry",
    "CategoryBudget",
    "Installment",
    "AggregationBucket",
    "CashflowProjection",
    "DREResult",
    "SettlementResult",
    "aggregate_cashflow",
    "compute_monthly_dre",
    "compute_yearly_dre",
    "evaluate_budget_alerts",
    "settle_installment",
]
