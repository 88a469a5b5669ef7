"""Domain models package."""

from .budget import BudgetAlert, BudgetLine, CategoryBudget, RealizedAmounts
from .entitlements import MODULE_FLAGS, ModuleEntitlements
from .finance import (
    AccountReconciliation,
    AggregationBucket,
    CashflowProjection,
    CategoryAmount,
    DashboardKpis,
    DREResult,
    ResultSummary,
)
from .installments import Installment, InstallmentAdjustment, SettlementResult
from .ledger import BankAccount, Category, LedgerEntry

__all__ = [
    "LedgerEntry",
    "Category",
    "BankAccount",
    "CategoryBudget",
    "RealizedAmounts",
    "BudgetAlert",
    "BudgetLine",
    "Installment",
    "InstallmentAdjustment",
    "SettlementResult",
    "AggregationBucket",
    "CashflowProjection",
    "ResultSummary",
    "DREResult",
    "DashboardKpis",
    "CategoryAmount",
    "AccountReconciliation",
    "MODULE_FLAGS",
    "ModuleEntitlements",
]
