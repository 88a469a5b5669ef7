"""Application use cases package."""

from .ask_advisor import AskAdvisorUseCase
from .entitlements import (
    GetEntitlementsUseCase,
    SyncEntitlementsWithPlanUseCase,
)
from .get_bank_reconciliation import GetBankReconciliationUseCase
from .get_budget import GetBudgetAlertsUseCase, GetBudgetOverviewUseCase
from .get_cashflow import CashflowProjection, GetCashflowUseCase
from .get_dashboard_summary import DashboardSummary, GetDashboardSummaryUseCase
from .get_dre import DREResult, GetDREUseCase
from .migrate_legacy_data import MigrateLegacyDataUseCase, MigrationResult
from .settle_installment import SettleInstallmentUseCase, SettlementResult

__all__ = [
    "AskAdvisorUseCase",
    "GetEntitlementsUseCase",
    "SyncEntitlementsWithPlanUseCase",
    "GetBankReconciliationUseCase",
    "GetBudgetAlertsUseCase",
    "GetBudgetOverviewUseCase",
    "GetCashflowUseCase",
    "CashflowProjection",
    "GetDashboardSummaryUseCase",
    "DashboardSummary",
    "GetDREUseCase",
    "DREResult",
    "MigrateLegacyDataUseCase",
    "MigrationResult",
    "SettleInstallmentUseCase",
    "SettlementResult",
]
