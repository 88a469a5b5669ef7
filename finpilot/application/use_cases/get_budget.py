"""Use cases for monthly budget alerts and the planning overview."""

from datetime import date

from finpilot.application.ports.ledger_repository import LedgerRepositoryPort
from finpilot.domain.models import BudgetAlert, BudgetLine
from finpilot.domain.services.budget import (
    build_budget_overview,
    compute_realized_by_category,
    evaluate_budget_alerts,
)
from finpilot.infrastructure.logging.logger import get_app_logger
from finpilot.utils.date_utils import month_bounds


class GetBudgetAlertsUseCase:
    """Compare a month's realized spend with its expense budgets."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, month: date) -> list[BudgetAlert]:
        """Return budget alerts for the month containing ``month``.

        Args:
            month: Any day of the month under review.

        Returns:
            list[BudgetAlert]: Alerts sorted by descending ratio.
        """
        start, end = month_bounds(month)
        budgets = self._ledger_repository.fetch_budgets(start)
        entries = self._ledger_repository.fetch_entries(start, end)
        realized = compute_realized_by_category(entries)
        alerts = evaluate_budget_alerts(budgets, realized)
        self._logger.info(
            f"Budget alerts for {start:%Y-%m}: {len(alerts)} of "
            f"{len(budgets)} budgets"
        )
        return alerts


class GetBudgetOverviewUseCase:
    """Build the planning table for a month."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, month: date) -> list[BudgetLine]:
        """Return one line per category with targets and realized totals."""
        start, end = month_bounds(month)
        categories = self._ledger_repository.fetch_categories()
        budgets = self._ledger_repository.fetch_budgets(start)
        entries = self._ledger_repository.fetch_entries(start, end)
        lines = build_budget_overview(
            categories,
            budgets,
            compute_realized_by_category(entries),
        )
        self._logger.info(
            f"Budget overview for {start:%Y-%m}: {len(lines)} categories"
        )
        return lines


__all__ = [
    "GetBudgetAlertsUseCase",
    "GetBudgetOverviewUseCase",
    "BudgetAlert",
    "BudgetLine",
]
