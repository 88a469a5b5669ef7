"""Use case assembling the dashboard figures for a period."""

from dataclasses import dataclass
from datetime import date

from finpilot.application.ports.ledger_repository import LedgerRepositoryPort
from finpilot.domain.constants import PAYABLE, RECEIVABLE
from finpilot.domain.errors import InvalidRangeError
from finpilot.domain.models import (
    BudgetAlert,
    CategoryAmount,
    DashboardKpis,
    Installment,
)
from finpilot.domain.services.budget import (
    compute_realized_by_category,
    evaluate_budget_alerts,
)
from finpilot.domain.services.dashboard import (
    compute_kpis,
    count_installments_by_status,
    top_expense_categories,
)
from finpilot.domain.services.installments import mark_overdue
from finpilot.infrastructure.logging.logger import get_app_logger
from finpilot.utils.date_utils import month_bounds


@dataclass(frozen=True)
class DashboardSummary:
    """Dashboard figures for a period."""

    kpis: DashboardKpis
    top_expenses: list[CategoryAmount]
    payable_status: dict[str, int]
    budget_alerts: list[BudgetAlert]
    receivables_due: list[Installment]
    payables_due: list[Installment]


class GetDashboardSummaryUseCase:
    """Compute KPIs, top expenses, budget alerts and due installments."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        start_date: date,
        end_date: date,
        today: date | None = None,
    ) -> DashboardSummary:
        """Return the dashboard summary for ``[start_date, end_date]``.

        Budget alerts cover the month of ``end_date``.

        Raises:
            InvalidRangeError: If ``start_date`` is after ``end_date``.
        """
        if start_date > end_date:
            raise InvalidRangeError(
                f"Start date {start_date} is after end date {end_date}"
            )
        today = today or date.today()
        repository = self._ledger_repository

        entries = repository.fetch_entries(start_date, end_date)
        category_names = {
            category.category_id: category.name
            for category in repository.fetch_categories()
        }
        receivables = mark_overdue(
            repository.fetch_open_installments(RECEIVABLE, end_date),
            today,
        )
        payables = mark_overdue(
            [
                item
                for item in repository.fetch_open_installments(
                    PAYABLE,
                    end_date,
                )
                if item.due_date >= start_date
            ],
            today,
        )

        month_start, month_end = month_bounds(end_date)
        month_entries = [
            entry
            for entry in entries
            if month_start <= entry.entry_date <= month_end
        ]
        alerts = evaluate_budget_alerts(
            repository.fetch_budgets(month_start),
            compute_realized_by_category(month_entries),
        )

        summary = DashboardSummary(
            kpis=compute_kpis(entries),
            top_expenses=top_expense_categories(entries, category_names),
            payable_status=count_installments_by_status(payables),
            budget_alerts=alerts,
            receivables_due=receivables,
            payables_due=payables,
        )
        self._logger.info(
            f"Dashboard {start_date} -> {end_date}: "
            f"entries={summary.kpis.entry_count}, alerts={len(alerts)}, "
            f"receivables={len(receivables)}, payables={len(payables)}"
        )
        return summary


__all__ = ["GetDashboardSummaryUseCase", "DashboardSummary"]
