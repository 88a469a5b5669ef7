"""Use case to compute the cash-flow projection for a period."""

from datetime import date

from finpilot.application.ports.ledger_repository import LedgerRepositoryPort
from finpilot.domain.errors import InvalidRangeError
from finpilot.domain.models import CashflowProjection
from finpilot.domain.services.cashflow import aggregate_cashflow
from finpilot.infrastructure.logging.logger import get_app_logger


class GetCashflowUseCase:
    """Compute bucketed cash flow and running balance from ledger entries."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, start_date: date, end_date: date) -> CashflowProjection:
        """Return the cash-flow projection for ``[start_date, end_date]``.

        Args:
            start_date: First day of the period.
            end_date: Last day of the period.

        Returns:
            CashflowProjection: Dense buckets and period totals.

        Raises:
            InvalidRangeError: If ``start_date`` is after ``end_date``.
        """
        if start_date > end_date:
            raise InvalidRangeError(
                f"Start date {start_date} is after end date {end_date}"
            )
        entries = self._ledger_repository.fetch_entries(start_date, end_date)
        self._logger.info(
            f"Fetched {len(entries)} ledger entries for cashflow "
            f"{start_date} -> {end_date}"
        )
        projection = aggregate_cashflow(entries, start_date, end_date)
        self._logger.info(
            f"Cashflow computed: granularity={projection.granularity}, "
            f"buckets={len(projection.buckets)}, "
            f"in={projection.total_income}, out={projection.total_expense}"
        )
        return projection


__all__ = ["GetCashflowUseCase", "CashflowProjection"]
