"""Use case to build monthly and yearly DRE reports."""

from datetime import date

from finpilot.application.ports.ledger_repository import LedgerRepositoryPort
from finpilot.domain.errors import InvalidRangeError
from finpilot.domain.models import DREResult
from finpilot.domain.services.dre import (
    compute_monthly_dre,
    compute_yearly_dre,
)
from finpilot.infrastructure.logging.logger import get_app_logger
from finpilot.utils.date_utils import month_bounds, year_bounds


class GetDREUseCase:
    """Fetch the period's entries and roll them up into DRE results."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def monthly(self, month: int, year: int) -> DREResult:
        """Return the DRE of one month.

        Raises:
            InvalidRangeError: If ``month`` is outside 1..12.
        """
        if not 1 <= month <= 12:
            raise InvalidRangeError(f"Invalid month: {month}")
        start, end = month_bounds(date(year, month, 1))
        entries = self._ledger_repository.fetch_entries(start, end)
        self._logger.info(
            f"Fetched {len(entries)} ledger entries for DRE {year}-{month:02d}"
        )
        return compute_monthly_dre(entries, month, year)

    def yearly(self, year: int) -> list[DREResult]:
        """Return the 12 monthly DREs of a year, January first."""
        start, end = year_bounds(year)
        entries = self._ledger_repository.fetch_entries(start, end)
        self._logger.info(
            f"Fetched {len(entries)} ledger entries for DRE {year}"
        )
        return compute_yearly_dre(entries, year)


__all__ = ["GetDREUseCase", "DREResult"]
