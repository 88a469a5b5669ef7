"""Port for reading ledger snapshots from the finance store."""

from datetime import date
from typing import Protocol

from finpilot.domain.models import (
    BankAccount,
    Category,
    CategoryBudget,
    Installment,
    LedgerEntry,
)


class LedgerRepositoryPort(Protocol):
    """Port exposing the snapshots the aggregation services consume."""

    def fetch_entries(
        self,
        start_date: date | None,
        end_date: date | None,
    ) -> list[LedgerEntry]:
        """Return ledger entries dated within the optional bounds."""

    def fetch_categories(self) -> list[Category]:
        """Return the user's categories."""

    def fetch_budgets(self, month: date) -> list[CategoryBudget]:
        """Return budget rows for the month starting at ``month``."""

    def fetch_bank_accounts(self) -> list[BankAccount]:
        """Return the user's bank accounts."""

    def fetch_open_installments(
        self,
        kind: str,
        due_until: date | None = None,
    ) -> list[Installment]:
        """Return pending or overdue installments of a kind."""


class InstallmentRepositoryPort(Protocol):
    """Port exposing installments for settlement."""

    def fetch_installment(
        self,
        installment_id: str,
        kind: str,
    ) -> Installment | None:
        """Return one installment, or None when missing."""

    def fetch_series(self, series_id: str, kind: str) -> list[Installment]:
        """Return every installment of a series ordered by sequence."""


__all__ = ["LedgerRepositoryPort", "InstallmentRepositoryPort"]
