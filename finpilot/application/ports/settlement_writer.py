"""Port for persisting settlement outcomes."""

from typing import Protocol

from finpilot.domain.models import Installment, LedgerEntry, SettlementResult


class SettlementWriterPort(Protocol):
    """Port writing a settlement back to the store.

    Implementations must write everything in a single transaction.
    """

    def write_settlement(
        self,
        result: SettlementResult,
        entries: list[LedgerEntry],
        next_occurrence: Installment | None = None,
    ) -> None:
        """Persist the settled installment, adjustments and entries."""


__all__ = ["SettlementWriterPort"]
