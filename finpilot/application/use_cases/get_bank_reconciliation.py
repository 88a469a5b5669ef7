"""Use case comparing stored bank balances with the ledger."""

from datetime import date

from finpilot.application.ports.ledger_repository import LedgerRepositoryPort
from finpilot.domain.models import AccountReconciliation
from finpilot.domain.services.bank_accounts import reconcile_account
from finpilot.infrastructure.logging.logger import get_app_logger


class GetBankReconciliationUseCase:
    """Reconcile every bank account of the user against its entries."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        end_date: date | None = None,
    ) -> list[AccountReconciliation]:
        """Return one reconciliation per bank account.

        Args:
            end_date: Optional last day of ledger entries to include.

        Returns:
            list[AccountReconciliation]: Accounts in repository order.
        """
        accounts = self._ledger_repository.fetch_bank_accounts()
        entries = self._ledger_repository.fetch_entries(None, end_date)
        reconciliations = [
            reconcile_account(account, entries) for account in accounts
        ]
        unbalanced = [item for item in reconciliations if item.difference]
        if unbalanced:
            self._logger.warning(
                f"{len(unbalanced)} bank account(s) differ from the ledger: "
                + ", ".join(item.bank_name for item in unbalanced)
            )
        return reconciliations


__all__ = ["GetBankReconciliationUseCase"]
