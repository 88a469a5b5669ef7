"""Use case to settle a receivable or payable installment.

The settlement is computed by the domain service and written back in one
transaction together with the payment ledger entry, an entry for any
residual difference, and, for recurring payables, the next occurrence.
"""

from datetime import date
from decimal import Decimal

from finpilot.application.ports.ledger_repository import (
    InstallmentRepositoryPort,
)
from finpilot.application.ports.settlement_writer import SettlementWriterPort
from finpilot.domain.constants import DISTRIBUTE, PAYABLE, RECEIVABLE
from finpilot.domain.errors import InstallmentNotFoundError
from finpilot.domain.models import SettlementResult
from finpilot.domain.services.installments import (
    build_next_occurrence,
    build_payment_entry,
    build_residual_entry,
    settle_installment,
)
from finpilot.infrastructure.logging.logger import get_app_logger


class SettleInstallmentUseCase:
    """Record a payment against an installment and persist the outcome."""

    def __init__(
        self,
        installment_repository: InstallmentRepositoryPort,
        settlement_writer: SettlementWriterPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            installment_repository: Port reading installments and series.
            settlement_writer: Port persisting the settlement.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._installment_repository = installment_repository
        self._settlement_writer = settlement_writer
        self._logger = logger or get_app_logger()

    def execute(
        self,
        installment_id: str,
        amount_paid: Decimal,
        payment_date: date,
        strategy: str = DISTRIBUTE,
        kind: str = RECEIVABLE,
        bank_account_id: str | None = None,
    ) -> SettlementResult:
        """Settle one installment.

        Args:
            installment_id: Identifier of the installment being paid.
            amount_paid: Amount actually paid.
            payment_date: Date of the payment.
            strategy: ``distribute`` or ``deduct_next``.
            kind: ``receivable`` or ``payable``.
            bank_account_id: Optional account the payment went through.

        Returns:
            SettlementResult: Settled installment, adjustments and residual.

        Raises:
            InstallmentNotFoundError: If the installment does not exist.
            AlreadySettledError: If the installment is already paid.
            InvalidAmountError: If ``amount_paid`` is not positive.
        """
        installment = self._installment_repository.fetch_installment(
            installment_id,
            kind,
        )
        if installment is None:
            raise InstallmentNotFoundError(
                f"Installment not found: {installment_id}"
            )
        series = self._installment_repository.fetch_series(
            installment.series_id,
            kind,
        )
        result = settle_installment(
            installment,
            amount_paid,
            payment_date,
            strategy,
            series=series,
        )

        entries = [build_payment_entry(result, bank_account_id)]
        residual_entry = build_residual_entry(result, bank_account_id)
        if residual_entry is not None:
            self._logger.warning(
                f"Settlement of {installment_id} left residual "
                f"{result.residual}; booking it as {residual_entry.direction}"
            )
            entries.append(residual_entry)
        next_occurrence = (
            build_next_occurrence(result.installment)
            if kind == PAYABLE
            else None
        )

        self._settlement_writer.write_settlement(
            result,
            entries,
            next_occurrence,
        )
        self._logger.info(
            f"Settled {kind} installment {installment_id}: "
            f"paid={result.installment.paid_amount}, "
            f"difference={result.difference}, "
            f"adjusted={len(result.adjustments)}"
        )
        return result


__all__ = ["SettleInstallmentUseCase", "SettlementResult"]
