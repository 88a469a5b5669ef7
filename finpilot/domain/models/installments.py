"""Domain models for receivable and payable installments."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from finpilot.domain.constants import OPEN_STATUSES, PAID, RECEIVABLE


@dataclass(frozen=True)
class Installment:
    """One scheduled payment unit of a receivable or payable series."""

    installment_id: str | None
    series_id: str
    sequence: int
    scheduled_amount: Decimal
    due_date: date
    status: str
    paid_amount: Decimal | None = None
    paid_date: date | None = None
    kind: str = RECEIVABLE
    total_installments: int = 1
    category_id: str | None = None
    counterparty_id: str | None = None
    description: str = ""
    is_recurring: bool = False

    @property
    def is_paid(self) -> bool:
        """Return True once the installment has been settled."""
        return self.status == PAID

    @property
    def is_open(self) -> bool:
        """Return True while the installment can still be settled."""
        return self.status in OPEN_STATUSES


@dataclass(frozen=True)
class InstallmentAdjustment:
    """Scheduled-amount change applied to a later installment."""

    installment_id: str
    sequence: int
    previous_amount: Decimal
    new_amount: Decimal

    @property
    def delta(self) -> Decimal:
        """Return the signed change applied to the scheduled amount."""
        return self.new_amount - self.previous_amount


@dataclass(frozen=True)
class SettlementResult:
    """Outcome of settling an installment.

    Attributes:
        installment: The settled installment (status ``paid``).
        difference: ``amount_paid - scheduled_amount``.
        strategy: Strategy used to resolve the difference.
        adjustments: Changes applied to later installments.
        residual: Part of the difference no later installment absorbed.
            Positive for an unabsorbed overpayment, negative for an
            unabsorbed shortfall.
    """

    installment: Installment
    difference: Decimal
    strategy: str
    adjustments: list[InstallmentAdjustment] = field(default_factory=list)
    residual: Decimal = Decimal("0")

    @property
    def has_residual(self) -> bool:
        """Return True when part of the difference was not redistributed."""
        return self.residual != 0


__all__ = ["Installment", "InstallmentAdjustment", "SettlementResult"]
