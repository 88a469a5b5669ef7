"""Installment schedules and settlement of partial or excess payments.

When a payment differs from the scheduled amount, the difference is
pushed onto the open installments that follow in the same series:

* ``distribute`` splits it evenly over all of them. Every share gets the
  truncated cent amount and the leftover cents go one at a time to the
  first installments, so shares carry the sign of the difference, differ
  by at most one cent and add up to the difference.
* ``deduct_next`` applies it entirely to the next installment.

An overpayment lowers what remains to be paid, a shortfall raises it.
Whatever cannot be absorbed (no later installment, or an amount that
would go below zero) is reported as ``SettlementResult.residual``.
Absorption is per installment: an installment clamped at zero does not
pass its excess on to the later ones.
"""

from collections.abc import Iterable, Sequence
from dataclasses import replace
from datetime import date
from decimal import Decimal

from dateutil.relativedelta import relativedelta

from finpilot.domain.constants import (
    DIFFERENCE_STRATEGIES,
    DISTRIBUTE,
    EXPENSE,
    INCOME,
    OVERDUE,
    PAID,
    PENDING,
    RECEIVABLE,
)
from finpilot.domain.errors import (
    AlreadySettledError,
    InvalidAmountError,
    InvalidStrategyError,
)
from finpilot.domain.models import (
    Installment,
    InstallmentAdjustment,
    LedgerEntry,
    SettlementResult,
)
from finpilot.utils.decimal_utils import CENT, coerce_decimal, quantize_cents


def split_evenly(total: Decimal, parts: int) -> list[Decimal]:
    """Split ``total`` into ``parts`` cent shares (largest remainder).

    Args:
        total: Signed amount to split, rounded half up to cents first.
        parts: Number of shares (at least 1).

    Returns:
        list[Decimal]: Shares with the sign of ``total`` that differ by at
        most one cent and sum exactly to the rounded total. The leftover
        cents go to the first shares.
    """
    if parts < 1:
        raise ValueError("parts must be at least 1")
    cents = int(quantize_cents(total) / CENT)
    sign = -1 if cents < 0 else 1
    base, leftover = divmod(abs(cents), parts)
    return [
        sign * (base + (1 if index < leftover else 0)) * CENT
        for index in range(parts)
    ]


def remaining_installments(
    installment: Installment,
    series: Iterable[Installment],
) -> list[Installment]:
    """Return the open installments after ``installment`` in its series."""
    return sorted(
        (
            item
            for item in series
            if item.series_id == installment.series_id
            and item.sequence > installment.sequence
            and item.is_open
        ),
        key=lambda item: item.sequence,
    )


def settle_installment(
    installment: Installment,
    amount_paid: Decimal,
    payment_date: date,
    strategy: str,
    series: Sequence[Installment] = (),
) -> SettlementResult:
    """Record a payment against an installment.

    Args:
        installment: Installment being paid.
        amount_paid: Amount actually paid.
        payment_date: Date of the payment.
        strategy: ``distribute`` or ``deduct_next``.
        series: Other installments of the same series.

    Returns:
        SettlementResult: Settled installment, adjustments and residual.

    Raises:
        AlreadySettledError: If the installment is already paid.
        InvalidAmountError: If ``amount_paid`` is not positive.
        InvalidStrategyError: If ``strategy`` is unknown.
    """
    if installment.is_paid:
        raise AlreadySettledError(
            f"Installment {installment.installment_id} is already paid"
        )
    amount = coerce_decimal(amount_paid)
    if amount <= 0:
        raise InvalidAmountError(
            f"Payment amount must be positive, got {amount}"
        )
    if strategy not in DIFFERENCE_STRATEGIES:
        raise InvalidStrategyError(f"Unknown difference strategy: {strategy}")

    scheduled = coerce_decimal(installment.scheduled_amount)
    difference = amount - scheduled
    settled = replace(
        installment,
        status=PAID,
        paid_amount=amount,
        paid_date=payment_date,
    )
    if difference == 0:
        return SettlementResult(
            installment=settled,
            difference=difference,
            strategy=strategy,
        )

    remaining = remaining_installments(installment, series)
    if not remaining:
        return SettlementResult(
            installment=settled,
            difference=difference,
            strategy=strategy,
            residual=difference,
        )

    if strategy == DISTRIBUTE:
        targets = remaining
        shares = split_evenly(difference, len(remaining))
    else:
        targets = remaining[:1]
        shares = [difference]

    adjustments: list[InstallmentAdjustment] = []
    residual = Decimal("0")
    for target, share in zip(targets, shares):
        previous = coerce_decimal(target.scheduled_amount)
        new_amount = previous - share
        if new_amount < 0:
            residual += -new_amount
            new_amount = Decimal("0.00")
        adjustments.append(
            InstallmentAdjustment(
                installment_id=target.installment_id,
                sequence=target.sequence,
                previous_amount=previous,
                new_amount=new_amount,
            )
        )

    return SettlementResult(
        installment=settled,
        difference=difference,
        strategy=strategy,
        adjustments=adjustments,
        residual=residual,
    )


def apply_adjustments(
    series: Iterable[Installment],
    result: SettlementResult,
) -> list[Installment]:
    """Return the series with the settlement applied (inputs untouched)."""
    new_amounts = {
        adjustment.installment_id: adjustment.new_amount
        for adjustment in result.adjustments
    }
    updated: list[Installment] = []
    for item in series:
        if item.installment_id == result.installment.installment_id:
            updated.append(result.installment)
        elif item.installment_id in new_amounts:
            updated.append(
                replace(
                    item,
                    scheduled_amount=new_amounts[item.installment_id],
                )
            )
        else:
            updated.append(item)
    return updated


def build_installment_schedule(
    series_id: str,
    total_amount: Decimal,
    count: int,
    first_due_date: date,
    *,
    kind: str = RECEIVABLE,
    description: str = "",
    category_id: str | None = None,
    counterparty_id: str | None = None,
) -> list[Installment]:
    """Split a sale or purchase into monthly installments.

    Args:
        series_id: Identifier shared by every installment of the series.
        total_amount: Total to be paid.
        count: Number of installments.
        first_due_date: Due date of the first installment.
        kind: ``receivable`` or ``payable``.
        description: Base description, suffixed with ``(i/n)``.
        category_id: Optional category reference.
        counterparty_id: Optional client or supplier reference.

    Returns:
        list[Installment]: Pending installments, one month apart.

    Raises:
        InvalidAmountError: If the total or the count is not positive.
    """
    total = coerce_decimal(total_amount)
    if total <= 0:
        raise InvalidAmountError(f"Total amount must be positive: {total}")
    if count < 1:
        raise InvalidAmountError(
            f"Installment count must be positive: {count}"
        )
    amounts = split_evenly(total, count)
    return [
        Installment(
            installment_id=f"{series_id}-{sequence}",
            series_id=series_id,
            sequence=sequence,
            scheduled_amount=amount,
            due_date=first_due_date + relativedelta(months=sequence - 1),
            status=PENDING,
            kind=kind,
            total_installments=count,
            category_id=category_id,
            counterparty_id=counterparty_id,
            description=f"{description} ({sequence}/{count})".strip(),
        )
        for sequence, amount in enumerate(amounts, start=1)
    ]


def mark_overdue(
    installments: Iterable[Installment],
    today: date,
) -> list[Installment]:
    """Move pending installments whose due date has passed to overdue."""
    return [
        replace(item, status=OVERDUE)
        if item.status == PENDING and item.due_date < today
        else item
        for item in installments
    ]


def next_recurring_due_date(due_date: date) -> date:
    """Return the due date of the next occurrence of a recurring bill."""
    return due_date + relativedelta(months=1)


def build_next_occurrence(settled: Installment) -> Installment | None:
    """Return the next pending occurrence of a recurring installment.

    The occurrence stays in the settled installment's series with the next
    sequence number, so sequences remain unique and increasing.
    """
    if not settled.is_recurring:
        return None
    sequence = settled.sequence + 1
    return replace(
        settled,
        installment_id=None,
        sequence=sequence,
        total_installments=max(settled.total_installments, sequence),
        due_date=next_recurring_due_date(settled.due_date),
        status=PENDING,
        paid_amount=None,
        paid_date=None,
    )


def build_payment_entry(
    result: SettlementResult,
    bank_account_id: str | None = None,
) -> LedgerEntry:
    """Return the ledger entry recording the settlement payment."""
    installment = result.installment
    return LedgerEntry(
        entry_id=None,
        direction=INCOME if installment.kind == RECEIVABLE else EXPENSE,
        amount=coerce_decimal(installment.paid_amount),
        entry_date=installment.paid_date,
        category_id=installment.category_id,
        counterparty_id=installment.counterparty_id,
        bank_account_id=bank_account_id,
        description=installment.description,
    )


def build_residual_entry(
    result: SettlementResult,
    bank_account_id: str | None = None,
) -> LedgerEntry | None:
    """Turn an unabsorbed settlement difference into a ledger entry.

    On a receivable, a shortfall is booked as a loss (expense) and an
    excess as a credit (income). Payables mirror this.

    Returns:
        LedgerEntry | None: Entry to record, or None without residual.
    """
    if not result.has_residual:
        return None
    installment = result.installment
    is_receivable = installment.kind == RECEIVABLE
    gain = (result.residual > 0) == is_receivable
    if result.residual < 0:
        label = (
            "Perda no pagamento final"
            if is_receivable
            else "Desconto no pagamento final"
        )
    else:
        label = (
            "Crédito de pagamento" if is_receivable else "Pagamento excedente"
        )
    return LedgerEntry(
        entry_id=None,
        direction=INCOME if gain else EXPENSE,
        amount=abs(result.residual),
        entry_date=installment.paid_date,
        counterparty_id=installment.counterparty_id,
        bank_account_id=bank_account_id,
        description=f"{label} - {installment.description}",
    )


__all__ = [
    "split_evenly",
    "remaining_installments",
    "settle_installment",
    "apply_adjustments",
    "build_installment_schedule",
    "mark_overdue",
    "next_recurring_due_date",
    "build_next_occurrence",
    "build_payment_entry",
    "build_residual_entry",
]
