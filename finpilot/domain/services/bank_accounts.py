"""Bank account balances, reconciliation and transfers."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from finpilot.domain.constants import EXPENSE, INCOME
from finpilot.domain.errors import InvalidAmountError
from finpilot.domain.models import (
    AccountReconciliation,
    BankAccount,
    LedgerEntry,
)
from finpilot.utils.decimal_utils import coerce_decimal


def compute_account_movement(
    entries: Iterable[LedgerEntry],
    account_id: str,
) -> Decimal:
    """Return income minus expense booked on one bank account."""
    movement = Decimal("0")
    for entry in entries:
        if entry.bank_account_id != account_id:
            continue
        amount = coerce_decimal(entry.amount)
        movement += amount if entry.direction == INCOME else -amount
    return movement


def compute_account_balance(
    opening_balance: Decimal,
    entries: Iterable[LedgerEntry],
    account_id: str,
) -> Decimal:
    """Return the opening balance plus the account's ledger movements."""
    return coerce_decimal(opening_balance) + compute_account_movement(
        entries,
        account_id,
    )


def reconcile_account(
    account: BankAccount,
    entries: Iterable[LedgerEntry],
) -> AccountReconciliation:
    """Compare the balance recorded for an account with the ledger.

    The ledger-derived balance is the sum of the account's movements.

    Args:
        account: Bank account with its recorded balance.
        entries: Ledger snapshot.

    Returns:
        AccountReconciliation: Both balances and their difference.
    """
    return AccountReconciliation(
        account_id=account.account_id,
        bank_name=account.bank_name,
        recorded_balance=coerce_decimal(account.opening_balance),
        computed_balance=compute_account_movement(
            entries,
            account.account_id,
        ),
    )


def build_transfer_entries(
    source: BankAccount,
    destination: BankAccount,
    amount: Decimal,
    transfer_date: date,
) -> tuple[LedgerEntry, LedgerEntry]:
    """Return the outgoing and incoming entries of an account transfer.

    Raises:
        InvalidAmountError: If the amount is not positive or both
            accounts are the same.
    """
    value = coerce_decimal(amount)
    if value <= 0:
        raise InvalidAmountError(f"Transfer amount must be positive: {value}")
    if source.account_id == destination.account_id:
        raise InvalidAmountError("Transfer accounts must differ.")
    outgoing = LedgerEntry(
        entry_id=None,
        direction=EXPENSE,
        amount=value,
        entry_date=transfer_date,
        bank_account_id=source.account_id,
        description=f"Transferência para {destination.bank_name}",
    )
    incoming = LedgerEntry(
        entry_id=None,
        direction=INCOME,
        amount=value,
        entry_date=transfer_date,
        bank_account_id=destination.account_id,
        description=f"Transferência de {source.bank_name}",
    )
    return outgoing, incoming


__all__ = [
    "compute_account_movement",
    "compute_account_balance",
    "reconcile_account",
    "build_transfer_entries",
]
