"""Domain models for ledger data read from the store."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class LedgerEntry:
    """A single recorded income or expense movement.

    Attributes:
        entry_id: Store identifier (None for entries not yet persisted).
        direction: ``income`` or ``expense``.
        amount: Non-negative amount.
        entry_date: Calendar date of the movement.
        category_id: Optional category reference.
        counterparty_id: Optional client or supplier reference.
        bank_account_id: Optional bank account reference.
        description: Free-text description.
    """

    entry_id: str | None
    direction: str
    amount: Decimal
    entry_date: date
    category_id: str | None = None
    counterparty_id: str | None = None
    bank_account_id: str | None = None
    description: str = ""


@dataclass(frozen=True)
class Category:
    """Ledger category."""

    category_id: str
    name: str
    direction: str


@dataclass(frozen=True)
class BankAccount:
    """Bank account with the balance recorded by the user."""

    account_id: str
    bank_name: str
    opening_balance: Decimal


__all__ = ["LedgerEntry", "Category", "BankAccount"]
