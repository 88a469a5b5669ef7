"""Ports for the one-shot migration of legacy browser data."""

from dataclasses import dataclass, field
from typing import Protocol

from finpilot.domain.constants import (
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_INCOME_CATEGORIES,
)
from finpilot.domain.models import LedgerEntry


@dataclass(frozen=True)
class LegacySnapshot:
    """Data exported from the legacy local storage.

    Attributes:
        income_categories: Income category names.
        expense_categories: Expense category names.
        clients: Client names.
        entries: Raw entry dicts with ``descricao``, ``valor``, ``data``,
            ``tipo``, ``categoria`` and ``cliente`` keys.
    """

    income_categories: tuple[str, ...] = ()
    expense_categories: tuple[str, ...] = ()
    clients: tuple[str, ...] = ()
    entries: tuple[dict, ...] = field(default_factory=tuple)

    @classmethod
    def from_storage(
        cls,
        categories: dict | None,
        clients: list | None,
        entries: list | None,
    ) -> "LegacySnapshot":
        """Build a snapshot from decoded local-storage values.

        Missing categories fall back to the legacy default lists.
        """
        if categories is None:
            categories = {
                "entradas": list(DEFAULT_INCOME_CATEGORIES),
                "saidas": list(DEFAULT_EXPENSE_CATEGORIES),
            }
        return cls(
            income_categories=tuple(categories.get("entradas") or ()),
            expense_categories=tuple(categories.get("saidas") or ()),
            clients=tuple(clients or ()),
            entries=tuple(entries or ()),
        )


class LegacyMigrationDestinationPort(Protocol):
    """Port writing migrated records into the store."""

    def upsert_categories(
        self,
        user_id: str,
        categories: list[tuple[str, str]],
    ) -> None:
        """Upsert ``(direction, name)`` categories."""

    def upsert_clients(self, user_id: str, names: list[str]) -> None:
        """Upsert clients by name."""

    def fetch_category_ids(self, user_id: str) -> dict[tuple[str, str], str]:
        """Return category ids keyed by ``(direction, name)``."""

    def fetch_client_ids(self, user_id: str) -> dict[str, str]:
        """Return client ids keyed by name."""

    def insert_entries(self, user_id: str, entries: list[LedgerEntry]) -> int:
        """Insert ledger entries and return the inserted count."""


__all__ = ["LegacySnapshot", "LegacyMigrationDestinationPort"]
