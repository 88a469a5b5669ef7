"""One-shot migration of legacy browser data into the store.

The caller owns the "already migrated" flag: it passes the current value
in and persists ``MigrationResult.already_migrated`` afterwards.
"""

from dataclasses import dataclass

from finpilot.application.ports.legacy_migration import (
    LegacyMigrationDestinationPort,
    LegacySnapshot,
)
from finpilot.domain.constants import EXPENSE, INCOME, STORE_DIRECTIONS
from finpilot.domain.models import LedgerEntry
from finpilot.infrastructure.logging.logger import get_app_logger
from finpilot.utils.decimal_utils import coerce_date, coerce_decimal


@dataclass(frozen=True)
class MigrationResult:
    """Outcome of a migration run."""

    migrated: bool
    category_count: int
    client_count: int
    entry_count: int
    already_migrated: bool


class MigrateLegacyDataUseCase:
    """Copy legacy categories, clients and entries into the store."""

    def __init__(
        self,
        destination: LegacyMigrationDestinationPort,
        logger=None,
    ) -> None:
        self._destination = destination
        self._logger = logger or get_app_logger()

    def run(
        self,
        user_id: str,
        snapshot: LegacySnapshot,
        already_migrated: bool = False,
    ) -> MigrationResult:
        """Migrate the snapshot unless the flag says it was done before.

        Args:
            user_id: Owner of the migrated records.
            snapshot: Legacy data to migrate.
            already_migrated: Flag persisted by a previous run.

        Returns:
            MigrationResult: Counts and the flag value to persist.
        """
        if already_migrated:
            self._logger.info(f"Legacy data already migrated for {user_id}")
            return MigrationResult(
                migrated=False,
                category_count=0,
                client_count=0,
                entry_count=0,
                already_migrated=True,
            )

        categories = [(INCOME, name) for name in snapshot.income_categories]
        categories += [(EXPENSE, name) for name in snapshot.expense_categories]
        if categories:
            self._destination.upsert_categories(user_id, categories)
        clients = list(snapshot.clients)
        if clients:
            self._destination.upsert_clients(user_id, clients)

        category_ids = self._destination.fetch_category_ids(user_id)
        client_ids = self._destination.fetch_client_ids(user_id)
        entries = [
            self._to_entry(raw, category_ids, client_ids)
            for raw in snapshot.entries
        ]
        inserted = (
            self._destination.insert_entries(user_id, entries)
            if entries
            else 0
        )

        self._logger.info(
            f"Migrated legacy data for {user_id}: "
            f"categories={len(categories)}, clients={len(clients)}, "
            f"entries={inserted}"
        )
        return MigrationResult(
            migrated=True,
            category_count=len(categories),
            client_count=len(clients),
            entry_count=inserted,
            already_migrated=True,
        )

    @staticmethod
    def _to_entry(
        raw: dict,
        category_ids: dict[tuple[str, str], str],
        client_ids: dict[str, str],
    ) -> LedgerEntry:
        direction = STORE_DIRECTIONS.get(raw.get("tipo"), raw.get("tipo"))
        return LedgerEntry(
            entry_id=None,
            direction=direction,
            amount=coerce_decimal(raw.get("valor")),
            entry_date=coerce_date(raw.get("data")),
            category_id=category_ids.get((direction, raw.get("categoria"))),
            counterparty_id=client_ids.get(raw.get("cliente")),
            description=raw.get("descricao") or "",
        )


__all__ = ["MigrateLegacyDataUseCase", "MigrationResult"]
