"""SQLAlchemy destination for the legacy data migration."""

from sqlalchemy import text

from finpilot.application.ports.database import DatabaseEnginePort
from finpilot.application.ports.legacy_migration import (
    LegacyMigrationDestinationPort,
)
from finpilot.domain.models import LedgerEntry
from finpilot.infrastructure.ledger_repository import to_direction
from finpilot.infrastructure.settlement_writer import TO_STORE_DIRECTION

UPSERT_CATEGORY_SQL = text(
    """
    INSERT INTO categorias (user_id, nome, tipo)
    VALUES (:user_id, :nome, :tipo)
    ON CONFLICT (user_id, nome, tipo) DO NOTHING
    """
)

UPSERT_CLIENT_SQL = text(
    """
    INSERT INTO clientes (user_id, nome)
    VALUES (:user_id, :nome)
    ON CONFLICT (user_id, nome) DO NOTHING
    """
)

SELECT_CATEGORY_IDS_SQL = text(
    """
    SELECT id, nome, tipo
    FROM categorias
    WHERE user_id = :user_id
    """
)

SELECT_CLIENT_IDS_SQL = text(
    """
    SELECT id, nome
    FROM clientes
    WHERE user_id = :user_id
    """
)

INSERT_LEGACY_ENTRY_SQL = text(
    """
    INSERT INTO lancamentos (
        user_id,
        descricao,
        valor,
        data,
        tipo,
        categoria_id,
        cliente_id
    )
    VALUES (
        :user_id,
        :descricao,
        :valor,
        :data,
        :tipo,
        :categoria_id,
        :cliente_id
    )
    """
)


class SqlAlchemyLegacyMigrationDestination(LegacyMigrationDestinationPort):
    """Write migrated categories, clients and entries to the store."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the destination adapter.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def upsert_categories(
        self,
        user_id: str,
        categories: list[tuple[str, str]],
    ) -> None:
        payload = [
            {
                "user_id": user_id,
                "nome": name,
                "tipo": TO_STORE_DIRECTION[direction],
            }
            for direction, name in categories
        ]
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            conn.execute(UPSERT_CATEGORY_SQL, payload)

    def upsert_clients(self, user_id: str, names: list[str]) -> None:
        payload = [{"user_id": user_id, "nome": name} for name in names]
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            conn.execute(UPSERT_CLIENT_SQL, payload)

    def fetch_category_ids(self, user_id: str) -> dict[tuple[str, str], str]:
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_CATEGORY_IDS_SQL,
                {"user_id": user_id},
            ).all()
        return {(to_direction(row.tipo), row.nome): str(row.id) for row in rows}

    def fetch_client_ids(self, user_id: str) -> dict[str, str]:
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_CLIENT_IDS_SQL,
                {"user_id": user_id},
            ).all()
        return {row.nome: str(row.id) for row in rows}

    def insert_entries(self, user_id: str, entries: list[LedgerEntry]) -> int:
        """Insert migrated entries in one transaction.

        Args:
            user_id: Owner of the entries.
            entries: Entries built from the legacy snapshot.

        Returns:
            int: Number of entries inserted.
        """
        payload = [
            {
                "user_id": user_id,
                "descricao": entry.description,
                "valor": entry.amount,
                "data": entry.entry_date,
                "tipo": TO_STORE_DIRECTION.get(
                    entry.direction,
                    entry.direction,
                ),
                "categoria_id": entry.category_id,
                "cliente_id": entry.counterparty_id,
            }
            for entry in entries
        ]
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            if payload:
                conn.execute(INSERT_LEGACY_ENTRY_SQL, payload)
        return len(payload)


__all__ = ["SqlAlchemyLegacyMigrationDestination"]
