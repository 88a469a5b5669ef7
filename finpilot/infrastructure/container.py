"""Composition root for wiring infrastructure adapters."""

from finpilot.application.ports.chat_advisor import ChatAdvisorPort
from finpilot.application.ports.database import DatabaseEnginePort
from finpilot.application.ports.entitlements_repository import (
    EntitlementsRepositoryPort,
)
from finpilot.application.ports.legacy_migration import (
    LegacyMigrationDestinationPort,
)
from finpilot.application.ports.settlement_writer import SettlementWriterPort
from finpilot.infrastructure.chat_advisor import HttpChatAdvisor
from finpilot.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from finpilot.infrastructure.entitlements_repository import (
    SqlAlchemyEntitlementsRepository,
)
from finpilot.infrastructure.ledger_repository import (
    SqlAlchemyLedgerRepository,
)
from finpilot.infrastructure.legacy_migration import (
    SqlAlchemyLegacyMigrationDestination,
)
from finpilot.infrastructure.logging.logger import get_app_logger
from finpilot.infrastructure.settings import FinanceSettings
from finpilot.infrastructure.settlement_writer import (
    SqlAlchemySettlementWriter,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: FinanceSettings | None = None,
) -> SqlAlchemyLedgerRepository:
    """Return the ledger repository scoped to the configured user.

    The returned object serves both ledger snapshots and installments.
    """
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or FinanceSettings.from_env()
    return SqlAlchemyLedgerRepository(
        resolved_db,
        resolved_settings.require_user_id(),
    )


def build_settlement_writer(
    db_port: DatabaseEnginePort | None = None,
    settings: FinanceSettings | None = None,
) -> SettlementWriterPort:
    """Return the transactional settlement writer."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or FinanceSettings.from_env()
    return SqlAlchemySettlementWriter(
        resolved_db,
        resolved_settings.require_user_id(),
    )


def build_entitlements_repository(
    db_port: DatabaseEnginePort | None = None,
) -> EntitlementsRepositoryPort:
    """Return the entitlements repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyEntitlementsRepository(resolved_db)


def build_legacy_migration_destination(
    db_port: DatabaseEnginePort | None = None,
) -> LegacyMigrationDestinationPort:
    """Return the legacy migration destination adapter."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLegacyMigrationDestination(resolved_db)


def build_chat_advisor(
    settings: FinanceSettings | None = None,
) -> ChatAdvisorPort:
    """Return the chat advisor client for the hosted proxy."""
    resolved_settings = settings or FinanceSettings.from_env()
    if not resolved_settings.advisor_url:
        raise RuntimeError(
            "Missing environment variable: FINPILOT_ADVISOR_URL"
        )
    return HttpChatAdvisor(
        resolved_settings.advisor_url,
        token=resolved_settings.advisor_token,
        timeout=resolved_settings.advisor_timeout,
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_settlement_writer",
    "build_entitlements_repository",
    "build_legacy_migration_destination",
    "build_chat_advisor",
]
