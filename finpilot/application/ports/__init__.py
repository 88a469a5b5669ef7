"""Application ports package."""

from .chat_advisor import ChatAdvisorPort, ChatMessage
from .database import DatabaseEnginePort
from .entitlements_repository import EntitlementsRepositoryPort
from .ledger_repository import InstallmentRepositoryPort, LedgerRepositoryPort
from .legacy_migration import LegacyMigrationDestinationPort, LegacySnapshot
from .settlement_writer import SettlementWriterPort

__all__ = [
    "ChatAdvisorPort",
    "ChatMessage",
    "DatabaseEnginePort",
    "EntitlementsRepositoryPort",
    "InstallmentRepositoryPort",
    "LedgerRepositoryPort",
    "LegacyMigrationDestinationPort",
    "LegacySnapshot",
    "SettlementWriterPort",
]
