"""Transactional writer persisting installment settlements."""

from sqlalchemy import text

from finpilot.application.ports.database import DatabaseEnginePort
from finpilot.application.ports.settlement_writer import SettlementWriterPort
from finpilot.domain.constants import (
    PAYABLE,
    STORE_DIRECTIONS,
    STORE_STATUSES,
)
from finpilot.domain.models import Installment, LedgerEntry, SettlementResult
from finpilot.infrastructure.ledger_repository import INSTALLMENT_TABLES

TO_STORE_DIRECTION = {value: key for key, value in STORE_DIRECTIONS.items()}
TO_STORE_STATUS = {value: key for key, value in STORE_STATUSES.items()}

INSERT_ENTRY_SQL = text(
    """
    INSERT INTO lancamentos (
        user_id,
        tipo,
        valor,
        data,
        categoria_id,
        cliente_id,
        fornecedor_id,
        conta_bancaria_id,
        descricao
    )
    VALUES (
        :user_id,
        :tipo,
        :valor,
        :data,
        :categoria_id,
        :cliente_id,
        :fornecedor_id,
        :conta_bancaria_id,
        :descricao
    )
    """
)

INSERT_PAYABLE_SQL = text(
    """
    INSERT INTO contas_a_pagar (
        user_id,
        compra_id,
        numero_parcela,
        total_parcelas,
        valor_parcela,
        data_vencimento,
        status,
        categoria_id,
        fornecedor_id,
        descricao,
        is_recorrente
    )
    VALUES (
        :user_id,
        :series_id,
        :numero_parcela,
        :total_parcelas,
        :valor_parcela,
        :data_vencimento,
        :status,
        :categoria_id,
        :fornecedor_id,
        :descricao,
        :is_recorrente
    )
    """
)


class SqlAlchemySettlementWriter(SettlementWriterPort):
    """Settlement writer running every statement in one transaction."""

    def __init__(self, db_port: DatabaseEnginePort, user_id: str) -> None:
        """Initialize the writer.

        Args:
            db_port: Port providing access to the finance engine.
            user_id: Store user owning the written rows.
        """
        self._db_port = db_port
        self._user_id = user_id

    def write_settlement(
        self,
        result: SettlementResult,
        entries: list[LedgerEntry],
        next_occurrence: Installment | None = None,
    ) -> None:
        """Persist the settled installment, adjustments and entries.

        Args:
            result: Outcome of the settlement.
            entries: Ledger entries to insert (payment and residual).
            next_occurrence: Next instance of a recurring payable.
        """
        installment = result.installment
        table, _, _ = INSTALLMENT_TABLES[installment.kind]
        bank_account_id = next(
            (
                entry.bank_account_id
                for entry in entries
                if entry.bank_account_id
            ),
            None,
        )
        settle_sql = text(
            f"""
            UPDATE {table}
            SET status = :status,
                valor_pago_efetivo = :paid_amount,
                data_pagamento = :paid_date,
                conta_bancaria_id = COALESCE(
                    :bank_account_id,
                    conta_bancaria_id
                )
            WHERE id = :id AND user_id = :user_id
            """
        )
        adjust_sql = text(
            f"""
            UPDATE {table}
            SET valor_parcela = :amount
            WHERE id = :id AND user_id = :user_id
            """
        )
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            conn.execute(
                settle_sql,
                {
                    "status": TO_STORE_STATUS[installment.status],
                    "paid_amount": installment.paid_amount,
                    "paid_date": installment.paid_date,
                    "bank_account_id": bank_account_id,
                    "id": installment.installment_id,
                    "user_id": self._user_id,
                },
            )
            if result.adjustments:
                conn.execute(
                    adjust_sql,
                    [
                        {
                            "amount": adjustment.new_amount,
                            "id": adjustment.installment_id,
                            "user_id": self._user_id,
                        }
                        for adjustment in result.adjustments
                    ],
                )
            if entries:
                conn.execute(
                    INSERT_ENTRY_SQL,
                    [
                        self._entry_params(entry, installment.kind)
                        for entry in entries
                    ],
                )
            if next_occurrence is not None:
                conn.execute(
                    INSERT_PAYABLE_SQL,
                    self._payable_params(next_occurrence),
                )

    def _entry_params(self, entry: LedgerEntry, kind: str) -> dict:
        is_payable = kind == PAYABLE
        return {
            "user_id": self._user_id,
            "tipo": TO_STORE_DIRECTION[entry.direction],
            "valor": entry.amount,
            "data": entry.entry_date,
            "categoria_id": entry.category_id,
            "cliente_id": None if is_payable else entry.counterparty_id,
            "fornecedor_id": entry.counterparty_id if is_payable else None,
            "conta_bancaria_id": entry.bank_account_id,
            "descricao": entry.description,
        }

    def _payable_params(self, installment: Installment) -> dict:
        return {
            "user_id": self._user_id,
            "series_id": installment.series_id,
            "numero_parcela": installment.sequence,
            "total_parcelas": installment.total_installments,
            "valor_parcela": installment.scheduled_amount,
            "data_vencimento": installment.due_date,
            "status": TO_STORE_STATUS[installment.status],
            "categoria_id": installment.category_id,
            "fornecedor_id": installment.counterparty_id,
            "descricao": installment.description,
            "is_recorrente": installment.is_recurring,
        }


__all__ = [
    "SqlAlchemySettlementWriter",
    "TO_STORE_DIRECTION",
    "TO_STORE_STATUS",
]
