"""SQLAlchemy-backed repository for ledger, budget and installment data.

Every query is scoped to a single store user. Store vocabulary
(``entrada``/``saida``, ``pendente``/``pago``/``atrasado``) is converted to
the domain constants at this boundary.
"""

from datetime import date

from sqlalchemy import text

from finpilot.application.ports.database import DatabaseEnginePort
from finpilot.application.ports.ledger_repository import (
    InstallmentRepositoryPort,
    LedgerRepositoryPort,
)
from finpilot.domain.constants import (
    EXPENSE,
    PAYABLE,
    PENDING,
    RECEIVABLE,
    STORE_DIRECTIONS,
    STORE_STATUSES,
)
from finpilot.domain.models import (
    BankAccount,
    Category,
    CategoryBudget,
    Installment,
    LedgerEntry,
)
from finpilot.utils.date_utils import month_bounds
from finpilot.utils.decimal_utils import coerce_decimal

# Table, series column and counterparty column per installment kind.
INSTALLMENT_TABLES = {
    RECEIVABLE: ("contas_receber", "venda_id", "cliente_id"),
    PAYABLE: ("contas_a_pagar", "compra_id", "fornecedor_id"),
}

SELECT_CATEGORIES_SQL = text(
    """
    SELECT id, nome, tipo
    FROM categorias
    WHERE user_id = :user_id
    ORDER BY nome
    """
)

SELECT_BUDGETS_SQL = text(
    """
    SELECT o.categoria_id AS categoria_id,
           o.mes AS mes,
           o.meta_receita AS meta_receita,
           o.meta_despesa AS meta_despesa,
           c.nome AS categoria_nome,
           c.tipo AS categoria_tipo
    FROM orcamento_mensal o
    LEFT JOIN categorias c ON c.id = o.categoria_id
    WHERE o.user_id = :user_id AND o.mes = :month
    """
)

SELECT_BANK_ACCOUNTS_SQL = text(
    """
    SELECT id, nome_banco, saldo_inicial
    FROM contas_bancarias
    WHERE user_id = :user_id
    ORDER BY nome_banco
    """
)


def to_direction(raw_value: str | None) -> str:
    """Convert a store direction to ``income`` or ``expense``."""
    if raw_value is None:
        return EXPENSE
    return STORE_DIRECTIONS.get(raw_value, raw_value)


def to_status(raw_value: str | None) -> str:
    """Convert a store installment status to the domain status."""
    if raw_value is None:
        return PENDING
    return STORE_STATUSES.get(raw_value, raw_value)


def _optional_str(value) -> str | None:
    if value is None:
        return None
    return str(value)


class SqlAlchemyLedgerRepository(
    LedgerRepositoryPort,
    InstallmentRepositoryPort,
):
    """Repository backed by SQLAlchemy for the finance store."""

    def __init__(self, db_port: DatabaseEnginePort, user_id: str) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
            user_id: Store user whose rows are read.
        """
        self._db_port = db_port
        self._user_id = user_id

    def fetch_entries(
        self,
        start_date: date | None,
        end_date: date | None,
    ) -> list[LedgerEntry]:
        query = self._build_entries_query(start_date, end_date)
        params = self._build_date_params(start_date, end_date)
        params["user_id"] = self._user_id
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [self._to_entry(row) for row in rows]

    def fetch_categories(self) -> list[Category]:
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_CATEGORIES_SQL,
                {"user_id": self._user_id},
            ).all()
        return [
            Category(
                category_id=str(row.id),
                name=row.nome,
                direction=to_direction(row.tipo),
            )
            for row in rows
        ]

    def fetch_budgets(self, month: date) -> list[CategoryBudget]:
        month_start, _ = month_bounds(month)
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_BUDGETS_SQL,
                {"user_id": self._user_id, "month": month_start},
            ).all()
        return [
            CategoryBudget(
                category_id=str(row.categoria_id),
                month=row.mes,
                planned_expense=coerce_decimal(row.meta_despesa),
                planned_income=coerce_decimal(row.meta_receita),
                category_name=row.categoria_nome,
                category_type=(
                    to_direction(row.categoria_tipo)
                    if row.categoria_tipo
                    else None
                ),
            )
            for row in rows
        ]

    def fetch_bank_accounts(self) -> list[BankAccount]:
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_BANK_ACCOUNTS_SQL,
                {"user_id": self._user_id},
            ).all()
        return [
            BankAccount(
                account_id=str(row.id),
                bank_name=row.nome_banco,
                opening_balance=coerce_decimal(row.saldo_inicial),
            )
            for row in rows
        ]

    def fetch_open_installments(
        self,
        kind: str,
        due_until: date | None = None,
    ) -> list[Installment]:
        sql = self._build_installments_select(kind)
        sql += " AND status IN ('pendente', 'atrasado')"
        params: dict[str, object] = {"user_id": self._user_id}
        if due_until:
            sql += " AND data_vencimento <= :due_until"
            params["due_until"] = due_until
        sql += " ORDER BY data_vencimento, numero_parcela"
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(text(sql), params).all()
        return [self._to_installment(row, kind) for row in rows]

    def fetch_installment(
        self,
        installment_id: str,
        kind: str,
    ) -> Installment | None:
        sql = self._build_installments_select(kind) + " AND id = :id"
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            row = conn.execute(
                text(sql),
                {"user_id": self._user_id, "id": installment_id},
            ).first()
        if row is None:
            return None
        return self._to_installment(row, kind)

    def fetch_series(self, series_id: str, kind: str) -> list[Installment]:
        _, series_column, _ = self._table_for(kind)
        sql = self._build_installments_select(kind)
        sql += f" AND {series_column} = :series_id ORDER BY numero_parcela"
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                text(sql),
                {"user_id": self._user_id, "series_id": series_id},
            ).all()
        return [self._to_installment(row, kind) for row in rows]

    @staticmethod
    def _table_for(kind: str) -> tuple[str, str, str]:
        try:
            return INSTALLMENT_TABLES[kind]
        except KeyError as exc:
            raise ValueError(f"Unknown installment kind: {kind}") from exc

    @classmethod
    def _build_installments_select(cls, kind: str) -> str:
        table, series_column, counterparty_column = cls._table_for(kind)
        recurring = "is_recorrente" if kind == PAYABLE else "FALSE"
        return f"""
        SELECT id,
               {series_column} AS series_id,
               numero_parcela,
               total_parcelas,
               valor_parcela,
               data_vencimento,
               status,
               valor_pago_efetivo,
               data_pagamento,
               categoria_id,
               {counterparty_column} AS counterparty_id,
               descricao,
               {recurring} AS is_recorrente
        FROM {table}
        WHERE user_id = :user_id
        """

    @staticmethod
    def _build_entries_query(
        start_date: date | None,
        end_date: date | None,
    ):
        base_sql = """
        SELECT id,
               tipo,
               valor,
               data,
               categoria_id,
               COALESCE(cliente_id, fornecedor_id) AS counterparty_id,
               conta_bancaria_id,
               descricao
        FROM lancamentos
        WHERE user_id = :user_id
        """
        if start_date:
            base_sql += " AND data >= :start_date"
        if end_date:
            base_sql += " AND data <= :end_date"
        base_sql += " ORDER BY data, id"
        return text(base_sql)

    @staticmethod
    def _build_date_params(
        start_date: date | None,
        end_date: date | None,
    ) -> dict[str, object]:
        params: dict[str, object] = {}
        if start_date:
            params["start_date"] = start_date
        if end_date:
            params["end_date"] = end_date
        return params

    @staticmethod
    def _to_entry(row) -> LedgerEntry:
        return LedgerEntry(
            entry_id=_optional_str(row.id),
            direction=to_direction(row.tipo),
            amount=coerce_decimal(row.valor),
            entry_date=row.data,
            category_id=_optional_str(row.categoria_id),
            counterparty_id=_optional_str(row.counterparty_id),
            bank_account_id=_optional_str(row.conta_bancaria_id),
            description=row.descricao or "",
        )

    @staticmethod
    def _to_installment(row, kind: str) -> Installment:
        paid_amount = row.valor_pago_efetivo
        return Installment(
            installment_id=_optional_str(row.id),
            series_id=str(row.series_id),
            sequence=int(row.numero_parcela),
            scheduled_amount=coerce_decimal(row.valor_parcela),
            due_date=row.data_vencimento,
            status=to_status(row.status),
            paid_amount=(
                coerce_decimal(paid_amount)
                if paid_amount is not None
                else None
            ),
            paid_date=row.data_pagamento,
            kind=kind,
            total_installments=int(row.total_parcelas or 1),
            category_id=_optional_str(row.categoria_id),
            counterparty_id=_optional_str(row.counterparty_id),
            description=row.descricao or "",
            is_recurring=bool(row.is_recorrente),
        )


__all__ = [
    "INSTALLMENT_TABLES",
    "SqlAlchemyLedgerRepository",
    "to_direction",
    "to_status",
]
