"""Tests for the SQLAlchemy ledger repository."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from finpilot.domain.constants import (
    EXPENSE,
    INCOME,
    OVERDUE,
    PAYABLE,
    PENDING,
    RECEIVABLE,
)
from finpilot.infrastructure.ledger_repository import (
    SqlAlchemyLedgerRepository,
    to_direction,
    to_status,
)


def _repository(rows=None, first=None):
    engine = MagicMock()
    conn = engine.connect.return_value.__enter__.return_value
    conn.execute.return_value.all.return_value = rows or []
    conn.execute.return_value.first.return_value = first
    db_port = MagicMock()
    db_port.get_finance_engine.return_value = engine
    return SqlAlchemyLedgerRepository(db_port, "user-1"), conn


def _installment_row(**overrides):
    values = {
        "id": 11,
        "series_id": 7,
        "numero_parcela": 2,
        "total_parcelas": 3,
        "valor_parcela": 150.5,
        "data_vencimento": date(2024, 4, 10),
        "status": "atrasado",
        "valor_pago_efetivo": None,
        "data_pagamento": None,
        "categoria_id": None,
        "counterparty_id": 5,
        "descricao": "Parcela",
        "is_recorrente": False,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def test_store_vocabulary_is_converted() -> None:
    """Store values map to domain constants."""
    assert to_direction("entrada") == INCOME
    assert to_direction("saida") == EXPENSE
    assert to_direction(None) == EXPENSE
    assert to_status("atrasado") == OVERDUE
    assert to_status(None) == PENDING


def test_fetch_entries_filters_by_user_and_dates() -> None:
    """Entries are scoped to the user and the optional date range."""
    row = SimpleNamespace(
        id=1,
        tipo="entrada",
        valor=99.9,
        data=date(2024, 1, 3),
        categoria_id=4,
        counterparty_id=None,
        conta_bancaria_id="acc",
        descricao=None,
    )
    repository, conn = _repository(rows=[row])

    entries = repository.fetch_entries(date(2024, 1, 1), None)

    query, params = conn.execute.call_args.args
    assert "data >= :start_date" in str(query)
    assert "data <= :end_date" not in str(query)
    assert params == {"start_date": date(2024, 1, 1), "user_id": "user-1"}
    entry = entries[0]
    assert entry.entry_id == "1"
    assert entry.direction == INCOME
    assert entry.amount == Decimal("99.9")
    assert entry.category_id == "4"
    assert entry.counterparty_id is None
    assert entry.description == ""


def test_fetch_budgets_queries_first_day_of_month() -> None:
    """Budgets are looked up by the month's first day."""
    row = SimpleNamespace(
        categoria_id=3,
        mes=date(2024, 2, 1),
        meta_receita=None,
        meta_despesa="500.00",
        categoria_nome="Aluguel",
        categoria_tipo="saida",
    )
    repository, conn = _repository(rows=[row])

    budgets = repository.fetch_budgets(date(2024, 2, 17))

    _, params = conn.execute.call_args.args
    assert params["month"] == date(2024, 2, 1)
    assert budgets[0].planned_expense == Decimal("500.00")
    assert budgets[0].planned_income == Decimal("0")
    assert budgets[0].category_type == EXPENSE


def test_fetch_open_installments_reads_kind_table() -> None:
    """Payables read contas_a_pagar with supplier and recurrence."""
    repository, conn = _repository(
        rows=[_installment_row(is_recorrente=True)],
    )

    installments = repository.fetch_open_installments(
        PAYABLE,
        date(2024, 4, 30),
    )

    query, params = conn.execute.call_args.args
    sql = str(query)
    assert "FROM contas_a_pagar" in sql
    assert "fornecedor_id AS counterparty_id" in sql
    assert "data_vencimento <= :due_until" in sql
    assert params["due_until"] == date(2024, 4, 30)
    installment = installments[0]
    assert installment.kind == PAYABLE
    assert installment.status == OVERDUE
    assert installment.series_id == "7"
    assert installment.scheduled_amount == Decimal("150.5")
    assert installment.is_recurring is True


def test_receivables_are_never_recurring() -> None:
    """Receivable selects hard-code the recurrence flag."""
    repository, conn = _repository(rows=[_installment_row()])

    repository.fetch_series("7", RECEIVABLE)

    query, params = conn.execute.call_args.args
    assert "FALSE AS is_recorrente" in str(query)
    assert "venda_id = :series_id" in str(query)
    assert params == {"user_id": "user-1", "series_id": "7"}


def test_fetch_installment_returns_none_when_missing() -> None:
    """A missing row yields None."""
    repository, _ = _repository(first=None)

    assert repository.fetch_installment("42", RECEIVABLE) is None


def test_fetch_installment_maps_paid_amount() -> None:
    """Paid amounts are converted to Decimal."""
    row = _installment_row(
        status="pago",
        valor_pago_efetivo=100,
        data_pagamento=date(2024, 4, 9),
    )
    repository, _ = _repository(first=row)

    installment = repository.fetch_installment("11", RECEIVABLE)

    assert installment.is_paid
    assert installment.paid_amount == Decimal("100")


def test_unknown_kind_raises() -> None:
    """Only receivable and payable tables exist."""
    repository, _ = _repository()

    with pytest.raises(ValueError):
        repository.fetch_series("1", "loan")
