"""Tests for the SettleInstallmentUseCase."""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from finpilot.application.use_cases.settle_installment import (
    SettleInstallmentUseCase,
)
from finpilot.domain.constants import (
    DISTRIBUTE,
    EXPENSE,
    INCOME,
    PAID,
    PAYABLE,
    PENDING,
    RECEIVABLE,
)
from finpilot.domain.errors import (
    AlreadySettledError,
    InstallmentNotFoundError,
)
from finpilot.domain.services.installments import build_installment_schedule

PAYMENT_DATE = date(2024, 3, 12)


def _schedule(kind: str = RECEIVABLE, count: int = 4):
    return build_installment_schedule(
        "sale-1",
        Decimal("100") * count,
        count,
        date(2024, 3, 10),
        kind=kind,
        description="Venda",
        counterparty_id="client-1",
    )


def _repository(series) -> MagicMock:
    by_id = {item.installment_id: item for item in series}
    repository = MagicMock()
    repository.fetch_installment.side_effect = (
        lambda installment_id, kind: by_id.get(installment_id)
    )
    repository.fetch_series.return_value = series
    return repository


def test_execute_writes_settlement_with_payment_entry() -> None:
    """A distribute settlement writes adjustments and the payment."""
    series = _schedule()
    repository = _repository(series)
    writer = MagicMock()

    use_case = SettleInstallmentUseCase(
        repository,
        writer,
        logger=MagicMock(),
    )
    result = use_case.execute(
        "sale-1-1",
        Decimal("150"),
        PAYMENT_DATE,
        strategy=DISTRIBUTE,
        bank_account_id="bank-1",
    )

    repository.fetch_series.assert_called_once_with("sale-1", RECEIVABLE)
    assert result.installment.status == PAID
    assert [adj.new_amount for adj in result.adjustments] == [
        Decimal("83.33"),
        Decimal("83.33"),
        Decimal("83.34"),
    ]
    call = writer.write_settlement.call_args
    written_result, entries, next_occurrence = call.args
    assert written_result is result
    assert len(entries) == 1
    assert entries[0].direction == INCOME
    assert entries[0].amount == Decimal("150")
    assert entries[0].bank_account_id == "bank-1"
    assert next_occurrence is None


def test_execute_books_residual_on_last_installment() -> None:
    """A shortfall on the last installment adds a loss entry."""
    series = _schedule(count=2)
    logger = MagicMock()
    writer = MagicMock()

    SettleInstallmentUseCase(
        _repository(series),
        writer,
        logger=logger,
    ).execute("sale-1-2", Decimal("95"), PAYMENT_DATE)

    _, entries, _ = writer.write_settlement.call_args.args
    assert [entry.direction for entry in entries] == [INCOME, EXPENSE]
    assert entries[1].amount == Decimal("5")
    logger.warning.assert_called_once()


def test_execute_creates_next_occurrence_for_recurring_payable() -> None:
    """Recurring payables get their next occurrence written too."""
    series = [
        replace(item, is_recurring=True)
        for item in _schedule(kind=PAYABLE, count=1)
    ]
    writer = MagicMock()

    SettleInstallmentUseCase(
        _repository(series),
        writer,
        logger=MagicMock(),
    ).execute("sale-1-1", Decimal("100"), PAYMENT_DATE, kind=PAYABLE)

    _, entries, next_occurrence = writer.write_settlement.call_args.args
    assert entries[0].direction == EXPENSE
    assert next_occurrence.status == PENDING
    assert next_occurrence.series_id == "sale-1"
    assert next_occurrence.sequence == 2
    assert next_occurrence.due_date == date(2024, 4, 10)


def test_execute_raises_when_installment_missing() -> None:
    """Unknown installments raise InstallmentNotFoundError."""
    writer = MagicMock()

    with pytest.raises(InstallmentNotFoundError):
        SettleInstallmentUseCase(
            _repository([]),
            writer,
            logger=MagicMock(),
        ).execute("missing", Decimal("10"), PAYMENT_DATE)
    writer.write_settlement.assert_not_called()


def test_execute_does_not_write_when_already_paid() -> None:
    """Domain errors propagate and nothing is written."""
    series = _schedule()
    series[0] = replace(series[0], status=PAID)
    writer = MagicMock()

    with pytest.raises(AlreadySettledError):
        SettleInstallmentUseCase(
            _repository(series),
            writer,
            logger=MagicMock(),
        ).execute("sale-1-1", Decimal("100"), PAYMENT_DATE)
    writer.write_settlement.assert_not_called()
