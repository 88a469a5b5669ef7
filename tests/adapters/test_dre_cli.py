"""Tests for the DRE CLI adapter."""

from decimal import Decimal
from unittest.mock import MagicMock

from finpilot.adapters import dre_cli
from finpilot.domain.models import DREResult


def _result(month: int, revenue: str, expense: str) -> DREResult:
    return DREResult(
        year=2024,
        month=month,
        revenue=Decimal(revenue),
        expense=Decimal(expense),
        margin=Decimal("0"),
    )


def _patch(monkeypatch, use_case) -> None:
    monkeypatch.setattr(dre_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(dre_cli, "build_ledger_repository", MagicMock)
    monkeypatch.setattr(
        dre_cli,
        "GetDREUseCase",
        lambda ledger_repository, logger=None: use_case,
    )


def test_main_prints_single_month(monkeypatch, capsys):
    """DRE_MONTH selects one month."""
    use_case = MagicMock()
    use_case.monthly.return_value = _result(3, "1000", "400")
    monkeypatch.setenv("DRE_YEAR", "2024")
    monkeypatch.setenv("DRE_MONTH", "3")
    _patch(monkeypatch, use_case)

    dre_cli.main()

    use_case.monthly.assert_called_once_with(3, 2024)
    use_case.yearly.assert_not_called()
    output = capsys.readouterr().out
    assert output.startswith("2024-03")
    assert "result=600.00" in output


def test_main_prints_year_with_totals(monkeypatch, capsys):
    """Without a month, every month and the year total are printed."""
    use_case = MagicMock()
    use_case.yearly.return_value = [
        _result(month, "100", "30") for month in range(1, 13)
    ]
    monkeypatch.setenv("DRE_YEAR", "2024")
    monkeypatch.delenv("DRE_MONTH", raising=False)
    _patch(monkeypatch, use_case)

    dre_cli.main()

    lines = capsys.readouterr().out.splitlines()
    use_case.yearly.assert_called_once_with(2024)
    assert len(lines) == 13
    assert lines[-1] == (
        "Year 2024: revenue=1,200.00, expense=360.00, result=840.00"
    )
