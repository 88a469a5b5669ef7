"""Tests for the shared CLI helpers."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from finpilot.adapters.cli_utils import format_amount, parse_date, parse_int


def test_parse_date_accepts_iso_dates() -> None:
    logger = MagicMock()

    assert parse_date("2024-02-29", logger) == date(2024, 2, 29)
    assert parse_date(None, logger) is None
    logger.warning.assert_not_called()


def test_parse_date_warns_on_invalid_value() -> None:
    logger = MagicMock()

    assert parse_date("29/02/2024", logger) is None
    logger.warning.assert_called_once()


def test_parse_int_warns_on_invalid_value() -> None:
    logger = MagicMock()

    assert parse_int("7", logger, "DRE_MONTH") == 7
    assert parse_int("july", logger, "DRE_MONTH") is None
    assert "DRE_MONTH" in logger.warning.call_args.args[0]


def test_format_amount_uses_two_decimals() -> None:
    assert format_amount(Decimal("1234.5")) == "1,234.50"
    assert format_amount(Decimal("-3")) == "-3.00"
