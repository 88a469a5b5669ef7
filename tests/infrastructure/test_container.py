"""Tests for the infrastructure composition root."""

from unittest.mock import MagicMock

import pytest

from finpilot.infrastructure import container
from finpilot.infrastructure.chat_advisor import HttpChatAdvisor
from finpilot.infrastructure.ledger_repository import (
    SqlAlchemyLedgerRepository,
)
from finpilot.infrastructure.settings import FinanceSettings
from finpilot.infrastructure.settlement_writer import (
    SqlAlchemySettlementWriter,
)


def test_build_ledger_repository_scopes_to_user() -> None:
    """The repository is bound to the configured user."""
    db_port = MagicMock()

    repository = container.build_ledger_repository(
        db_port,
        FinanceSettings(user_id="u1"),
    )

    assert isinstance(repository, SqlAlchemyLedgerRepository)
    assert repository._user_id == "u1"
    assert repository._db_port is db_port


def test_build_settlement_writer_requires_user() -> None:
    """Writers cannot be built without a user id."""
    assert isinstance(
        container.build_settlement_writer(
            MagicMock(),
            FinanceSettings(user_id="u1"),
        ),
        SqlAlchemySettlementWriter,
    )
    with pytest.raises(RuntimeError, match="FINPILOT_USER_ID"):
        container.build_settlement_writer(MagicMock(), FinanceSettings())


def test_build_chat_advisor_uses_settings(monkeypatch) -> None:
    """The advisor is configured from settings."""
    monkeypatch.setattr(container, "get_app_logger", MagicMock)
    settings = FinanceSettings(
        advisor_url="https://proxy/chat",
        advisor_token="secret",
        advisor_timeout=5.0,
    )

    advisor = container.build_chat_advisor(settings)

    assert isinstance(advisor, HttpChatAdvisor)
    assert advisor.url == "https://proxy/chat"
    assert advisor.timeout == 5.0
    advisor.close()


def test_build_chat_advisor_requires_url() -> None:
    """A missing proxy URL is a configuration error."""
    with pytest.raises(RuntimeError, match="FINPILOT_ADVISOR_URL"):
        container.build_chat_advisor(FinanceSettings())
