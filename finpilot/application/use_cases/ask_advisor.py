"""Use case forwarding a question to the AI financial advisor."""

from collections.abc import Sequence
from datetime import date
import json

from finpilot.application.ports.chat_advisor import (
    ChatAdvisorPort,
    ChatMessage,
)
from finpilot.application.ports.ledger_repository import LedgerRepositoryPort
from finpilot.domain.services.advisor import build_financial_summary
from finpilot.domain.services.budget import (
    build_budget_overview,
    compute_realized_by_category,
)
from finpilot.infrastructure.logging.logger import get_app_logger
from finpilot.utils.date_utils import month_bounds

SYSTEM_PROMPT = """\
Você é o conselheiro financeiro da plataforma. Responda em português do \
Brasil, em markdown, com linguagem simples e objetiva.
Baseie-se apenas no resumo de dados fornecido abaixo. Se a informação \
necessária não estiver no resumo, diga que não há dados disponíveis.
Nunca peça dados pessoais ou sensíveis e recuse pedidos fora do escopo \
financeiro.
"""


class AskAdvisorUseCase:
    """Build the advisor prompt from a ledger summary and send it."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        advisor: ChatAdvisorPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._advisor = advisor
        self._logger = logger or get_app_logger()

    def execute(
        self,
        question: str,
        history: Sequence[ChatMessage] = (),
        today: date | None = None,
    ) -> str:
        """Return the advisor's reply to ``question``.

        Args:
            question: New user message.
            history: Previous user and assistant messages, oldest first.
            today: Reference day for the budget month.

        Returns:
            str: Assistant reply.

        Raises:
            ValueError: If the question is blank.
        """
        if not question or not question.strip():
            raise ValueError("Question must not be empty.")
        system_prompt = self.build_system_prompt(today)
        messages = [
            ChatMessage(role="system", content=system_prompt),
            *history,
            ChatMessage(role="user", content=question.strip()),
        ]
        self._logger.info(f"Sending {len(messages)} messages to the advisor")
        return self._advisor.send_message(messages)

    def build_system_prompt(self, today: date | None = None) -> str:
        """Return the system prompt with the current financial summary."""
        start, end = month_bounds(today or date.today())
        repository = self._ledger_repository
        entries = repository.fetch_entries(None, None)
        categories = repository.fetch_categories()
        month_entries = [
            entry for entry in entries if start <= entry.entry_date <= end
        ]
        budget_lines = build_budget_overview(
            categories,
            repository.fetch_budgets(start),
            compute_realized_by_category(month_entries),
        )
        summary = build_financial_summary(
            entries,
            {category.category_id: category.name for category in categories},
            budget_lines,
        )
        context = json.dumps(summary, ensure_ascii=False, indent=2)
        return (
            f"{SYSTEM_PROMPT}\n## CONTEXTO RESUMIDO ##\n{context}\n"
            "## FIM DO CONTEXTO ##"
        )


__all__ = ["AskAdvisorUseCase", "SYSTEM_PROMPT"]
