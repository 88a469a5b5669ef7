"""Port for the hosted AI chat proxy."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class ChatMessage:
    """One chat message (role is ``system``, ``user`` or ``assistant``)."""

    role: str
    content: str


class ChatAdvisorPort(Protocol):
    """Port sending a conversation to the LLM proxy."""

    def send_message(self, history: list[ChatMessage]) -> str:
        """Return the assistant reply for the conversation."""


__all__ = ["ChatMessage", "ChatAdvisorPort"]
