"""Tests for the HTTP chat advisor client."""

import json
from unittest.mock import MagicMock

import httpx
import pytest

from finpilot.application.ports.chat_advisor import ChatMessage
from finpilot.infrastructure.chat_advisor import AdvisorError, HttpChatAdvisor

URL = "https://proxy.example/chat"


def _advisor(handler, token=None):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpChatAdvisor(URL, token=token, client=client, logger=MagicMock())


def _history():
    return [
        ChatMessage(role="system", content="contexto"),
        ChatMessage(role="user", content="Olá"),
    ]


def test_send_message_posts_history_and_returns_reply() -> None:
    """The conversation is posted and the first choice returned."""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(
            200,
            json={"choices": [{"message": {"content": "Oi!"}}]},
        )

    reply = _advisor(handler, token="secret").send_message(_history())

    assert reply == "Oi!"
    assert seen["auth"] == "Bearer secret"
    assert seen["body"] == {
        "messages": [
            {"role": "system", "content": "contexto"},
            {"role": "user", "content": "Olá"},
        ]
    }


def test_send_message_without_token_sends_no_auth_header() -> None:
    """No token means no Authorization header."""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(
            200,
            json={"choices": [{"message": {"content": "ok"}}]},
        )

    _advisor(handler).send_message(_history())

    assert seen["auth"] is None


def test_error_body_raises_with_details() -> None:
    """Proxy error bodies become AdvisorError."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={"error": "upstream", "details": "quota exceeded"},
        )

    with pytest.raises(AdvisorError, match="quota exceeded"):
        _advisor(handler).send_message(_history())


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, json={"error": "boom"}),
        httpx.Response(200, content=b"not json"),
        httpx.Response(200, json={"choices": []}),
        httpx.Response(200, json=["unexpected"]),
    ],
)
def test_bad_responses_raise_advisor_error(response) -> None:
    """Status errors, bad JSON and missing replies all raise."""
    with pytest.raises(AdvisorError):
        _advisor(lambda request: response).send_message(_history())


def test_connection_errors_raise_advisor_error() -> None:
    """Transport failures are wrapped."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(AdvisorError, match="Cannot connect"):
        _advisor(handler).send_message(_history())


def test_close_keeps_injected_client_open() -> None:
    """Injected clients are owned by the caller."""
    client = MagicMock()
    advisor = HttpChatAdvisor(URL, client=client, logger=MagicMock())

    with advisor:
        pass

    client.close.assert_not_called()
