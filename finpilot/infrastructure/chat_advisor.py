"""HTTP client for the hosted AI chat proxy.

The proxy accepts ``{"messages": [{"role", "content"}, ...]}`` and answers
with an OpenAI-style chat completion body. Application errors are reported
in the body as ``{"error": ..., "details": ...}``.
"""

from typing import Any, Optional

import httpx

from finpilot.application.ports.chat_advisor import ChatAdvisorPort, ChatMessage
from finpilot.infrastructure.logging.logger import get_app_logger


class AdvisorError(Exception):
    """Exception raised when the chat proxy fails."""


class HttpChatAdvisor(ChatAdvisorPort):
    """Chat advisor posting conversations to the hosted proxy.

    Usage:
        with HttpChatAdvisor(url, token=token) as advisor:
            reply = advisor.send_message(history)
    """

    def __init__(
        self,
        url: str,
        token: Optional[str] = None,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
        logger=None,
    ) -> None:
        """Initialize the chat client.

        Args:
            url: Endpoint of the chat proxy function.
            token: Optional bearer token sent with each request.
            timeout: Request timeout in seconds.
            client: Optional preconfigured httpx client.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self.url = url
        self.timeout = timeout
        self._token = token
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(timeout),
        )
        self._logger = logger or get_app_logger()

    def __enter__(self) -> "HttpChatAdvisor":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client when it was created here."""
        if self._owns_client:
            self._client.close()

    def send_message(self, history: list[ChatMessage]) -> str:
        """Send the conversation and return the assistant reply.

        Args:
            history: Messages in order, system prompt first.

        Returns:
            str: Content of the first completion choice.

        Raises:
            AdvisorError: If the proxy is unreachable, answers with an error,
                or returns a body without a reply.
        """
        payload = {
            "messages": [
                {"role": message.role, "content": message.content}
                for message in history
            ]
        }
        headers = {}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        try:
            response = self._client.post(
                self.url,
                json=payload,
                headers=headers,
            )
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as exc:
            raise AdvisorError("Chat proxy request timed out") from exc
        except httpx.ConnectError as exc:
            raise AdvisorError(
                f"Cannot connect to chat proxy at {self.url}"
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise AdvisorError(f"Chat proxy returned error: {exc}") from exc
        except ValueError as exc:
            raise AdvisorError("Chat proxy returned invalid JSON") from exc
        return self._extract_reply(data)

    def _extract_reply(self, data: Any) -> str:
        if not isinstance(data, dict):
            raise AdvisorError("Chat proxy returned an unexpected body")
        if data.get("error"):
            detail = data.get("details") or data["error"]
            self._logger.error(f"Chat proxy error: {detail}")
            raise AdvisorError(f"Chat proxy error: {detail}")
        try:
            return data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise AdvisorError("Chat proxy response has no reply") from exc


__all__ = ["AdvisorError", "HttpChatAdvisor"]
