"""Conversation state for the financial assistant panel."""

from __future__ import annotations

import logging

from .api import ApiClient, ApiError, ChatMessage

logger = logging.getLogger(__name__)

CHAT_ERROR_MESSAGE = "Sorry, I encountered an error. Please try again."


class ChatSession:
    """Chat history proxied to the backend ``/chat`` endpoint."""

    def __init__(self, client: ApiClient) -> None:
        self.client = client
        self.messages: list[ChatMessage] = []
        self.is_loading = False

    def send(self, text: str) -> ChatMessage | None:
        """Send ``text`` and return the assistant reply appended to the history.

        Blank input, or input while a reply is outstanding, is ignored and
        returns ``None``.
        """

        if not text.strip() or self.is_loading:
            return None

        history = list(self.messages)
        self.messages.append({"role": "user", "content": text})
        self.is_loading = True
        try:
            response = self.client.send_chat_message(text, history)
            if not isinstance(response, dict) or not response.get("success"):
                raise ApiError("Failed to get response")
            reply: ChatMessage = {"role": "assistant", "content": str(response.get("message", ""))}
        except ApiError as exc:
            logger.error("Chat error: %s", exc)
            reply = {"role": "assistant", "content": CHAT_ERROR_MESSAGE}
        finally:
            self.is_loading = False

        self.messages.append(reply)
        return reply

    def clear(self) -> None:
        self.messages = []
