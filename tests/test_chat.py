"""Tests for the assistant chat session."""

from __future__ import annotations

from typing import Any

from expense_tracker.api import ApiError
from expense_tracker.chat import CHAT_ERROR_MESSAGE, ChatSession


class FakeChatClient:
    def __init__(self, response: Any = None, error: Exception | None = None) -> None:
        self.response = response if response is not None else {"success": True, "message": "You spent $120 on food."}
        self.error = error
        self.calls: list[tuple[str, list]] = []

    def send_chat_message(self, message: str, conversation_history: list) -> Any:
        self.calls.append((message, list(conversation_history)))
        if self.error is not None:
            raise self.error
        return self.response


def test_send_appends_user_and_assistant_messages() -> None:
    client = FakeChatClient()
    chat = ChatSession(client)

    reply = chat.send("How much on food?")

    assert reply == {"role": "assistant", "content": "You spent $120 on food."}
    assert [message["role"] for message in chat.messages] == ["user", "assistant"]
    assert client.calls == [("How much on food?", [])]
    assert chat.is_loading is False


def test_history_excludes_current_message() -> None:
    client = FakeChatClient()
    chat = ChatSession(client)
    chat.send("first")
    chat.send("second")

    message, history = client.calls[1]
    assert message == "second"
    assert history == [
        {"role": "user", "content": "first"},
        {"role": "assistant", "content": "You spent $120 on food."},
    ]


def test_blank_input_is_ignored() -> None:
    client = FakeChatClient()
    chat = ChatSession(client)

    assert chat.send("   ") is None
    assert chat.messages == []
    assert client.calls == []


def test_input_while_loading_is_ignored() -> None:
    client = FakeChatClient()
    chat = ChatSession(client)
    chat.is_loading = True

    assert chat.send("hello") is None
    assert client.calls == []


def test_transport_error_yields_apology() -> None:
    chat = ChatSession(FakeChatClient(error=ApiError("connection refused")))

    reply = chat.send("hello")

    assert reply == {"role": "assistant", "content": CHAT_ERROR_MESSAGE}
    assert len(chat.messages) == 2
    assert chat.is_loading is False


def test_unsuccessful_response_yields_apology() -> None:
    chat = ChatSession(FakeChatClient(response={"success": False, "message": "quota"}))
    assert chat.send("hello")["content"] == CHAT_ERROR_MESSAGE


def test_clear_resets_history() -> None:
    chat = ChatSession(FakeChatClient())
    chat.send("hello")
    chat.clear()
    assert chat.messages == []
