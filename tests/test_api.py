"""Tests for the backend HTTP client using an in-memory session."""

from __future__ import annotations

from typing import Any

import pytest
import requests
from expense_tracker.api import DEFAULT_ERROR_MESSAGE, ApiClient, ApiError


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, reason: str = "OK", invalid_json: bool = False) -> None:
        self.status_code = status_code
        self.reason = reason
        self._payload = payload
        self._invalid_json = invalid_json

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("Expecting value")
        return self._payload


class FakeSession:
    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None) -> None:
        self.response = response or FakeResponse(payload=[])
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


def test_build_url_joins_base_and_path() -> None:
    client = ApiClient("http://localhost:5000/", session=FakeSession())
    assert client.build_url("/transactions") == "http://localhost:5000/transactions"
    assert client.build_url("analytics/daily") == "http://localhost:5000/analytics/daily"


@pytest.mark.parametrize(
    ("method_name", "path"),
    [
        ("get_transactions", "/transactions"),
        ("get_daily_analytics", "/analytics/daily"),
        ("get_monthly_analytics", "/analytics/monthly"),
    ],
)
def test_get_endpoints_issue_one_request(method_name: str, path: str) -> None:
    session = FakeSession(FakeResponse(payload={"ok": True}))
    client = ApiClient("http://api.test", session=session)

    assert getattr(client, method_name)() == {"ok": True}
    assert len(session.calls) == 1
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == f"http://api.test{path}"
    assert call["headers"]["Accept"] == "application/json"


def test_error_status_uses_message_field() -> None:
    session = FakeSession(FakeResponse(status_code=400, payload={"message": "No file provided"}, reason="Bad Request"))
    client = ApiClient("http://api.test", session=session)

    with pytest.raises(ApiError) as info:
        client.get_transactions()
    assert info.value.message == "No file provided"
    assert info.value.status == 400


def test_error_status_falls_back_to_reason() -> None:
    session = FakeSession(FakeResponse(status_code=500, reason="Internal Server Error", invalid_json=True))
    client = ApiClient("http://api.test", session=session)

    with pytest.raises(ApiError, match="Internal Server Error"):
        client.get_monthly_analytics()


def test_error_status_without_reason_uses_default_message() -> None:
    session = FakeSession(FakeResponse(status_code=502, payload=["unexpected"], reason=""))
    client = ApiClient("http://api.test", session=session)

    with pytest.raises(ApiError) as info:
        client.get_daily_analytics()
    assert info.value.message == DEFAULT_ERROR_MESSAGE


def test_redirect_status_is_treated_as_failure() -> None:
    session = FakeSession(FakeResponse(status_code=304, reason="Not Modified", invalid_json=True))
    client = ApiClient("http://api.test", session=session)

    with pytest.raises(ApiError) as info:
        client.get_transactions()
    assert info.value.status == 304


def test_transport_error_becomes_api_error() -> None:
    session = FakeSession(error=requests.ConnectionError("connection refused"))
    client = ApiClient("http://api.test", session=session)

    with pytest.raises(ApiError, match="connection refused") as info:
        client.get_transactions()
    assert info.value.status is None


def test_invalid_json_on_success_raises() -> None:
    session = FakeSession(FakeResponse(status_code=200, invalid_json=True))
    client = ApiClient("http://api.test", session=session)

    with pytest.raises(ApiError, match="Invalid JSON"):
        client.get_transactions()


def test_upload_sends_multipart_file_field() -> None:
    session = FakeSession(FakeResponse(payload={"success": True, "message": "Imported 12 rows"}))
    client = ApiClient("http://api.test", session=session)

    result = client.upload_transactions("statement.csv", b"date,amount\n")

    assert result["success"] is True
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://api.test/upload"
    assert call["files"] == {"file": ("statement.csv", b"date,amount\n", "text/csv")}


def test_chat_posts_message_and_history() -> None:
    session = FakeSession(FakeResponse(payload={"success": True, "message": "Hi"}))
    client = ApiClient("http://api.test", session=session)
    history = [{"role": "user", "content": "hello"}, {"role": "assistant", "content": "hey"}]

    client.send_chat_message("How much on food?", history)

    call = session.calls[0]
    assert call["url"] == "http://api.test/chat"
    assert call["json"] == {"message": "How much on food?", "conversation_history": history}
