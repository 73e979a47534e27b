"""HTTP client for the Expense Tracker backend."""

from __future__ import annotations

import logging
from typing import Any, Literal, Mapping, Sequence, TypedDict

import requests

from .config import DEFAULT_API_URL

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Unable to complete request"


class Transaction(TypedDict, total=False):
    id: str | int
    name: str
    description: str
    merchant: str
    category: str
    amount: float
    date: str
    type: Literal["income", "expense", "debit", "credit"]


class DailyAnalyticsEntry(TypedDict, total=False):
    date: str
    total: float
    transactions: int
    category: str


class TopCategory(TypedDict):
    name: str
    amount: float
    percent: float


class MonthlySummary(TypedDict):
    totalSpending: float
    lastMonthTotal: float
    differenceAmount: float
    differencePercent: float
    dailyAverage: float
    dailyAverageChange: float
    topCategory: TopCategory


# Category keys beyond ``month``/``total`` are open-ended numeric fields.
MonthlyTrendPoint = dict[str, Any]


class IncomeVsExpensesPoint(TypedDict):
    month: str
    income: float
    expenses: float


class CategoryBreakdownEntry(TypedDict, total=False):
    category: str
    amount: float
    percent: float
    recommended: float
    recommendedAmount: float
    color: str
    accentClass: str


class MonthlyAnalyticsResponse(TypedDict, total=False):
    summary: MonthlySummary
    trend: list[MonthlyTrendPoint]
    incomeVsExpenses: list[IncomeVsExpensesPoint]
    categoryBreakdown: list[CategoryBreakdownEntry]


class UploadResponse(TypedDict):
    success: bool
    message: str


class ChatMessage(TypedDict):
    role: Literal["user", "assistant"]
    content: str


class ChatResponse(TypedDict):
    success: bool
    message: str


class ApiError(Exception):
    """Raised for any failed round trip to the backend."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


def _error_message(response: requests.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and "message" in data:
        return str(data["message"])
    return response.reason or DEFAULT_ERROR_MESSAGE


class ApiClient:
    """Single round-trip wrapper around the dashboard backend.

    Each call maps to exactly one HTTP request against ``base_url``, with no
    retry, timeout or caching.
    """

    def __init__(self, base_url: str = DEFAULT_API_URL, session: requests.Session | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def build_url(self, path: str) -> str:
        return f"{self.base_url}{path if path.startswith('/') else '/' + path}"

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = self.build_url(path)
        headers = {"Accept": "application/json", **kwargs.pop("headers", {})}
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, headers=headers, **kwargs)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ApiError(str(exc) or DEFAULT_ERROR_MESSAGE) from exc

        if not 200 <= response.status_code < 300:
            message = _error_message(response)
            logger.warning("%s %s returned %s: %s", method, url, response.status_code, message)
            raise ApiError(message, status=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(f"Invalid JSON from {path}", status=response.status_code) from exc

    def get_transactions(self) -> list[Transaction]:
        return self._request("GET", "/transactions")

    def get_daily_analytics(self) -> list[DailyAnalyticsEntry]:
        return self._request("GET", "/analytics/daily")

    def get_monthly_analytics(self) -> MonthlyAnalyticsResponse:
        return self._request("GET", "/analytics/monthly")

    def upload_transactions(self, filename: str, content: bytes, mime: str = "text/csv") -> UploadResponse:
        files = {"file": (filename, content, mime)}
        return self._request("POST", "/upload", files=files)

    def send_chat_message(
        self,
        message: str,
        conversation_history: Sequence[Mapping[str, str]],
    ) -> ChatResponse:
        payload = {
            "message": message,
            "conversation_history": [dict(item) for item in conversation_history],
        }
        return self._request("POST", "/chat", json=payload)
