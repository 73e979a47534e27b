"""Dashboard orchestration: data loading lifecycle, upload and fallbacks."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import NamedTuple

from . import metrics, samples
from .api import (
    ApiClient,
    ApiError,
    CategoryBreakdownEntry,
    DailyAnalyticsEntry,
    IncomeVsExpensesPoint,
    MonthlyAnalyticsResponse,
    MonthlySummary,
    MonthlyTrendPoint,
    Transaction,
)

logger = logging.getLogger(__name__)

CSV_MIME_TYPE = "text/csv"
DAILY_SNAPSHOT_DAYS = 7
LOAD_ERROR_MESSAGE = "Failed to load dashboard data"
UPLOAD_ERROR_MESSAGE = "Failed to upload CSV file"
INVALID_FILE_MESSAGE = "Please upload a valid CSV file"
UPLOAD_BUSY_MESSAGE = "An upload is already in progress"
UPLOAD_SUCCESS_MESSAGE = "CSV file uploaded successfully!"


class LoadStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class UploadOutcome(NamedTuple):
    ok: bool
    message: str


def is_csv_file(filename: str, content_type: str | None = None) -> bool:
    return content_type == CSV_MIME_TYPE or filename.endswith(".csv")


class Dashboard:
    """Owns the fetched payloads and exposes display-ready data to widgets.

    Status moves ``IDLE -> LOADING -> LOADED | FAILED`` and re-enters
    ``LOADING`` on retry or after a successful upload. Until the first
    successful load every accessor returns sample data.
    """

    def __init__(self, client: ApiClient) -> None:
        self.client = client
        self.status = LoadStatus.IDLE
        self.error: str | None = None
        self.is_uploading = False
        self.is_using_sample_data = True
        self._transactions: list[Transaction] = []
        self._daily: list[DailyAnalyticsEntry] = []
        self._monthly: MonthlyAnalyticsResponse | None = None

    @property
    def is_loading(self) -> bool:
        return self.status == LoadStatus.LOADING

    def load(self) -> LoadStatus:
        """Fetch transactions, daily and monthly analytics jointly.

        The three requests run concurrently; the dashboard only moves to
        ``LOADED`` when all of them succeed, otherwise it keeps its previous
        payloads and moves to ``FAILED``.
        """

        self.mark_loading()
        with ThreadPoolExecutor(max_workers=3, thread_name_prefix="dashboard-load") as pool:
            futures = [
                pool.submit(self.client.get_transactions),
                pool.submit(self.client.get_daily_analytics),
                pool.submit(self.client.get_monthly_analytics),
            ]
            try:
                transactions, daily, monthly = (future.result() for future in futures)
            except ApiError as exc:
                logger.error("Dashboard load failed: %s", exc)
                self.error = str(exc) or LOAD_ERROR_MESSAGE
                self.status = LoadStatus.FAILED
                return self.status
            except Exception:
                logger.exception("Dashboard load crashed")
                self.error = LOAD_ERROR_MESSAGE
                self.status = LoadStatus.FAILED
                raise

        self._transactions = list(transactions or [])
        self._daily = list(daily or [])
        self._monthly = monthly or {}
        self.is_using_sample_data = False
        self.status = LoadStatus.LOADED
        logger.info(
            "Dashboard loaded: %d transactions, %d daily entries",
            len(self._transactions),
            len(self._daily),
        )
        return self.status

    def mark_loading(self) -> None:
        """Enter ``LOADING`` so widgets render their loading state before the fetch."""

        self.status = LoadStatus.LOADING
        self.error = None

    def retry(self) -> LoadStatus:
        return self.load()

    def upload(self, filename: str, content: bytes, content_type: str | None = None) -> UploadOutcome:
        """Upload a CSV statement and reload on success.

        Non-CSV files are rejected before any request is made, as is a second
        upload while one is still in flight.
        """

        if self.is_uploading:
            return UploadOutcome(False, UPLOAD_BUSY_MESSAGE)
        if not is_csv_file(filename, content_type):
            return UploadOutcome(False, INVALID_FILE_MESSAGE)

        self.is_uploading = True
        try:
            self.client.upload_transactions(filename, content)
        except ApiError as exc:
            logger.error("Upload of %s failed: %s", filename, exc)
            return UploadOutcome(False, str(exc) or UPLOAD_ERROR_MESSAGE)
        finally:
            self.is_uploading = False

        logger.info("Uploaded %s", filename)
        self.load()
        return UploadOutcome(True, UPLOAD_SUCCESS_MESSAGE)

    def caption(self, live: str, sample: str) -> str:
        if self.is_loading:
            return "Updating with latest data…"
        return sample if self.is_using_sample_data else live

    def _monthly_field(self, key: str) -> list:
        if self._monthly is None:
            return []
        return list(self._monthly.get(key) or [])

    def summary(self) -> MonthlySummary | None:
        if self._monthly is None:
            return None
        return self._monthly.get("summary")

    def trend(self) -> list[MonthlyTrendPoint]:
        points = self._monthly_field("trend")
        return metrics.normalize_trend(points or samples.SAMPLE_TREND)

    def has_live_trend(self) -> bool:
        return bool(self._monthly_field("trend"))

    def needs_wants(self) -> list[metrics.NeedsWantsPoint]:
        return metrics.needs_wants_series(self._monthly_field("trend") or samples.SAMPLE_TREND)

    def income_vs_expenses(self) -> list[IncomeVsExpensesPoint]:
        return self._monthly_field("incomeVsExpenses") or list(samples.SAMPLE_INCOME_VS_EXPENSES)

    def category_breakdown(self) -> list[CategoryBreakdownEntry]:
        """Normalised live breakdown; empty once live data without one is loaded."""

        if self.is_using_sample_data:
            return metrics.normalize_category_breakdown(samples.SAMPLE_CATEGORY_BREAKDOWN)
        return metrics.normalize_category_breakdown(self._monthly_field("categoryBreakdown"))

    def total_expenses(self) -> float:
        return metrics.total_expenses(self.summary(), self.category_breakdown())

    def transactions(self) -> list[Transaction]:
        if self._transactions:
            return self._transactions
        return samples.SAMPLE_TRANSACTIONS

    def has_live_transactions(self) -> bool:
        return bool(self._transactions)

    def daily_snapshot(self) -> list[DailyAnalyticsEntry]:
        source = self._daily or samples.SAMPLE_DAILY_ANALYTICS
        return list(source[:DAILY_SNAPSHOT_DAYS])
