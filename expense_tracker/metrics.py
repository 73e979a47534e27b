"""Derived metrics that turn backend analytics payloads into display shapes.

Every function here is total: missing numeric fields count as 0 and unknown
category labels fall back to a default bucket, so the dashboard can feed raw
JSON straight through without validation.
"""

from __future__ import annotations

from typing import Iterable, Mapping, NamedTuple, Sequence, TypedDict

import pandas as pd

from . import samples
from .api import CategoryBreakdownEntry, MonthlySummary, MonthlyTrendPoint, Transaction
from .utils import as_float

NEEDS_CATEGORIES: tuple[str, ...] = (
    "housing",
    "food",
    "transportation",
    "utilities",
    "insurance",
    "medical",
    "personal",
    "education",
)

WANTS_CATEGORIES: tuple[str, ...] = (
    "dining",
    "recreation",
    "shopping",
    "miscellaneous",
)

DEFAULT_CATEGORY = "Miscellaneous"
PAYMENT_CATEGORY = "Payment"
DEFAULT_DISPLAY_NAME = "Transaction"


class CategoryStyle(NamedTuple):
    color: str
    icon: str


CATEGORY_STYLES: dict[str, CategoryStyle] = {
    "Housing": CategoryStyle("#2563eb", "🏠"),
    "Home": CategoryStyle("#2563eb", "🏠"),
    "Transportation": CategoryStyle("#ea580c", "🚗"),
    "Food": CategoryStyle("#16a34a", "🍴"),
    "Food & Dining": CategoryStyle("#16a34a", "🍴"),
    "Food & Drink": CategoryStyle("#dc2626", "🍴"),
    "Groceries": CategoryStyle("#059669", "🛒"),
    "Restaurants": CategoryStyle("#65a30d", "☕"),
    "Utilities": CategoryStyle("#ca8a04", "⚡"),
    "Insurance": CategoryStyle("#9333ea", "🛡️"),
    "Medical & Healthcare": CategoryStyle("#dc2626", "❤️"),
    "Healthcare": CategoryStyle("#dc2626", "🩺"),
    "Personal": CategoryStyle("#db2777", "✂️"),
    "Personal Care": CategoryStyle("#db2777", "✂️"),
    "Recreation and Entertainment": CategoryStyle("#4f46e5", "🎵"),
    "Recreation": CategoryStyle("#4f46e5", "🎵"),
    "Entertainment": CategoryStyle("#4f46e5", "🎵"),
    "Shopping": CategoryStyle("#7c3aed", "🛍️"),
    "General Merchandise": CategoryStyle("#7c3aed", "🛍️"),
    "Clothing": CategoryStyle("#c026d3", "👕"),
    "Electronics": CategoryStyle("#475569", "💻"),
    "Technology": CategoryStyle("#475569", "📱"),
    "Gas": CategoryStyle("#d97706", "⛽"),
    "Gas & Fuel": CategoryStyle("#d97706", "⛽"),
    "Travel": CategoryStyle("#0284c7", "✈️"),
    "Vacation": CategoryStyle("#0891b2", "🏨"),
    "Gifts": CategoryStyle("#e11d48", "🎁"),
    "Gifts & Donations": CategoryStyle("#e11d48", "🎁"),
    "Business": CategoryStyle("#525252", "💼"),
    "Income": CategoryStyle("#15803d", "💵"),
    PAYMENT_CATEGORY: CategoryStyle("#16a34a", "💵"),
    "Credit Card Payment": CategoryStyle("#16a34a", "💵"),
    "Bills": CategoryStyle("#a16207", "🏢"),
    "Bills & Utilities": CategoryStyle("#a16207", "🏢"),
    "Education": CategoryStyle("#0d9488", "🎓"),
    "Fitness": CategoryStyle("#c2410c", "🏋️"),
    "Health & Fitness": CategoryStyle("#c2410c", "🏋️"),
    DEFAULT_CATEGORY: CategoryStyle("#4b5563", "⋯"),
}


class BudgetRow(TypedDict):
    category: str
    amount: float
    color: str
    percent: float
    bar_percent: float
    recommended_percent: float
    recommended_marker: float
    recommended_amount: float
    over_budget: bool


class NeedsWantsPoint(TypedDict):
    month: str
    needs: float
    wants: float


class IncomeExpenseStats(TypedDict):
    average_income: float
    average_expenses: float
    average_net: float
    savings_rate: float


class PieSlice(TypedDict):
    name: str
    value: float
    color: str
    is_empty: bool


class TransactionRow(TypedDict):
    id: str
    name: str
    category: str
    date: str
    amount: float
    is_payment: bool
    color: str
    icon: str


class OverviewCard(TypedDict):
    total_spending: float
    last_month_total: float
    difference_amount: float
    difference_percent: float
    difference_is_increase: bool
    daily_average: float
    daily_average_change: float
    daily_average_improved: bool
    top_category: str
    top_category_amount: float
    top_category_percent: float


def palette_slot(index: int) -> tuple[str, str]:
    return samples.PALETTE[index % len(samples.PALETTE)]


def normalize_category_breakdown(
    entries: Iterable[Mapping[str, object]],
) -> list[CategoryBreakdownEntry]:
    """Fill display defaults on breakdown entries, preserving input order."""

    normalized: list[CategoryBreakdownEntry] = []
    for index, entry in enumerate(entries):
        color, accent = palette_slot(index)
        item = dict(entry)
        item["category"] = str(entry.get("category") or DEFAULT_CATEGORY)
        item["amount"] = as_float(entry.get("amount"))
        item["percent"] = as_float(entry.get("percent"))
        item["color"] = entry.get("color") or color
        item["accentClass"] = entry.get("accentClass") or accent
        item["recommended"] = as_float(entry.get("recommended"))
        item["recommendedAmount"] = as_float(entry.get("recommendedAmount"))
        normalized.append(item)  # type: ignore[arg-type]
    return normalized


def display_percent(value: object) -> float:
    """Values above 1 are already percentages; anything else is a fraction."""

    number = as_float(value)
    return number if number > 1 else number * 100


def is_over_budget(actual: object, recommended: object) -> bool:
    recommended_pct = display_percent(recommended)
    return recommended_pct > 0 and display_percent(actual) > recommended_pct


def budget_rows(entries: Iterable[Mapping[str, object]]) -> list[BudgetRow]:
    rows: list[BudgetRow] = []
    for entry in normalize_category_breakdown(entries):
        percent = display_percent(entry["percent"])
        recommended = display_percent(entry["recommended"])
        rows.append(
            {
                "category": entry["category"],
                "amount": entry["amount"],
                "color": entry["color"],
                "percent": percent,
                "bar_percent": min(percent, 100.0),
                "recommended_percent": recommended,
                "recommended_marker": min(recommended, 100.0),
                "recommended_amount": entry["recommendedAmount"],
                "over_budget": is_over_budget(entry["percent"], entry["recommended"]),
            }
        )
    return rows


def _bucket_total(point: Mapping[str, object], keys: Sequence[str]) -> float:
    return sum(as_float(point.get(key)) for key in keys)


def needs_wants_split(point: Mapping[str, object]) -> NeedsWantsPoint:
    return {
        "month": str(point.get("month", "")),
        "needs": _bucket_total(point, NEEDS_CATEGORIES),
        "wants": _bucket_total(point, WANTS_CATEGORIES),
    }


def needs_wants_series(trend: Iterable[Mapping[str, object]]) -> list[NeedsWantsPoint]:
    return [needs_wants_split(point) for point in trend]


def needs_wants_totals(points: Iterable[NeedsWantsPoint]) -> dict[str, float]:
    data = list(points)
    return {
        "needs": sum(point["needs"] for point in data),
        "wants": sum(point["wants"] for point in data),
    }


def income_expense_stats(points: Iterable[Mapping[str, object]]) -> IncomeExpenseStats:
    """Average income, expenses and net flow plus the savings rate (%)."""

    df = pd.DataFrame(
        [
            {"income": as_float(point.get("income")), "expenses": as_float(point.get("expenses"))}
            for point in points
        ],
        columns=["income", "expenses"],
    )
    if df.empty:
        return {"average_income": 0.0, "average_expenses": 0.0, "average_net": 0.0, "savings_rate": 0.0}

    average_income = float(df["income"].mean())
    average_net = float((df["income"] - df["expenses"]).mean())
    return {
        "average_income": average_income,
        "average_expenses": float(df["expenses"].mean()),
        "average_net": average_net,
        "savings_rate": average_net / average_income * 100 if average_income else 0.0,
    }


def pie_slices(breakdown: Sequence[Mapping[str, object]] | None) -> list[PieSlice]:
    """Donut slices sorted by weight; zero amounts still get a weight of 1."""

    source = breakdown if breakdown else samples.PLACEHOLDER_BREAKDOWN
    slices: list[PieSlice] = []
    for index, entry in enumerate(source):
        amount = as_float(entry.get("amount"))
        slices.append(
            {
                "name": str(entry.get("category") or DEFAULT_CATEGORY),
                "value": amount if amount > 0 else 1.0,
                "color": str(entry.get("color") or palette_slot(index)[0]),
                "is_empty": amount == 0,
            }
        )
    slices.sort(key=lambda item: item["value"], reverse=True)
    return slices


def slice_share(item: PieSlice, slices: Sequence[PieSlice]) -> float:
    total = sum(entry["value"] for entry in slices) or 1.0
    return item["value"] / total * 100


def transaction_display_name(transaction: Mapping[str, object]) -> str:
    for key in ("name", "description", "merchant"):
        value = transaction.get(key)
        if value is not None:
            return str(value)
    return DEFAULT_DISPLAY_NAME


def transaction_category(transaction: Mapping[str, object]) -> str:
    category = transaction.get("category")
    return DEFAULT_CATEGORY if category is None else str(category)


def resolve_category_style(transaction: Mapping[str, object]) -> tuple[str, CategoryStyle]:
    """Return the display bucket and its style for a transaction."""

    if as_float(transaction.get("amount")) > 0:
        bucket = PAYMENT_CATEGORY
    else:
        label = transaction_category(transaction)
        bucket = label if label in CATEGORY_STYLES else DEFAULT_CATEGORY
    return bucket, CATEGORY_STYLES[bucket]


def transaction_rows(transactions: Iterable[Transaction]) -> list[TransactionRow]:
    rows: list[TransactionRow] = []
    for transaction in transactions:
        bucket, style = resolve_category_style(transaction)
        rows.append(
            {
                "id": str(transaction.get("id", "")),
                "name": transaction_display_name(transaction),
                "category": transaction_category(transaction),
                "date": str(transaction.get("date", "")),
                "amount": as_float(transaction.get("amount")),
                "is_payment": bucket == PAYMENT_CATEGORY,
                "color": style.color,
                "icon": style.icon,
            }
        )
    return rows


def normalize_trend(points: Iterable[Mapping[str, object]]) -> list[MonthlyTrendPoint]:
    normalized: list[MonthlyTrendPoint] = []
    for point in points:
        row: MonthlyTrendPoint = {"month": str(point.get("month", "")), "total": as_float(point.get("total"))}
        for key in samples.TREND_CATEGORIES:
            row[key] = as_float(point.get(key))
        normalized.append(row)
    return normalized


def total_expenses(
    summary: Mapping[str, object] | None,
    breakdown: Iterable[Mapping[str, object]],
) -> float:
    if summary and summary.get("totalSpending") is not None:
        return as_float(summary.get("totalSpending"))
    return sum(as_float(entry.get("amount")) for entry in breakdown)


def overview(summary: MonthlySummary | None) -> OverviewCard:
    data = summary or samples.EMPTY_SUMMARY
    top = data.get("topCategory") or samples.EMPTY_SUMMARY["topCategory"]
    difference = as_float(data.get("differenceAmount"))
    daily_change = as_float(data.get("dailyAverageChange"))
    return {
        "total_spending": as_float(data.get("totalSpending")),
        "last_month_total": as_float(data.get("lastMonthTotal")),
        "difference_amount": difference,
        "difference_percent": as_float(data.get("differencePercent")),
        "difference_is_increase": difference >= 0,
        "daily_average": as_float(data.get("dailyAverage")),
        "daily_average_change": daily_change,
        "daily_average_improved": daily_change <= 0,
        "top_category": str(top.get("name") or "N/A"),
        "top_category_amount": as_float(top.get("amount")),
        "top_category_percent": as_float(top.get("percent")),
    }
