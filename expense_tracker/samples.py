"""Static sample data shown before, or instead of, live backend data.

Every widget has exactly one fallback dataset, all drawn from the same
canonical category set used by the trend chart.
"""

from __future__ import annotations

from .api import (
    CategoryBreakdownEntry,
    IncomeVsExpensesPoint,
    MonthlySummary,
    MonthlyTrendPoint,
    Transaction,
)

TREND_CATEGORIES: tuple[str, ...] = (
    "housing",
    "food",
    "transportation",
    "utilities",
    "insurance",
    "medical",
    "personal",
    "recreation",
    "miscellaneous",
)

CATEGORY_LABELS: dict[str, str] = {
    "housing": "Housing",
    "food": "Food",
    "transportation": "Transportation",
    "utilities": "Utilities",
    "insurance": "Insurance",
    "medical": "Medical & Healthcare",
    "personal": "Personal",
    "recreation": "Recreation",
    "miscellaneous": "Miscellaneous",
}

# (color, accent class) per palette slot, in canonical category order.
PALETTE: tuple[tuple[str, str], ...] = (
    ("#dc2626", "bg-red-600"),
    ("#10b981", "bg-green-500"),
    ("#f97316", "bg-orange-500"),
    ("#eab308", "bg-yellow-500"),
    ("#a855f7", "bg-purple-500"),
    ("#ef4444", "bg-red-500"),
    ("#ec4899", "bg-pink-500"),
    ("#6366f1", "bg-indigo-500"),
    ("#6b7280", "bg-gray-500"),
)

TREND_COLORS: dict[str, str] = {
    "total": "#6b7280",
    "housing": "#dc2626",
    "food": "#10b981",
    "transportation": "#f97316",
    "utilities": "#eab308",
    "insurance": "#a855f7",
    "medical": "#ef4444",
    "personal": "#ec4899",
    "recreation": "#6366f1",
    "miscellaneous": "#9ca3af",
}

EMPTY_SUMMARY: MonthlySummary = {
    "totalSpending": 0.0,
    "lastMonthTotal": 0.0,
    "differenceAmount": 0.0,
    "differencePercent": 0.0,
    "dailyAverage": 0.0,
    "dailyAverageChange": 0.0,
    "topCategory": {"name": "N/A", "amount": 0.0, "percent": 0.0},
}

SAMPLE_TREND: list[MonthlyTrendPoint] = [
    {"month": "Apr", "total": 4850, "housing": 1800, "food": 820, "transportation": 490, "utilities": 400, "insurance": 650, "medical": 260, "personal": 310, "recreation": 250, "miscellaneous": 120},
    {"month": "May", "total": 5120, "housing": 1850, "food": 910, "transportation": 520, "utilities": 410, "insurance": 650, "medical": 180, "personal": 380, "recreation": 310, "miscellaneous": 110},
    {"month": "Jun", "total": 4680, "housing": 1850, "food": 760, "transportation": 480, "utilities": 390, "insurance": 650, "medical": 220, "personal": 290, "recreation": 180, "miscellaneous": 60},
    {"month": "Jul", "total": 5340, "housing": 1850, "food": 980, "transportation": 610, "utilities": 450, "insurance": 650, "medical": 340, "personal": 290, "recreation": 280, "miscellaneous": 90},
    {"month": "Aug", "total": 4920, "housing": 1850, "food": 840, "transportation": 510, "utilities": 420, "insurance": 650, "medical": 190, "personal": 330, "recreation": 220, "miscellaneous": 110},
    {"month": "Sep", "total": 4956, "housing": 1850, "food": 850, "transportation": 530, "utilities": 415, "insurance": 650, "medical": 240, "personal": 295, "recreation": 218, "miscellaneous": 108},
    {"month": "Oct", "total": 5360, "housing": 1850, "food": 892, "transportation": 534, "utilities": 425, "insurance": 650, "medical": 285, "personal": 340, "recreation": 278, "miscellaneous": 106},
]

SAMPLE_INCOME_VS_EXPENSES: list[IncomeVsExpensesPoint] = [
    {"month": point["month"], "income": 6500.0, "expenses": float(point["total"])}
    for point in SAMPLE_TREND
]

SAMPLE_CATEGORY_BREAKDOWN: list[CategoryBreakdownEntry] = [
    {"category": "Housing", "amount": 1850, "percent": 35, "recommended": 30, "recommendedAmount": 1608},
    {"category": "Food", "amount": 892, "percent": 17, "recommended": 15, "recommendedAmount": 804},
    {"category": "Transportation", "amount": 534, "percent": 10, "recommended": 15, "recommendedAmount": 804},
    {"category": "Utilities", "amount": 425, "percent": 8, "recommended": 10, "recommendedAmount": 536},
    {"category": "Insurance", "amount": 650, "percent": 12, "recommended": 10, "recommendedAmount": 536},
    {"category": "Medical & Healthcare", "amount": 285, "percent": 5, "recommended": 5, "recommendedAmount": 268},
    {"category": "Personal", "amount": 340, "percent": 6, "recommended": 5, "recommendedAmount": 268},
    {"category": "Recreation", "amount": 278, "percent": 5, "recommended": 5, "recommendedAmount": 268},
    {"category": "Miscellaneous", "amount": 106, "percent": 2, "recommended": 5, "recommendedAmount": 268},
]

# Zero-amount placeholder for the donut; every slice renders with weight 1.
PLACEHOLDER_BREAKDOWN: list[CategoryBreakdownEntry] = [
    {"category": CATEGORY_LABELS[key], "amount": 0, "percent": 0} for key in TREND_CATEGORIES
]

SAMPLE_TRANSACTIONS: list[Transaction] = [
    {"id": 1, "name": "Rent Payment", "category": "Housing", "date": "2025-10-26", "amount": -1850.0},
    {"id": 2, "name": "Grocery Store", "category": "Food", "date": "2025-10-25", "amount": -156.42},
    {"id": 3, "name": "Auto Insurance", "category": "Insurance", "date": "2025-10-25", "amount": -325.0},
    {"id": 4, "name": "Gas Station", "category": "Transportation", "date": "2025-10-24", "amount": -45.8},
    {"id": 5, "name": "Electric Bill", "category": "Utilities", "date": "2025-10-23", "amount": -125.0},
    {"id": 6, "name": "Restaurant", "category": "Food", "date": "2025-10-23", "amount": -68.5},
    {"id": 7, "name": "Gym Membership", "category": "Personal", "date": "2025-10-22", "amount": -59.99},
    {"id": 8, "name": "Concert Tickets", "category": "Recreation and Entertainment", "date": "2025-10-22", "amount": -150.0},
    {"id": 9, "name": "Doctor Visit Copay", "category": "Medical & Healthcare", "date": "2025-10-21", "amount": -35.0},
    {"id": 10, "name": "Internet Bill", "category": "Utilities", "date": "2025-10-20", "amount": -89.99},
    {"id": 11, "name": "Haircut", "category": "Personal", "date": "2025-10-20", "amount": -45.0},
    {"id": 12, "name": "Uber Ride", "category": "Transportation", "date": "2025-10-19", "amount": -28.5},
    {"id": 13, "name": "Streaming Services", "category": "Recreation and Entertainment", "date": "2025-10-18", "amount": -24.99},
    {"id": 14, "name": "Coffee Shop", "category": "Food", "date": "2025-10-18", "amount": -12.8},
]

SAMPLE_DAILY_ANALYTICS = [
    {"date": "2025-10-26", "total": 1850.0, "transactions": 1},
    {"date": "2025-10-25", "total": 481.42, "transactions": 2},
    {"date": "2025-10-24", "total": 45.8, "transactions": 1},
    {"date": "2025-10-23", "total": 193.5, "transactions": 2},
    {"date": "2025-10-22", "total": 209.99, "transactions": 2},
    {"date": "2025-10-21", "total": 35.0, "transactions": 1},
    {"date": "2025-10-20", "total": 134.99, "transactions": 2},
]
