"""Tests for the derived dashboard metrics."""

from __future__ import annotations

import pytest
from expense_tracker import metrics, samples


def test_normalize_category_breakdown_fills_display_defaults() -> None:
    entries = [
        {"category": "Housing", "amount": 1200, "percent": 0.4},
        {"category": "Food", "amount": 300, "percent": 10, "color": "#123456", "accentClass": "bg-custom"},
        {"category": "Travel", "amount": 90, "percent": 3, "recommended": 5, "recommendedAmount": 150},
    ]
    normalized = metrics.normalize_category_breakdown(entries)

    assert [entry["category"] for entry in normalized] == ["Housing", "Food", "Travel"]
    for entry in normalized:
        assert entry["color"]
        assert entry["accentClass"]
        assert "recommended" in entry and "recommendedAmount" in entry

    assert normalized[0]["color"] == samples.PALETTE[0][0]
    assert normalized[0]["accentClass"] == samples.PALETTE[0][1]
    assert normalized[0]["recommended"] == 0
    assert normalized[0]["recommendedAmount"] == 0
    assert normalized[1]["color"] == "#123456"
    assert normalized[1]["accentClass"] == "bg-custom"
    assert normalized[2]["color"] == samples.PALETTE[2][0]
    assert normalized[2]["recommendedAmount"] == 150


def test_normalize_category_breakdown_palette_wraps_around() -> None:
    entries = [{"category": f"C{i}", "amount": i, "percent": 1} for i in range(len(samples.PALETTE) + 2)]
    normalized = metrics.normalize_category_breakdown(entries)
    assert normalized[len(samples.PALETTE)]["color"] == samples.PALETTE[0][0]
    assert normalized[len(samples.PALETTE) + 1]["accentClass"] == samples.PALETTE[1][1]


@pytest.mark.parametrize("raw", [0.35, 35])
def test_display_percent_accepts_fraction_or_percent(raw: float) -> None:
    assert metrics.display_percent(raw) == pytest.approx(35)


def test_display_percent_treats_missing_as_zero() -> None:
    assert metrics.display_percent(None) == 0
    assert metrics.display_percent("not a number") == 0


def test_over_budget_requires_positive_recommendation() -> None:
    assert metrics.is_over_budget(95, 0) is False
    assert metrics.is_over_budget(0.95, None) is False
    assert metrics.is_over_budget(35, 30) is True
    assert metrics.is_over_budget(0.35, 0.30) is True
    assert metrics.is_over_budget(10, 15) is False
    assert metrics.is_over_budget(0.3, 30) is False


def test_budget_rows_clamp_bars_and_flag_overspend() -> None:
    rows = metrics.budget_rows(
        [
            {"category": "Housing", "amount": 1850, "percent": 140, "recommended": 0.3, "recommendedAmount": 1608},
            {"category": "Food", "amount": 200, "percent": 0.1},
        ]
    )
    housing, food = rows
    assert housing["percent"] == pytest.approx(140)
    assert housing["bar_percent"] == 100
    assert housing["recommended_percent"] == pytest.approx(30)
    assert housing["over_budget"] is True
    assert food["recommended_percent"] == 0
    assert food["over_budget"] is False


def test_needs_wants_split_uses_fixed_buckets() -> None:
    split = metrics.needs_wants_split({"month": "Oct", "housing": 100, "food": 50, "dining": 30, "recreation": 20})
    assert split == {"month": "Oct", "needs": 150, "wants": 50}


def test_needs_wants_split_ignores_unknown_and_missing_fields() -> None:
    split = metrics.needs_wants_split({"month": "Nov", "education": 40, "shopping": 10, "pets": 99, "total": 500})
    assert split["needs"] == 40
    assert split["wants"] == 10


def test_needs_wants_totals_sum_series() -> None:
    series = metrics.needs_wants_series(
        [
            {"month": "Sep", "housing": 1000, "miscellaneous": 50},
            {"month": "Oct", "utilities": 200, "dining": 75},
        ]
    )
    assert metrics.needs_wants_totals(series) == {"needs": 1200, "wants": 125}


def test_income_expense_stats_average_net_and_savings_rate() -> None:
    stats = metrics.income_expense_stats(
        [
            {"month": "Sep", "income": 5000, "expenses": 4000},
            {"month": "Oct", "income": 7000, "expenses": 5000},
        ]
    )
    assert stats["average_income"] == pytest.approx(6000)
    assert stats["average_net"] == pytest.approx(1500)
    assert stats["savings_rate"] == pytest.approx(25)


def test_income_expense_stats_zero_income_has_zero_savings_rate() -> None:
    stats = metrics.income_expense_stats([{"month": "Oct", "income": 0, "expenses": 300}])
    assert stats["savings_rate"] == 0
    assert stats["average_net"] == pytest.approx(-300)
    assert metrics.income_expense_stats([])["savings_rate"] == 0


def test_pie_slices_all_zero_breakdown_renders_even_split() -> None:
    breakdown = [{"category": name, "amount": 0, "percent": 0} for name in samples.CATEGORY_LABELS.values()]
    slices = metrics.pie_slices(breakdown)
    assert len(slices) == 9
    assert all(item["value"] == 1 for item in slices)
    assert all(item["is_empty"] for item in slices)
    assert sum(item["value"] for item in slices) == 9


def test_pie_slices_empty_input_uses_placeholder() -> None:
    slices = metrics.pie_slices([])
    assert len(slices) == len(samples.TREND_CATEGORIES)
    assert sum(item["value"] for item in slices) == len(samples.TREND_CATEGORIES)


def test_pie_slices_sorted_descending_with_share() -> None:
    slices = metrics.pie_slices(
        [
            {"category": "Food", "amount": 100},
            {"category": "Housing", "amount": 300},
            {"category": "Other", "amount": 0},
        ]
    )
    assert [item["name"] for item in slices] == ["Housing", "Food", "Other"]
    assert slices[0]["color"] == samples.PALETTE[1][0]
    assert metrics.slice_share(slices[0], slices) == pytest.approx(300 / 401 * 100)


def test_resolve_category_style_payments_and_fallback() -> None:
    bucket, style = metrics.resolve_category_style({"amount": 2500, "category": "Housing"})
    assert bucket == "Payment"
    assert style == metrics.CATEGORY_STYLES["Payment"]

    bucket, _ = metrics.resolve_category_style({"amount": -45.8, "category": "Transportation"})
    assert bucket == "Transportation"

    bucket, style = metrics.resolve_category_style({"amount": -10, "category": "Llama Grooming"})
    assert bucket == "Miscellaneous"
    assert style == metrics.CATEGORY_STYLES["Miscellaneous"]

    bucket, _ = metrics.resolve_category_style({"amount": -10})
    assert bucket == "Miscellaneous"


def test_transaction_display_name_fallback_chain() -> None:
    assert metrics.transaction_display_name({"name": "Rent", "merchant": "Landlord"}) == "Rent"
    assert metrics.transaction_display_name({"description": "POS 123", "merchant": "Shop"}) == "POS 123"
    assert metrics.transaction_display_name({"merchant": "Shop"}) == "Shop"
    assert metrics.transaction_display_name({}) == "Transaction"


def test_transaction_rows_mark_payments() -> None:
    rows = metrics.transaction_rows(
        [
            {"id": 1, "merchant": "Employer", "amount": 3200, "date": "2025-10-01"},
            {"id": 2, "name": "Coffee", "category": "Restaurants", "amount": -4.5, "date": "2025-10-02"},
        ]
    )
    assert rows[0]["is_payment"] is True
    assert rows[0]["category"] == "Miscellaneous"
    assert rows[1]["is_payment"] is False
    assert rows[1]["icon"] == metrics.CATEGORY_STYLES["Restaurants"].icon


def test_normalize_trend_fills_every_category() -> None:
    trend = metrics.normalize_trend([{"month": "Oct", "total": 100, "housing": 60}])
    assert trend[0]["housing"] == 60
    assert all(key in trend[0] for key in samples.TREND_CATEGORIES)
    assert trend[0]["miscellaneous"] == 0


def test_total_expenses_prefers_summary() -> None:
    breakdown = [{"amount": 10}, {"amount": 15}]
    assert metrics.total_expenses({"totalSpending": 900}, breakdown) == 900
    assert metrics.total_expenses(None, breakdown) == 25


def test_overview_defaults_to_empty_summary() -> None:
    card = metrics.overview(None)
    assert card["top_category"] == "N/A"
    assert card["total_spending"] == 0
    assert card["difference_is_increase"] is True

    card = metrics.overview(
        {
            "totalSpending": 5360,
            "lastMonthTotal": 4956,
            "differenceAmount": -404,
            "differencePercent": -7.5,
            "dailyAverage": 172.9,
            "dailyAverageChange": 3.2,
            "topCategory": {"name": "Housing", "amount": 1850, "percent": 34.5},
        }
    )
    assert card["difference_is_increase"] is False
    assert card["daily_average_improved"] is False
    assert card["top_category"] == "Housing"
