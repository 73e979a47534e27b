"""Utility script to print the derived dashboard metrics for the backend payload."""

from __future__ import annotations

import argparse
import json

from expense_tracker import metrics, utils
from expense_tracker.api import ApiClient
from expense_tracker.config import load_settings
from expense_tracker.dashboard import Dashboard, LoadStatus


def main() -> None:
    settings = load_settings()
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--api-url", default=settings.api_url, help="Backend base URL")
    parser.add_argument("--sample", action="store_true", help="Skip the backend and use sample data")
    args = parser.parse_args()

    utils.configure_logging(settings.log_level)
    dashboard = Dashboard(ApiClient(args.api_url))
    if not args.sample and dashboard.load() == LoadStatus.FAILED:
        print(f"Backend unavailable ({dashboard.error}); showing sample data.")

    needs_wants = dashboard.needs_wants()
    payload = {
        "status": dashboard.status.value,
        "overview": metrics.overview(dashboard.summary()),
        "budget": metrics.budget_rows(dashboard.category_breakdown()),
        "needs_wants": needs_wants,
        "needs_wants_totals": metrics.needs_wants_totals(needs_wants),
        "income_vs_expenses": metrics.income_expense_stats(dashboard.income_vs_expenses()),
        "pie": metrics.pie_slices(dashboard.category_breakdown()),
        "total_expenses": dashboard.total_expenses(),
    }
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
