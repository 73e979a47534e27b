"""Shared utilities for the Expense Tracker dashboard."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

import pandas as pd

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def ensure_dataframe(records: Iterable[Mapping] | pd.DataFrame) -> pd.DataFrame:
    """Ensure the input payload is normalised to a :class:`pandas.DataFrame`."""

    if isinstance(records, pd.DataFrame):
        return records.copy()

    return pd.DataFrame(list(records))


def as_float(value: Any) -> float:
    """Coerce a loosely typed JSON number to ``float``; anything unusable is 0."""

    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if pd.isna(number):
        return 0.0
    return number


def format_currency(value: float, currency: str = "$") -> str:
    """Return a human-readable currency string."""

    return f"{currency}{value:,.2f}"


def format_signed_currency(value: float, currency: str = "$") -> str:
    sign = "+" if value >= 0 else "-"
    return f"{sign}{format_currency(abs(value), currency)}"


def format_date_label(value: str) -> str:
    """Render an ISO-ish date as ``Oct 5``; unparsable input is returned as is."""

    parsed = pd.to_datetime(value, errors="coerce")
    if pd.isna(parsed):
        return value
    return f"{parsed.strftime('%b')} {parsed.day}"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once; repeated calls only adjust the level."""

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
