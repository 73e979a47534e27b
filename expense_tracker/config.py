"""Runtime configuration for the Expense Tracker dashboard."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

DEFAULT_API_URL = "http://127.0.0.1:5000"
DEFAULT_SESSION_FILE = Path.home() / ".expense_tracker" / "session.json"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_CURRENCY = "$"
PAGE_SIZE = 10


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    session_file: Path = DEFAULT_SESSION_FILE
    log_level: str = DEFAULT_LOG_LEVEL
    currency: str = DEFAULT_CURRENCY
    page_size: int = PAGE_SIZE


def _lookup(
    key: str,
    default: str,
    environ: Mapping[str, str],
    secrets: Mapping[str, object],
) -> str:
    value = secrets.get(key)
    if value:
        return str(value)
    return environ.get(key) or default


def load_settings(
    environ: Mapping[str, str] | None = None,
    secrets: Mapping[str, object] | None = None,
) -> Settings:
    """Resolve settings from Streamlit secrets, then the environment, then defaults."""

    env = os.environ if environ is None else environ
    sec = secrets or {}

    session_file = _lookup("EXPENSE_TRACKER_SESSION_FILE", "", env, sec)
    return Settings(
        api_url=_lookup("EXPENSE_TRACKER_API_URL", DEFAULT_API_URL, env, sec),
        session_file=Path(session_file).expanduser() if session_file else DEFAULT_SESSION_FILE,
        log_level=_lookup("EXPENSE_TRACKER_LOG_LEVEL", DEFAULT_LOG_LEVEL, env, sec).upper(),
        currency=_lookup("EXPENSE_TRACKER_CURRENCY", DEFAULT_CURRENCY, env, sec),
    )
