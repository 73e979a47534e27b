"""Process-wide session state: the mock login flag and the dark-mode toggle."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

LOGIN_KEY = "isLoggedIn"


@dataclass
class SessionState:
    is_logged_in: bool = False
    dark_mode: bool = False


class SessionStore:
    """JSON-file backed session.

    The file is read once on construction and written on every login/logout
    transition. Only the login flag is durable; dark mode lives in memory.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self.state = SessionState(is_logged_in=self._read_login_flag())

    def _read_login_flag(self) -> bool:
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return False
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable session file %s: %s", self.path, exc)
            return False
        return isinstance(payload, dict) and payload.get(LOGIN_KEY) is True

    def _write_login_flag(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({LOGIN_KEY: self.state.is_logged_in}), encoding="utf-8")
        except OSError as exc:
            logger.error("Could not persist session to %s: %s", self.path, exc)

    @property
    def is_logged_in(self) -> bool:
        return self.state.is_logged_in

    @property
    def dark_mode(self) -> bool:
        return self.state.dark_mode

    def login(self, username: str, password: str) -> bool:
        """Mock sign-in: any non-empty username and password is accepted."""

        if not username or not password:
            return False
        self.state.is_logged_in = True
        self._write_login_flag()
        logger.info("User signed in")
        return True

    def logout(self) -> None:
        self.state.is_logged_in = False
        self._write_login_flag()
        logger.info("User signed out")

    def toggle_dark_mode(self) -> bool:
        self.state.dark_mode = not self.state.dark_mode
        return self.state.dark_mode
