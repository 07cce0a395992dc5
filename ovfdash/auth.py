# ovfdash/auth.py

from __future__ import annotations

import hmac
import os
from typing import Optional

AUTH_USER = os.getenv("AUTH_USER", "")
AUTH_PASS = os.getenv("AUTH_PASS", "")
APP_ENV = os.getenv("APP_ENV", "dev")

SESSION_COOKIE = "session"
SESSION_VALUE = "authenticated"
SESSION_MAX_AGE_SECONDS = 60 * 60 * 24 * 7  # 1 week


def credentials_configured() -> bool:
    return bool(AUTH_USER and AUTH_PASS)


def check_credentials(username: Optional[str], password: Optional[str]) -> bool:
    """
    True only when both match the configured user/password.
    With no credentials configured nobody can log in through the API.
    """
    if not credentials_configured():
        return False
    user_ok = hmac.compare_digest((username or "").encode(), AUTH_USER.encode())
    pass_ok = hmac.compare_digest((password or "").encode(), AUTH_PASS.encode())
    return user_ok and pass_ok


def is_authenticated(session_value: Optional[str]) -> bool:
    return session_value == SESSION_VALUE


def cookie_secure() -> bool:
    return APP_ENV == "production"


def login_required(session_value: Optional[str]) -> bool:
    """
    Streamlit page gate: ask for a login only when credentials are
    configured and the session is not already authenticated.
    """
    return credentials_configured() and not is_authenticated(session_value)
