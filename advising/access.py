# access.py
from __future__ import annotations

import hmac

from advising.config import APP_PASSWORD


def expected_passcode(secrets=None) -> str:
    """ADVISING_APP_PASSWORD wins; otherwise APP_PASSWORD from the given secrets mapping."""
    if APP_PASSWORD:
        return APP_PASSWORD
    if secrets is None:
        return ""
    try:
        return str(secrets.get("APP_PASSWORD", "") or "")
    except FileNotFoundError:
        # streamlit raises this when no secrets.toml exists
        return ""


def check_passcode(entered: str | None, expected: str) -> bool:
    if not expected:
        return True
    return hmac.compare_digest((entered or "").encode("utf-8"), expected.encode("utf-8"))


def is_open(expected: str, authed: bool) -> bool:
    """The advising pages show when no passcode is set or the session already passed the gate."""
    return not expected or authed
