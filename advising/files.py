# files.py
from __future__ import annotations

from advising.paths import EXPECTED_BASE

CSV_SUFFIX = ".CSV"


def resolve_filename(user_input: str, base: str = EXPECTED_BASE) -> str | None:
    """Map "cs 300 abcu_advising_program_input[.csv]" (any case) to "<base>.csv"."""
    typed = (user_input or "").strip().upper()
    if typed.endswith(CSV_SUFFIX):
        typed = typed[: -len(CSV_SUFFIX)]
    if typed == base.upper():
        return f"{base}.csv"
    return None
