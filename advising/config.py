"""
Runtime settings for the advising assistant.

Values come from the environment, optionally seeded from a .env file in the
repo root or the current working directory.
"""

import os
from pathlib import Path

from dotenv import load_dotenv


def load_environment():
    """Load the first .env file found; real environment variables win."""
    for path in (Path(__file__).resolve().parents[1] / ".env", Path(".env")):
        if path.exists():
            load_dotenv(dotenv_path=path, override=False)
            break


load_environment()

LOG_LEVEL = os.getenv("ADVISING_LOG_LEVEL", "INFO").upper()
if LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
    LOG_LEVEL = "INFO"
LOG_FILE = os.getenv("ADVISING_LOG_FILE", "")
DATA_DIR_OVERRIDE = os.getenv("ADVISING_DATA_DIR", "")
APP_PASSWORD = os.getenv("ADVISING_APP_PASSWORD", "")
