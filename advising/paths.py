from pathlib import Path

from advising.config import DATA_DIR_OVERRIDE

REPO_ROOT = Path(__file__).resolve().parents[1]
DATA_DIR = Path(DATA_DIR_OVERRIDE) if DATA_DIR_OVERRIDE else REPO_ROOT / "data"

EXPECTED_BASE = "CS 300 ABCU_Advising_Program_Input"
DEFAULT_INPUT = DATA_DIR / f"{EXPECTED_BASE}.csv"
