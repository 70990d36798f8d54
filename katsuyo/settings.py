"""
Settings and configuration for Katsuyo.

Values are read once from the environment at import time.
"""

import logging
import os
from pathlib import Path

# Data directory paths
PACKAGE_DIR = Path(__file__).parent
DATA_DIR = PACKAGE_DIR / "data"

# Database path for saved conjugation tables - defaults to data/katsuyo.db
DEFAULT_DB_PATH = DATA_DIR / "katsuyo.db"

# Environment variable for custom database path
DB_PATH = Path(os.environ.get("KATSUYO_DB_PATH", DEFAULT_DB_PATH))

# Debug mode
DEBUG = os.environ.get("KATSUYO_DEBUG", "").lower() in ("1", "true", "yes")

# Log level used by the command line interface
LOG_LEVEL = os.environ.get("KATSUYO_LOG_LEVEL", "DEBUG" if DEBUG else "WARNING").upper()


def get_log_level() -> int:
    """Numeric logging level for LOG_LEVEL, WARNING if it is not a known name."""
    level = logging.getLevelName(LOG_LEVEL)
    return level if isinstance(level, int) else logging.WARNING


def ensure_data_dirs():
    """Create necessary data directories if they don't exist."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)
