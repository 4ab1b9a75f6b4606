"""
Configuration constants and environment setup.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent
DB_PATH = PROJECT_ROOT / "data" / "db" / "fast-calendar.db"

# =============================================================================
# SCHEDULE PARSING
# =============================================================================

CLAUSE_SEPARATOR = ";"

# =============================================================================
# DAY GRID LAYOUT
# =============================================================================

HOURS_PER_DAY = 24
BASE_HEIGHT_PER_HOUR = 200  # px
EXTRA_HEIGHT_PER_OVERLAP = 50  # px per concurrent event in the busiest hour
BASE_FONT_SCALE = 1.0  # rem
FONT_SCALE_STEP = 0.05  # rem shaved off per concurrent event
MIN_FONT_SCALE = 0.7  # rem

# =============================================================================
# LIFE CALENDAR
# =============================================================================

# Years per lifespan option (see models.life.LifespanAssumption)
LIFESPAN_YEARS = {
    "unhealthy": 65,
    "healthy": 80,
    "extreme": 130,
}

# Older UI builds sent "bryan" for the 130 year option
LIFESPAN_ALIASES = {"bryan": "extreme"}

WEEK_COLUMNS = 52
DAY_COLUMNS = 7
DAYS_PER_WEEK = 7

# =============================================================================
# API CONFIGURATION
# =============================================================================

PLANNER_API_KEY = os.environ.get("PLANNER_API_KEY", "")
API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
MAX_INPUT_LENGTH = int(os.environ.get("MAX_INPUT_LENGTH", "10000"))  # characters
API_VERSION = "1.0.0"
