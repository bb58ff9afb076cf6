import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent

# Database
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR}/totl.db")

# Application
APP_TITLE = os.getenv("APP_TITLE", "Top of the League")

# Scoring
# Unicorns only count in leagues with at least this many members
UNICORN_MIN_PLAYERS = int(os.getenv("UNICORN_MIN_PLAYERS", "3"))

# Form table window sizes (gameweeks)
FORM_WINDOWS = (5, 10)

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_TO_CONSOLE = os.getenv("LOG_TO_CONSOLE", "True").lower() == "true"
