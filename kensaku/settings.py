"""
Settings and configuration for Kensaku.

All values can be overridden through environment variables.
"""

import os
from pathlib import Path

# Data directory paths
PACKAGE_DIR = Path(__file__).parent
DATA_DIR = PACKAGE_DIR / "data"

# Database path - defaults to data/kensaku.db
DEFAULT_DB_PATH = DATA_DIR / "kensaku.db"

# Environment variable for custom database path
DB_PATH = Path(os.environ.get("KENSAKU_DB_PATH", DEFAULT_DB_PATH))

# Debug mode (echoes SQL and logs at DEBUG)
DEBUG = os.environ.get("KENSAKU_DEBUG", "").lower() in ("1", "true", "yes")

# Logging level used by the command line front end
LOG_LEVEL = "DEBUG" if DEBUG else os.environ.get("KENSAKU_LOG_LEVEL", "WARNING").upper()

# Page size used when a request does not give one
DEFAULT_LIMIT = int(os.environ.get("KENSAKU_DEFAULT_LIMIT", 10))

# Largest page a single request may ask for
MAX_LIMIT = int(os.environ.get("KENSAKU_MAX_LIMIT", 100))

# Language code used when a request does not give one (0 = English)
DEFAULT_LANGUAGE = int(os.environ.get("KENSAKU_DEFAULT_LANGUAGE", 0))
