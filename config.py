# config.py
# Role: Environment-driven settings for the bakery ledger.
#       Loads a local .env file (if present) and exposes plain module-level
#       constants read by db.py and main.py.

import os
from dotenv import load_dotenv

load_dotenv()

# Base directory of the project (where this module lives)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Folder for the default SQLite DB
DB_DIR = os.path.join(BASE_DIR, "database")


def _env_truthy(name: str, default: str = "0") -> bool:
    v = os.getenv(name, default)
    return str(v).strip().lower() in ("1", "true", "yes", "y", "on")


def default_database_url() -> str:
    os.makedirs(DB_DIR, exist_ok=True)  # ensure folder exists
    return f"sqlite:///{os.path.join(DB_DIR, 'bakery.db')}"


# SQLAlchemy connection URL
DATABASE_URL = os.getenv("DATABASE_URL") or default_database_url()

# Insert the three demo rows when the table is empty
SEED_DEMO_DATA = _env_truthy("SEED_DEMO_DATA", "1")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
