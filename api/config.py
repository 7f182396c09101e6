"""Application settings read from the environment (.env is loaded by api.main)."""

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

DATABASE_DIR = PROJECT_ROOT / "data"
DATABASE_URL = os.environ.get("DATABASE_URL", f"sqlite:///{DATABASE_DIR / 'dashboard.db'}")

# One JSON file per dashboard for the file-backed routes
DASHBOARDS_DIR = Path(os.environ.get("DASHBOARDS_DIR", str(PROJECT_ROOT / "dashboards")))

# createdAt / updatedAt are rendered in this zone
APP_TIMEZONE = os.environ.get("APP_TIMEZONE", "Asia/Seoul")

CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
