# devotional/config.py
from __future__ import annotations

import os

import pytz

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./devotional.db")

# Calendar dates are resolved in this zone ("today", aware datetimes)
TZ = pytz.timezone(os.getenv("DEVOTIONAL_TZ", "America/New_York"))

# Key of the persisted annotation state row
STATE_KEY = os.getenv("STATE_KEY", "dk-devotional-v1")

WINDOW_DAYS_BEFORE = int(os.getenv("WINDOW_DAYS_BEFORE", "120"))
WINDOW_DAYS_AFTER = int(os.getenv("WINDOW_DAYS_AFTER", "30"))
SEARCH_MAX_RESULTS = int(os.getenv("SEARCH_MAX_RESULTS", "60"))

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
