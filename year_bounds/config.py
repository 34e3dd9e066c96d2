"""
Runtime configuration.

Values are read once at import time from the process environment, after
loading an optional `.env` file from the project root.

Environment variables:
- YEAR_BOUNDS_DEFAULT_TZ: IANA key used by `get_time_zone()` when no name is
  given (default: "UTC").
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Look for .env next to the year_bounds package; existing variables win.
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DEFAULT_TIME_ZONE: str = os.getenv("YEAR_BOUNDS_DEFAULT_TZ", "UTC").strip() or "UTC"

__all__ = ["DEFAULT_TIME_ZONE"]
