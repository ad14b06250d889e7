from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

TEST_ROOT = Path(__file__).resolve().parent

# Load test/.env first, then fall back to test/.env.example for defaults
load_dotenv(TEST_ROOT / ".env", override=False)
load_dotenv(TEST_ROOT / ".env.example", override=False)

# The application builds its global engine at import time; point it at SQLite
# before any person_service module is imported.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("LOGFIRE_ENABLED", "false")
