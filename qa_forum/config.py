"""
qa_forum/config.py
------------------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Storage backend ───────────────────────────────────────
DB_ENGINE: str = os.getenv("DB_ENGINE", "sqlite").lower()

# SQLite
SQLITE_PATH: str = os.getenv("SQLITE_PATH", "questions.db")

# PostgreSQL
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "questions")
DB_USER: str = os.getenv("DB_USER", "questions_user")
DB_PASS: str = os.getenv("DB_PASS", "")

DATABASE_URL: str = os.getenv("DATABASE_URL") or (
    f"sqlite:///{SQLITE_PATH}"
    if DB_ENGINE == "sqlite"
    else f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)

# Upper bound for a single backend call (busy timeout / statement timeout).
DB_TIMEOUT_SECONDS: float = float(os.getenv("DB_TIMEOUT_SECONDS", "5"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
