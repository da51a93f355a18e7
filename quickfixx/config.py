import os

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return (os.getenv(name) or default).strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = (os.getenv("DATABASE_URL") or "").strip() or "sqlite+aiosqlite:///./quickfixx.db"
DB_ECHO = _flag("DB_ECHO")
AUTO_CREATE_TABLES = _flag("AUTO_CREATE_TABLES", "true")

SESSION_SECRET = os.getenv("SESSION_SECRET")
SESSION_ALGORITHM = os.getenv("SESSION_ALGORITHM") or "HS256"
SESSION_MAX_AGE_SECONDS = int(os.getenv("SESSION_MAX_AGE_SECONDS") or 7 * 24 * 60 * 60)
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME") or "quickfixx_session"
SESSION_COOKIE_SECURE = _flag("SESSION_COOKIE_SECURE")

if not SESSION_SECRET:
    raise RuntimeError("SESSION_SECRET environment variable is not set")

CORS_ORIGINS = [o.strip() for o in (os.getenv("CORS_ORIGINS") or "").split(",") if o.strip()]

LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").upper()

DEFAULT_BRAND_NAME = os.getenv("DEFAULT_BRAND_NAME") or "Quickfixx"
