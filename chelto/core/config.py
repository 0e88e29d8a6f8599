import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _int_env(key: str, default: int) -> int:
    raw = (os.getenv(key) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _default_sqlite_url() -> str:
    data_dir = Path(__file__).resolve().parents[2] / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{(data_dir / 'chelto.db').as_posix()}"


# SQLite locally; MySQL/Postgres URLs work unchanged in production
DATABASE_URL = (os.getenv("DATABASE_URL") or "").strip() or _default_sqlite_url()

LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()

PROMOCODE_PREFIX = (os.getenv("PROMOCODE_PREFIX") or "CHELTO").strip()
PROMOCODE_AMOUNT = _int_env("PROMOCODE_AMOUNT", 250)
PROMOCODE_MAX_ATTEMPTS = _int_env("PROMOCODE_MAX_ATTEMPTS", 5)
REGISTRATION_STATUS = "registered"

REGISTRATION_RATE_LIMIT = _int_env("REGISTRATION_RATE_LIMIT", 5)
REGISTRATION_RATE_WINDOW_MINUTES = _int_env("REGISTRATION_RATE_WINDOW_MINUTES", 5)

ADMIN_API_KEY = os.getenv("ADMIN_API_KEY")

MONITOR_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN") or os.getenv("TG_MONITOR_BOT_TOKEN")
MONITOR_CHAT_ID = (
    os.getenv("TELEGRAM_MONITOR_CHAT_ID")
    or os.getenv("TG_MONITOR_CHAT_ID")
    or os.getenv("TELEGRAM_CHAT_ID")
)

CORS_ORIGINS = [
    o.strip()
    for o in (os.getenv("CORS_ORIGINS") or "https://chelto.in").split(",")
    if o.strip()
]
