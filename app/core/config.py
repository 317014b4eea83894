"""
Configuration constants for the application.

Everything is read from the environment (and a project-root .env) once at
import time; a bad value stops the app at startup instead of failing every
request later.
"""
import os
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).resolve().parent.parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

ENVIRONMENT = os.getenv("ENVIRONMENT", "development").strip().lower()
IS_PRODUCTION = ENVIRONMENT == "production"


def load_timezone(name: str) -> ZoneInfo:
    """Resolve an IANA zone name, raising RuntimeError for unknown zones."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise RuntimeError(f"APP_TIMEZONE={name!r} is not a known IANA time zone") from exc


# Calendar used for "today" when evaluating streaks and daily check-ins.
# Any IANA zone name, e.g. "Europe/Berlin".
APP_TIMEZONE = os.getenv("APP_TIMEZONE", "UTC").strip() or "UTC"
APP_TZ = load_timezone(APP_TIMEZONE)

# Every level is a band of this many XP: level = total_xp // XP_PER_LEVEL + 1
XP_PER_LEVEL = 100

MIN_PASSWORD_LENGTH = 6

# Token signing. Production refuses to start without a real secret.
SECRET_KEY = os.getenv("SECRET_KEY", "").strip()
if not SECRET_KEY:
    if IS_PRODUCTION:
        raise RuntimeError("SECRET_KEY env var is required in production")
    SECRET_KEY = "local-development-only-secret"
    print("[CONFIG] SECRET_KEY not set, using the local development secret", flush=True)

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

# Cookie is marked Secure outside local development
COOKIE_SECURE = IS_PRODUCTION
