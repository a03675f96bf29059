"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.

Required values (BOT_TOKEN, CHAT_ID) are validated through the
accessor functions below so the bot can fail fast before polling.
"""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class ConfigError(RuntimeError):
    """Raised when a required startup value is missing or malformed."""


# ── Telegram ──────────────────────────────────────────────
BOT_TOKEN_KEY = "BOT_TOKEN"
CHAT_ID_KEY = "CHAT_ID"

_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1

# ── Random number range ───────────────────────────────────
RANDOM_MIN_KEY = "RANDOM_MIN"
RANDOM_MAX_KEY = "RANDOM_MAX"
DEFAULT_RANDOM_MIN: int = 1
DEFAULT_RANDOM_MAX: int = 100

# ── IP lookup ─────────────────────────────────────────────
PRIMARY_LOOKUP_URL: str = "https://2ip.ru/json/"
SECONDARY_LOOKUP_URL: str = "https://httpbin.org/ip"
LOOKUP_USER_AGENT: str = "Mozilla/5.0 (compatible; Bot/1.0)"

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


def get_bot_token() -> str:
    """Return the Telegram bot token or raise ConfigError."""
    token = os.getenv(BOT_TOKEN_KEY, "").strip()
    if not token:
        raise ConfigError(f"{BOT_TOKEN_KEY} environment variable is required")
    return token


def get_allowed_chat_id() -> int:
    """
    Return the single chat ID allowed to use the bot.

    Raises:
        ConfigError: If CHAT_ID is missing, not an integer,
            or does not fit in a signed 64-bit integer.
    """
    raw = os.getenv(CHAT_ID_KEY, "").strip()
    if not raw:
        raise ConfigError(f"{CHAT_ID_KEY} environment variable is required")
    try:
        chat_id = int(raw)
    except ValueError:
        raise ConfigError(f"{CHAT_ID_KEY} must be an integer, got {raw!r}") from None
    if not _INT64_MIN <= chat_id <= _INT64_MAX:
        raise ConfigError(f"{CHAT_ID_KEY} is out of range for a 64-bit integer: {raw}")
    return chat_id


def get_lookup_timeout() -> Optional[float]:
    """
    Timeout in seconds for the IP lookup requests.

    Returns None when LOOKUP_TIMEOUT_SECONDS is unset or invalid,
    meaning the HTTP client's default applies.
    """
    raw = os.getenv("LOOKUP_TIMEOUT_SECONDS", "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None
