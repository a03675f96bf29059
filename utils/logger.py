"""
utils/logger.py
---------------
Process-wide logging for the bot.

Every module gets its logger through `get_logger(__name__)`; the first call
attaches a single stdout handler to the root logger at LOG_LEVEL.
HTTP client loggers are kept at WARNING because Telegram request URLs
carry the bot token.
"""

import logging
import sys

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_QUIET_LOGGERS = ("httpx", "httpcore")
_configured = False


def resolve_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its number, INFO if unknown."""
    level = getattr(logging, name.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level_name: str = LOG_LEVEL) -> None:
    """Attach the stdout handler to the root logger. Only the first call has effect."""
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(resolve_level(level_name))
    root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    setup_logging()
    return logging.getLogger(name)
