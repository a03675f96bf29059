"""
handlers/error_handler.py
-------------------------
Application-wide error handler. Telegram API failures raised inside a
handler end up here; nothing is retried.
"""

from telegram.ext import ContextTypes

from utils.logger import get_logger

logger = get_logger(__name__)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log the exception that aborted handling of an update."""
    logger.error(f"Exception while handling update {update}", exc_info=context.error)
