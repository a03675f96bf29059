"""
main.py
-------
Entry point for the IP & random number Telegram bot.

Responsibilities:
    - Validate the required configuration before anything starts.
    - Configure the Telegram application with its handlers.
    - Start polling until interrupted.
"""

import sys

from telegram import Update
from telegram.ext import (
    Application,
    CallbackQueryHandler,
    MessageHandler,
    filters,
)

from config import ConfigError, get_allowed_chat_id, get_bot_token
from handlers.error_handler import error_handler
from handlers.menu_handler import handle_callback, handle_message
from security.auth import ALLOWED_CHAT_ID_KEY
from utils.logger import get_logger

logger = get_logger(__name__)


def build_application(token: str, allowed_chat_id: int) -> Application:
    """Build the Telegram application and register all handlers."""
    app = Application.builder().token(token).build()
    app.bot_data[ALLOWED_CHAT_ID_KEY] = allowed_chat_id

    app.add_handler(MessageHandler(filters.UpdateType.MESSAGE, handle_message))
    app.add_handler(CallbackQueryHandler(handle_callback))
    app.add_error_handler(error_handler)
    return app


def main() -> None:
    """Initialize and run the bot."""

    # ── 1. Configuration ──────────────────────────────────
    try:
        token = get_bot_token()
        allowed_chat_id = get_allowed_chat_id()
    except ConfigError as e:
        logger.critical(f"Configuration error: {e}")
        sys.exit(str(e))

    # ── 2. Build the Telegram application ─────────────────
    logger.info(f"Starting bot for allowed chat ID {allowed_chat_id}")
    app = build_application(token, allowed_chat_id)

    # ── 3. Start polling ──────────────────────────────────
    logger.info("🚀 Bot is running! Press Ctrl+C to stop.")
    app.run_polling(
        drop_pending_updates=True,
        allowed_updates=[Update.MESSAGE, Update.CALLBACK_QUERY],
    )
    logger.info("Bot stopped.")


if __name__ == "__main__":
    main()
