"""
security/auth.py
-----------------
Authorization gate for the Telegram bot.
Only the single chat configured in CHAT_ID may use the bot.

The allowed chat ID is stored once in ``application.bot_data`` at startup
and read from the handler context, never from a module global.
"""

from contextlib import asynccontextmanager
from functools import wraps
from typing import AsyncIterator, Callable

from telegram import CallbackQuery, Update
from telegram.error import TelegramError
from telegram.ext import ContextTypes

from utils.logger import get_logger

logger = get_logger(__name__)

ALLOWED_CHAT_ID_KEY = "allowed_chat_id"


def is_allowed(chat_id: int, context: ContextTypes.DEFAULT_TYPE) -> bool:
    """Check a chat ID against the configured allowed chat."""
    return chat_id == context.bot_data[ALLOWED_CHAT_ID_KEY]


@asynccontextmanager
async def acknowledging(query: CallbackQuery) -> AsyncIterator[CallbackQuery]:
    """
    Answer the callback query exactly once when the block exits,
    whether it returns early, finishes, or raises.

    If the block raised, a failure to answer is only logged so the
    original error is the one reported.
    """
    try:
        yield query
    except Exception:
        try:
            await query.answer()
        except TelegramError as e:
            logger.error(f"Failed to answer callback query {query.id}: {e}")
        raise
    await query.answer()


def authorized_message(func: Callable):
    """
    Decorator for message handlers.

    Messages from any other chat are logged and dropped without a reply.
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        chat = update.effective_chat
        if chat is None or not is_allowed(chat.id, context):
            logger.warning(
                f"🚫 Message from unauthorized chat: {chat.id if chat else None}"
            )
            return
        return await func(update, context, *args, **kwargs)

    return wrapper


def authorized_callback(func: Callable):
    """
    Decorator for callback query handlers.

    Behavior:
        - The chat is taken from the message the button was attached to.
        - A callback without that message is treated as unauthorized.
        - The query is always answered once, so the client clears its
          loading indicator. The wrapped handler must not answer it itself.
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        async with acknowledging(update.callback_query) as query:
            if query.message is None:
                logger.warning("🚫 Callback query without a message, ignoring")
                return
            chat_id = query.message.chat.id
            if not is_allowed(chat_id, context):
                logger.warning(f"🚫 Callback from unauthorized chat: {chat_id}")
                return
            return await func(update, context, *args, **kwargs)

    return wrapper
