"""
handlers/menu_handler.py
------------------------
Handles plain messages and inline keyboard button presses.
Every reply ends with the action menu so the user can press again.
"""

from telegram import InlineKeyboardButton, InlineKeyboardMarkup, Update
from telegram.ext import ContextTypes

from models.actions import CallbackAction
from security.auth import authorized_callback, authorized_message
from services.ip_service import lookup_public_address
from services.random_service import generate_random_number
from utils.logger import get_logger

logger = get_logger(__name__)

PROMPT_TEXT = "Choose an action:"
UNKNOWN_COMMAND_TEXT = "Unknown command"


def build_keyboard() -> InlineKeyboardMarkup:
    """One row with the two available actions."""
    return InlineKeyboardMarkup([
        [
            InlineKeyboardButton("Get Address", callback_data=CallbackAction.GET_IP.value),
            InlineKeyboardButton("Random Number", callback_data=CallbackAction.GET_RANDOM.value),
        ]
    ])


async def send_menu(context: ContextTypes.DEFAULT_TYPE, chat_id: int) -> None:
    await context.bot.send_message(
        chat_id=chat_id,
        text=PROMPT_TEXT,
        reply_markup=build_keyboard(),
    )


@authorized_message
async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Any message from the allowed chat gets the action menu."""
    chat_id = update.effective_chat.id
    logger.info(f"Message from chat {chat_id}, sending menu")
    await send_menu(context, chat_id)


@authorized_callback
async def handle_callback(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Dispatch a button press to the matching action and re-send the menu.
    The query itself is answered by the ``authorized_callback`` decorator.
    """
    query = update.callback_query
    data = query.data
    if data is None:
        logger.warning("Callback query has no data")
        return

    chat_id = query.message.chat.id
    action = CallbackAction.parse(data)

    if action is CallbackAction.GET_IP:
        address = await lookup_public_address()
        text = f"Your address: {address}"
    elif action is CallbackAction.GET_RANDOM:
        number = generate_random_number()
        logger.info(f"Generated random number: {number}")
        text = f"Random number: {number}"
    else:
        logger.warning(f"Unknown callback data: {data!r}")
        text = UNKNOWN_COMMAND_TEXT

    await context.bot.send_message(chat_id=chat_id, text=text)
    await send_menu(context, chat_id)
    logger.info(f"Callback {data!r} handled for chat {chat_id}")
