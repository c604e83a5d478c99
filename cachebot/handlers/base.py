"""
Base Telegram command handlers.
"""

from telegram import Update
from telegram.ext import ContextTypes

from cachebot.handlers.common import build_help_text
from cachebot.services.parser import DEFAULT_TRIGGER_PHRASE

TRIGGER_PHRASE_KEY = "trigger_phrase"


def _trigger_phrase(context: ContextTypes.DEFAULT_TYPE) -> str:
    return context.bot_data.get(TRIGGER_PHRASE_KEY) or DEFAULT_TRIGGER_PHRASE


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command."""
    await update.message.reply_text(
        "Hi! I clear the CDN cache on request.\n\n" + build_help_text(_trigger_phrase(context))
    )


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help command."""
    await update.message.reply_text(build_help_text(_trigger_phrase(context)))
