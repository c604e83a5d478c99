"""
Telegram handlers registration.
"""

from telegram.ext import Application, CommandHandler, MessageHandler, filters

from cachebot.handlers.cache import CacheCommands


def register_handlers(app: Application, commands: CacheCommands) -> None:
    """Register all Telegram handlers with the application."""
    from cachebot.handlers.base import start, help_command

    app.add_handler(CommandHandler("start", start))
    app.add_handler(CommandHandler("help", help_command))
    app.add_handler(
        MessageHandler(
            filters.UpdateType.MESSAGE & filters.TEXT & ~filters.COMMAND,
            commands.handle_message,
        )
    )
