"""
Application factory and main entry point.
"""

import sys
import asyncio
from functools import partial

from telegram import Bot
from telegram.error import TelegramError
from telegram.ext import Application

from cachebot.core.config import Settings, settings
from cachebot.core.exceptions import StartupError
from cachebot.core.logging import setup_logging, get_logger
from cachebot.handlers import register_handlers
from cachebot.handlers.base import TRIGGER_PHRASE_KEY
from cachebot.handlers.cache import CacheCommands
from cachebot.handlers.common import announce_ready, send_purge_result
from cachebot.services import (
    AccessPolicy,
    BatchDispatcher,
    CommandParser,
    PurgeExecutor,
    UriNormalizer,
    resolve_access_policy,
)
from cachebot.services.cloudflare import CloudflareClient
from cachebot.state.pending import PendingStore
from cachebot.status.server import start_status_server

# Initialize logging
setup_logging(settings.log_level)
logger = get_logger(__name__)


def create_app(config: Settings) -> Application:
    """Create the Telegram Application."""
    # Updates are processed one at a time: the pending store has a single writer
    return Application.builder().token(config.tg_token).concurrent_updates(False).build()


def build_dispatcher(config: Settings, bot: Bot) -> BatchDispatcher:
    """Wire the Cloudflare client, executor and reporter into a dispatcher."""
    client = CloudflareClient(
        config.cf_token,
        config.cf_zone,
        base_url=config.cf_api_base_url,
        timeout=config.cf_timeout,
    )
    return BatchDispatcher(
        PurgeExecutor(client),
        partial(send_purge_result, bot),
        interval=config.flush_interval,
        capacity=config.queue_capacity,
    )


def build_commands(config: Settings, dispatcher: BatchDispatcher, access: AccessPolicy) -> CacheCommands:
    """Wire the parser and pending store into the chat command handler."""
    parser = CommandParser(
        UriNormalizer(config.bases, config.suffixes),
        trigger_phrase=config.trigger_phrase,
        max_uris=config.max_uris,
    )
    return CacheCommands(parser, PendingStore(), dispatcher, access)


async def main() -> None:
    """Main application entry point."""
    logger.info("Starting cachebot...")

    application = create_app(settings)

    # Authenticate and resolve restricted channels; both are fatal on failure
    try:
        await application.initialize()
        access = await resolve_access_policy(
            application.bot,
            settings.restricted_channel_list,
            settings.authorised_user_list,
        )
    except (TelegramError, StartupError) as e:
        logger.error(f"Startup failed: {e}")
        sys.exit(1)

    dispatcher = build_dispatcher(settings, application.bot)
    commands = build_commands(settings, dispatcher, access)
    application.bot_data[TRIGGER_PHRASE_KEY] = settings.trigger_phrase
    register_handlers(application, commands)

    dispatcher.start()

    status_runner = None
    if settings.status_port:
        status_runner = await start_status_server(
            commands.store, dispatcher, settings.status_host, settings.status_port
        )

    await application.start()
    await application.updater.start_polling()
    await announce_ready(application.bot, access.restricted_chat_ids)

    logger.info("Bot and dispatcher are running.")

    # Keep running until cancelled
    stop_signal = asyncio.Event()
    try:
        await stop_signal.wait()
    except asyncio.CancelledError:
        pass
    finally:
        # No drain: pending confirmations and queued jobs are dropped
        await dispatcher.stop()
        if status_runner is not None:
            await status_runner.cleanup()
        await application.updater.stop()
        await application.stop()
        await application.shutdown()
