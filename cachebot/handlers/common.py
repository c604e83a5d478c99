"""
Common utilities for handlers.
"""

from telegram import Bot, User
from telegram.error import TelegramError

from cachebot.core.logging import get_logger
from cachebot.models.pending import QueuedJob
from cachebot.models.purge import PurgeOutcome

logger = get_logger(__name__)

READY_MESSAGE = "I'm ready! Say help for more information."


def format_mention(user: User) -> str:
    """Address a user the way they are shown in chat."""
    return f"@{user.username}" if user.username else user.full_name


def format_uri_list(uris: list[str]) -> str:
    return "\n".join(uris)


def build_help_text(trigger_phrase: str) -> str:
    return (
        "Here are some examples of how to clear the cache:\n"
        f"{trigger_phrase}\n"
        f"{trigger_phrase} for /some/uri\n"
        f"{trigger_phrase} for /some/uri and /another/uri\n"
        "If I ask you to confirm, reply with yes or no!"
    )


def build_outcome_text(job: QueuedJob, outcome: PurgeOutcome) -> str:
    """Render the report for a finished purge job."""
    if not outcome.success:
        return f"{job.requester_name} Sorry, that didn't work...\nError: {outcome.message}"
    if job.scope.everything:
        return f"{job.requester_name} That's done, the entire cache has been cleared"
    return (
        f"{job.requester_name} That's done, the following items have been cleared:\n"
        f"{format_uri_list(job.scope.uris)}"
    )


async def send_chat_message(
    bot: Bot,
    chat_id: int,
    text: str,
    message_thread_id: int | None = None,
) -> None:
    """Send plain text to a chat, inside a topic when one is given."""
    kwargs = {
        "chat_id": chat_id,
        "text": text,
    }
    if message_thread_id:
        kwargs["message_thread_id"] = message_thread_id

    await bot.send_message(**kwargs)


async def send_purge_result(bot: Bot, job: QueuedJob, outcome: PurgeOutcome) -> None:
    """Report a purge outcome back to the requester's chat."""
    try:
        await send_chat_message(
            bot,
            job.chat_id,
            build_outcome_text(job, outcome),
            message_thread_id=job.message_thread_id,
        )
    except TelegramError as e:
        logger.error(f"Purge report error: {e}")


async def announce_ready(bot: Bot, chat_ids) -> None:
    """Post the startup announcement into each known chat."""
    for chat_id in chat_ids:
        try:
            await send_chat_message(bot, chat_id, READY_MESSAGE)
        except TelegramError as e:
            logger.warning(f"Ready announcement to {chat_id} failed: {e}")
