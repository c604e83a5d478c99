"""
Cache purge chat command handlers.
"""

from telegram import Update
from telegram.ext import ContextTypes

from cachebot.core.exceptions import DispatchQueueFullError, RequestTooLargeError
from cachebot.core.logging import get_logger
from cachebot.handlers.common import build_help_text, format_mention, format_uri_list
from cachebot.models.pending import PendingRequest, QueuedJob
from cachebot.services.access import AccessPolicy
from cachebot.services.dispatcher import BatchDispatcher
from cachebot.services.parser import CommandParser
from cachebot.state.pending import PendingStore

logger = get_logger(__name__)

_HELP = "help"
_YES = "yes"
_NO = "no"
_SHORTCUTS = {_HELP, _YES, _NO}


def _get_message_thread_id(update: Update) -> int | None:
    """Get message thread ID if in a topic."""
    msg = update.effective_message
    if msg and msg.is_topic_message:
        return msg.message_thread_id
    return None


class CacheCommands:
    """
    Chat surface for cache purges.

    A trigger message creates a pending request for its sender, "yes"
    hands it to the dispatcher and "no" drops it. Each sender has at most
    one pending request; a new trigger replaces the old one.
    """

    def __init__(
        self,
        parser: CommandParser,
        store: PendingStore,
        dispatcher: BatchDispatcher,
        access: AccessPolicy | None = None,
    ):
        self._parser = parser
        self._store = store
        self._dispatcher = dispatcher
        self._access = access or AccessPolicy()

    @property
    def store(self) -> PendingStore:
        return self._store

    async def handle_message(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Handle plain text messages."""
        message = update.message
        user = update.effective_user
        if message is None or not message.text or user is None or user.is_bot:
            return

        text = message.text
        command = text.strip().lower()
        if command not in _SHORTCUTS and not self._parser.is_trigger(text):
            return

        mention = format_mention(user)
        chat_id = update.effective_chat.id

        if not self._access.is_allowed(chat_id, user):
            logger.info("Rejected %s from unauthorised user %s in %s", command, user.id, chat_id)
            await message.reply_text(f"{mention} Sorry, cachebot is restricted to authorised users")
            return

        if command == _HELP:
            await message.reply_text(f"{mention} {build_help_text(self._parser.trigger_phrase)}")
        elif command == _YES:
            await self._confirm(update, mention)
        elif command == _NO:
            await self._cancel(update, mention)
        else:
            await self._request(update, mention)

    async def _confirm(self, update: Update, mention: str) -> None:
        user_id = update.effective_user.id
        request = self._store.take(user_id)
        if request is None:
            return

        try:
            self._dispatcher.submit(QueuedJob.from_pending(request))
        except DispatchQueueFullError as e:
            logger.warning(f"Confirmation from {user_id} deferred: {e}")
            self._store.set(user_id, request)
            await update.message.reply_text(
                f"{mention} I'm busy with other purges right now, say yes again in a few seconds."
            )
            return

        await update.message.reply_text(f"{mention} Ok, I'll let you know when it's done.")

    async def _cancel(self, update: Update, mention: str) -> None:
        if self._store.take(update.effective_user.id) is None:
            return
        await update.message.reply_text(f"{mention} Ok, I'll cancel that!")

    async def _request(self, update: Update, mention: str) -> None:
        user_id = update.effective_user.id

        try:
            scope = self._parser.parse(update.message.text)
        except RequestTooLargeError as e:
            logger.info(f"Request from {user_id} rejected: {e}")
            await update.message.reply_text(
                f"{mention} That's too much for one request - try again with less URIs"
            )
            return

        if scope is None:
            return

        if scope.everything:
            prompt = (
                f"{mention} I'm about to clear the entire cache, are you sure?\n"
                "Warning: This will cause a spike in traffic to the production environment!"
            )
        elif not scope.uris:
            await update.message.reply_text(
                f"{mention} I couldn't build any URLs from that, no URL bases are configured."
            )
            return
        else:
            prompt = (
                f"{mention} I'm about to clear the following cache items, are you sure?\n"
                f"{format_uri_list(scope.uris)}"
            )

        await update.message.reply_text(prompt)
        self._store.set(
            user_id,
            PendingRequest(
                requester_id=user_id,
                chat_id=update.effective_chat.id,
                scope=scope,
                requester_name=mention,
                message_thread_id=_get_message_thread_id(update),
            ),
        )
        logger.info(
            "Pending purge for %s: %s",
            user_id,
            "everything" if scope.everything else f"{len(scope.uris)} URI(s)",
        )
