"""
Chat access restrictions.
"""

from dataclasses import dataclass, field

from telegram import Bot, User
from telegram.error import TelegramError

from cachebot.core.exceptions import StartupError
from cachebot.core.logging import get_logger

logger = get_logger(__name__)


def _normalize_user_token(token: str) -> str:
    return token.strip().lstrip("@").lower()


def _parse_chat_id(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


@dataclass
class AccessPolicy:
    """Restricted chats only accept commands from authorised users."""

    restricted_chat_ids: set[int] = field(default_factory=set)
    authorised_users: set[str] = field(default_factory=set)

    @classmethod
    def build(cls, restricted_chat_ids, authorised_users) -> "AccessPolicy":
        return cls(
            restricted_chat_ids=set(restricted_chat_ids),
            authorised_users={_normalize_user_token(u) for u in authorised_users if u.strip()},
        )

    def is_restricted(self, chat_id: int) -> bool:
        return chat_id in self.restricted_chat_ids

    def is_authorised(self, user: User | None) -> bool:
        if user is None:
            return False
        if str(user.id) in self.authorised_users:
            return True
        return bool(user.username) and user.username.lower() in self.authorised_users

    def is_allowed(self, chat_id: int, user: User | None) -> bool:
        """Check whether a user may issue commands in a chat."""
        return not self.is_restricted(chat_id) or self.is_authorised(user)


async def resolve_access_policy(
    bot: Bot,
    restricted_channels: list[str],
    authorised_users: list[str],
) -> AccessPolicy:
    """
    Resolve configured channel names into chat ids.

    Numeric entries are taken as chat ids, anything else is looked up
    as a public @username.

    Raises:
        StartupError: If a channel cannot be resolved
    """
    chat_ids: set[int] = set()
    for channel in restricted_channels:
        chat_id = _parse_chat_id(channel)
        if chat_id is None:
            username = channel if channel.startswith("@") else f"@{channel}"
            try:
                chat = await bot.get_chat(username)
            except TelegramError as e:
                raise StartupError(f"Failed to resolve restricted channel {channel}: {e}") from e
            chat_id = chat.id
        chat_ids.add(chat_id)

    policy = AccessPolicy.build(chat_ids, authorised_users)
    logger.info(
        "Access policy: %d restricted chat(s), %d authorised user(s)",
        len(policy.restricted_chat_ids),
        len(policy.authorised_users),
    )
    return policy
