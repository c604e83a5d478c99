"""
Data models for purge requests awaiting confirmation or dispatch.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from cachebot.models.purge import PurgeScope


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class PendingRequest:
    """A parsed purge request waiting for the requester to say yes or no."""

    requester_id: int
    chat_id: int
    scope: PurgeScope
    requester_name: str
    message_thread_id: int | None = None
    created_at: datetime = field(default_factory=_utcnow)


@dataclass
class QueuedJob:
    """A confirmed purge request owned by the batch dispatcher."""

    requester_id: int
    chat_id: int
    scope: PurgeScope
    requester_name: str
    message_thread_id: int | None = None
    created_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def from_pending(cls, request: PendingRequest) -> "QueuedJob":
        """Promote a confirmed request into a dispatch job."""
        return cls(
            requester_id=request.requester_id,
            chat_id=request.chat_id,
            scope=request.scope,
            requester_name=request.requester_name,
            message_thread_id=request.message_thread_id,
        )
