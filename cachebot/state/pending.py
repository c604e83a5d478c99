"""
Storage for purge requests awaiting confirmation.
"""

from cachebot.models.pending import PendingRequest


class PendingStore:
    """At most one pending purge request per requester.

    Only the update-processing path touches the store, so no locking is done.
    """

    def __init__(self):
        self._requests: dict[int, PendingRequest] = {}

    def set(self, requester_id: int, request: PendingRequest) -> None:
        """Store a request, replacing any earlier one from the same requester."""
        self._requests[requester_id] = request

    def get(self, requester_id: int) -> PendingRequest | None:
        """Get a pending request without removing it."""
        return self._requests.get(requester_id)

    def take(self, requester_id: int) -> PendingRequest | None:
        """Remove and return the pending request for a requester."""
        return self._requests.pop(requester_id, None)

    def __contains__(self, requester_id: int) -> bool:
        return requester_id in self._requests

    def __len__(self) -> int:
        return len(self._requests)
