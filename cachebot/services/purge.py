"""
Execution of a single confirmed purge.
"""

from cachebot.core.exceptions import CloudflareAPIError
from cachebot.core.logging import get_logger
from cachebot.models.purge import PurgeOutcome, PurgeScope
from cachebot.services.cloudflare import CloudflareClient, PurgeRequest

logger = get_logger(__name__)


class PurgeExecutor:
    """Issues one purge call per scope and classifies the result."""

    def __init__(self, client: CloudflareClient):
        self._client = client

    async def execute(self, scope: PurgeScope) -> PurgeOutcome:
        if scope.everything:
            logger.info("Clearing everything")
        else:
            logger.info("Clearing %d files", len(scope.uris))

        request = PurgeRequest.from_scope(scope)
        try:
            await self._client.purge(request)
        except CloudflareAPIError as e:
            logger.error(f"Purge failed: {e}")
            return PurgeOutcome.failure(str(e))
        except Exception as e:  # noqa: BLE001
            logger.exception("Unexpected purge error")
            return PurgeOutcome.failure(str(e))

        logger.info("Purge completed without errors")
        return PurgeOutcome.ok()
