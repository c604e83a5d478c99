"""
Cloudflare API client for cache purges.
"""

import httpx
from cachebot.core.logging import get_logger
from cachebot.core.exceptions import PurgeProtocolError, PurgeTransportError
from .schemas import PurgeRequest, PurgeResponse

logger = get_logger(__name__)


class CloudflareClient:
    """Client for the purge_cache endpoint of a single zone."""

    BASE_URL = "https://api.cloudflare.com/client/v4"

    def __init__(self, token: str, zone: str, base_url: str | None = None, timeout: float = 30.0):
        self._token = token
        self._zone = zone
        self._base_url = (base_url or self.BASE_URL).rstrip("/")
        self._timeout = timeout
        self._headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

    @property
    def purge_url(self) -> str:
        return f"{self._base_url}/zones/{self._zone}/purge_cache"

    async def purge(self, request: PurgeRequest) -> PurgeResponse:
        """
        Send one purge request. No retries.

        Args:
            request: Purge body

        Returns:
            The decoded, successful response

        Raises:
            PurgeTransportError: If the request could not be sent or read
            PurgeProtocolError: If the response is undecodable or unsuccessful
        """
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            try:
                response = await client.post(
                    self.purge_url,
                    headers=self._headers,
                    json=request.to_dict(),
                )
            except httpx.HTTPError as e:
                raise PurgeTransportError(f"error sending request to Cloudflare: {e}") from e

        try:
            result = PurgeResponse.from_dict(response.json())
        except ValueError as e:
            logger.error("Undecodable Cloudflare response (HTTP %s)", response.status_code)
            raise PurgeProtocolError(
                f"error parsing response from Cloudflare (HTTP {response.status_code}): {e}"
            ) from e

        if not result.success:
            logger.warning("Cloudflare purge rejected: %s", result)
            message = "Cloudflare returned an unsuccessful response"
            summary = result.error_summary()
            if summary:
                message = f"{message}: {summary}"
            raise PurgeProtocolError(message)

        return result
