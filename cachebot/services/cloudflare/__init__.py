# Cloudflare services - purge API integration
from .client import CloudflareClient
from .schemas import PurgeRequest, PurgeResponse

__all__ = ["CloudflareClient", "PurgeRequest", "PurgeResponse"]
