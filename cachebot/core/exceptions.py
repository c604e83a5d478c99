"""
Custom application exceptions.
"""


class BotError(Exception):
    """Base exception for bot errors."""
    pass


class StartupError(BotError):
    """Bot could not finish its boot-time setup."""
    pass


class RequestTooLargeError(BotError):
    """Purge request expands to more URIs than a single call may carry."""

    def __init__(self, count: int, limit: int):
        super().__init__(f"Request expands to {count} URIs, limit is {limit}")
        self.count = count
        self.limit = limit


class DispatchQueueFullError(BotError):
    """Dispatch handoff queue has no room for another job."""
    pass


class APIError(BotError):
    """External API call failed."""
    pass


class CloudflareAPIError(APIError):
    """Cloudflare API call failed."""
    pass


class PurgeTransportError(CloudflareAPIError):
    """Purge request never got a response from Cloudflare."""
    pass


class PurgeProtocolError(CloudflareAPIError):
    """Cloudflare answered, but the purge was not accepted or the body was unreadable."""
    pass
