"""
Extraction of purge scopes from free-text chat messages.
"""

import re

from cachebot.core.exceptions import RequestTooLargeError
from cachebot.core.logging import get_logger
from cachebot.models.purge import PurgeScope
from cachebot.services.uris import UriNormalizer

logger = get_logger(__name__)

# Optional scheme://host prefix, only the path is captured.
# "|", ">" and "?" end a path so pasted links and query strings are cut off.
_PATH_RE = re.compile(r"(?:https?://[^/]+)?(/[^\s|>?]*)")

DEFAULT_TRIGGER_PHRASE = "clear cache"
DEFAULT_MAX_URIS = 30


class CommandParser:
    """Turns a trigger message into a purge scope."""

    def __init__(
        self,
        normalizer: UriNormalizer,
        trigger_phrase: str = DEFAULT_TRIGGER_PHRASE,
        max_uris: int = DEFAULT_MAX_URIS,
    ):
        self._normalizer = normalizer
        self._trigger_phrase = trigger_phrase or DEFAULT_TRIGGER_PHRASE
        self._max_uris = max_uris

    @property
    def trigger_phrase(self) -> str:
        return self._trigger_phrase

    def is_trigger(self, text: str) -> bool:
        """Check whether the message asks for a purge at all."""
        return self._trigger_phrase in text

    @staticmethod
    def extract_paths(text: str) -> list[str]:
        """Find path-like tokens in encounter order."""
        paths = []
        for match in _PATH_RE.finditer(text):
            # supports "clear cache for /a, /b and /c"
            path = match.group(1).removesuffix(",")
            if not path.startswith("/"):
                path = "/" + path
            paths.append(path)
        return paths

    def parse(self, text: str) -> PurgeScope | None:
        """
        Parse a message into a purge scope.

        Args:
            text: Raw message text

        Returns:
            None if the trigger phrase is absent, the entire cache if no
            path was given, otherwise every URL the paths expand to

        Raises:
            RequestTooLargeError: If the paths expand past the URI limit
        """
        if not self.is_trigger(text):
            return None

        paths = self.extract_paths(text)
        if not paths:
            return PurgeScope.entire_cache()

        uris: list[str] = []
        for path in paths:
            logger.debug("Expanding path %s", path)
            uris.extend(self._normalizer.expand(path))

        if len(uris) > self._max_uris:
            raise RequestTooLargeError(len(uris), self._max_uris)

        return PurgeScope.for_uris(uris)
