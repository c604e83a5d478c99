# Services module - parsing, dispatch and external API integrations
from .access import AccessPolicy, resolve_access_policy
from .dispatcher import BatchDispatcher
from .parser import CommandParser
from .purge import PurgeExecutor
from .uris import UriNormalizer

__all__ = [
    "AccessPolicy",
    "BatchDispatcher",
    "CommandParser",
    "PurgeExecutor",
    "UriNormalizer",
    "resolve_access_policy",
]
