"""
Purge scope and outcome models.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PurgeScope:
    """What a purge request covers: the entire cache or an explicit URL list."""

    everything: bool
    uris: list[str] = field(default_factory=list)

    @classmethod
    def entire_cache(cls) -> "PurgeScope":
        """Scope that purges everything in the zone."""
        return cls(everything=True)

    @classmethod
    def for_uris(cls, uris: list[str]) -> "PurgeScope":
        """Scope that purges the given URLs."""
        return cls(everything=False, uris=list(uris))


@dataclass(frozen=True)
class PurgeOutcome:
    """Result of a single purge call."""

    success: bool
    message: str | None = None

    @classmethod
    def ok(cls) -> "PurgeOutcome":
        return cls(success=True)

    @classmethod
    def failure(cls, message: str) -> "PurgeOutcome":
        return cls(success=False, message=message)
