"""
Data schemas for the Cloudflare purge_cache endpoint.
"""

from dataclasses import dataclass, field
from typing import Any

from cachebot.models.purge import PurgeScope


@dataclass
class PurgeRequest:
    """Body of a purge_cache call."""

    purge_everything: bool = False
    files: list[str] = field(default_factory=list)

    @classmethod
    def from_scope(cls, scope: PurgeScope) -> "PurgeRequest":
        """Build the request body for a purge scope."""
        if scope.everything:
            return cls(purge_everything=True)
        return cls(files=list(scope.uris))

    def to_dict(self) -> dict:
        """Convert to the JSON payload, omitting unset fields."""
        if self.purge_everything:
            return {"purge_everything": True}
        return {"files": list(self.files)}


@dataclass
class PurgeResponse:
    """Envelope returned by the Cloudflare v4 API."""

    success: bool
    errors: list[Any] = field(default_factory=list)
    messages: list[Any] = field(default_factory=list)
    result: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "PurgeResponse":
        """
        Parse a decoded JSON body.

        Raises:
            ValueError: If the body is not a Cloudflare envelope
        """
        if not isinstance(data, dict) or not isinstance(data.get("success"), bool):
            raise ValueError("response is not a Cloudflare API envelope")
        return cls(
            success=data["success"],
            errors=list(data.get("errors") or []),
            messages=list(data.get("messages") or []),
            result=data.get("result"),
        )

    def error_summary(self) -> str:
        """Render the error entries as "code: message" pairs."""
        parts = []
        for error in self.errors:
            if isinstance(error, dict):
                code = error.get("code")
                message = error.get("message", "")
                parts.append(f"{code}: {message}" if code is not None else str(message))
            else:
                parts.append(str(error))
        return "; ".join(parts)
