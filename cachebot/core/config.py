"""
Application configuration using pydantic-settings.
All environment variables are validated and typed.
"""

import os
from pydantic_settings import BaseSettings
from pydantic import field_validator


DEFAULT_TRIGGER_PHRASE = "clear cache"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Required tokens
    tg_token: str
    cf_token: str
    cf_zone: str

    # Cloudflare API
    cf_api_base_url: str = "https://api.cloudflare.com/client/v4"
    cf_timeout: float = 30.0

    # Command recognition
    trigger_phrase: str = DEFAULT_TRIGGER_PHRASE
    max_uris: int = 30

    # URL expansion (comma-separated)
    url_bases: str = ""
    url_suffixes: str = ""

    # Access restrictions (comma-separated names or ids)
    restricted_channels: str = ""
    authorised_users: str = ""

    # Batch dispatch
    flush_interval: float = 5.0
    queue_capacity: int = 10

    # Optional health endpoint
    status_host: str = "0.0.0.0"
    status_port: int | None = None

    log_level: str = "INFO"

    @staticmethod
    def _split_list(raw: str | None) -> list[str]:
        if not raw:
            return []
        return [item.strip() for item in raw.split(",") if item.strip()]

    @property
    def bases(self) -> list[str]:
        """Parse comma-separated URL bases."""
        return self._split_list(self.url_bases)

    @property
    def suffixes(self) -> list[str]:
        """Parse comma-separated URL suffix variants."""
        return self._split_list(self.url_suffixes)

    @property
    def restricted_channel_list(self) -> list[str]:
        """Get restricted channel names/ids."""
        return self._split_list(self.restricted_channels)

    @property
    def authorised_user_list(self) -> list[str]:
        """Get authorised user names/ids."""
        return self._split_list(self.authorised_users)

    @field_validator("trigger_phrase", mode="before")
    @classmethod
    def _default_trigger_phrase(cls, value: str | None) -> str:
        if value is None:
            return DEFAULT_TRIGGER_PHRASE
        cleaned = str(value).strip()
        return cleaned or DEFAULT_TRIGGER_PHRASE

    @field_validator("status_port", mode="before")
    @classmethod
    def _empty_port_disables(cls, value):
        if value is None or str(value).strip() == "":
            return None
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str | None) -> str:
        if not value:
            return "INFO"
        return str(value).strip().upper()

    model_config = {
        "env_file": os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), ".env"),
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton settings instance
settings = Settings()
