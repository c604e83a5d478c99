"""
Tests for core.config module.
"""

import pytest


class TestSettings:
    """Tests for Settings class."""

    def test_required_tokens_loaded(self):
        """Test that required tokens are loaded from environment."""
        # Import after env is set by fixture
        from cachebot.core.config import Settings

        settings = Settings()
        assert settings.tg_token == "test_token_123"
        assert settings.cf_token == "cf_test_token"
        assert settings.cf_zone == "zone123"

    def test_url_lists_parsed(self):
        """Test that comma-separated bases and suffixes keep their order."""
        from cachebot.core.config import Settings

        settings = Settings()

        assert settings.bases == ["https://a.com", "https://b.com"]
        assert settings.suffixes == ["index.html"]

    def test_access_lists_parsed(self):
        """Test restricted channels and authorised users parsing."""
        from cachebot.core.config import Settings

        settings = Settings()

        assert settings.restricted_channel_list == ["ops", "-100555"]
        assert settings.authorised_user_list == ["alice", "@Bob"]

    def test_empty_lists(self, monkeypatch):
        """Test that unset lists parse to empty lists."""
        monkeypatch.setenv("URL_SUFFIXES", "")
        monkeypatch.delenv("RESTRICTED_CHANNELS")

        from cachebot.core.config import Settings
        settings = Settings()

        assert settings.suffixes == []
        assert settings.restricted_channel_list == []

    def test_default_values(self):
        """Test that default values are set correctly."""
        from cachebot.core.config import Settings

        settings = Settings()

        assert settings.trigger_phrase == "clear cache"
        assert settings.max_uris == 30
        assert settings.flush_interval == 5.0
        assert settings.queue_capacity == 10
        assert settings.status_port is None
        assert settings.cf_api_base_url == "https://api.cloudflare.com/client/v4"

    def test_custom_trigger_phrase(self, monkeypatch):
        """Test TRIGGER_PHRASE override."""
        monkeypatch.setenv("TRIGGER_PHRASE", "purge cdn")

        from cachebot.core.config import Settings
        settings = Settings()

        assert settings.trigger_phrase == "purge cdn"

    def test_blank_trigger_phrase_uses_default(self, monkeypatch):
        """An empty TRIGGER_PHRASE falls back to the default."""
        monkeypatch.setenv("TRIGGER_PHRASE", "  ")

        from cachebot.core.config import Settings
        settings = Settings()

        assert settings.trigger_phrase == "clear cache"

    def test_status_port(self, monkeypatch):
        """STATUS_PORT enables the status server, empty disables it."""
        from cachebot.core.config import Settings

        monkeypatch.setenv("STATUS_PORT", "8081")
        assert Settings().status_port == 8081

        monkeypatch.setenv("STATUS_PORT", "")
        assert Settings().status_port is None

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        from cachebot.core.config import Settings

        assert Settings().log_level == "DEBUG"

    def test_missing_required_token_raises(self, monkeypatch):
        """Test that missing required token raises ValidationError."""
        from pydantic import ValidationError
        from cachebot.core.config import Settings

        monkeypatch.delenv("TG_TOKEN")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
