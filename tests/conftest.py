"""
Pytest configuration and shared fixtures.
"""

import os
import sys
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

# Add repository root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def mock_env(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("TG_TOKEN", "test_token_123")
    monkeypatch.setenv("CF_TOKEN", "cf_test_token")
    monkeypatch.setenv("CF_ZONE", "zone123")
    monkeypatch.setenv("URL_BASES", "https://a.com,https://b.com")
    monkeypatch.setenv("URL_SUFFIXES", "index.html")
    monkeypatch.setenv("RESTRICTED_CHANNELS", "ops,-100555")
    monkeypatch.setenv("AUTHORISED_USERS", "alice,@Bob")


# ============================================================================
# Mock Fixtures
# ============================================================================

@pytest.fixture
def mock_bot():
    """Create a mock Telegram Bot."""
    bot = MagicMock()
    bot.send_message = AsyncMock()
    bot.get_chat = AsyncMock()
    return bot


@pytest.fixture
def make_update():
    """Build mock Telegram Updates carrying a text message."""
    def _make(text: str, user_id: int = 123456, chat_id: int = -100987654321, username: str | None = "testuser"):
        update = MagicMock()
        update.effective_user.id = user_id
        update.effective_user.username = username
        update.effective_user.full_name = "Test User"
        update.effective_user.is_bot = False
        update.effective_chat.id = chat_id
        update.effective_message.message_thread_id = None
        update.effective_message.is_topic_message = False
        update.message.text = text
        update.message.reply_text = AsyncMock()
        return update
    return _make


@pytest.fixture
def mock_update(make_update):
    """Create a mock Telegram Update."""
    return make_update("clear cache")


@pytest.fixture
def mock_context(mock_bot):
    """Create a mock Telegram Context."""
    context = MagicMock()
    context.bot = mock_bot
    context.args = []
    context.bot_data = {}
    return context


@pytest.fixture
def mock_httpx_client():
    """Create a mock httpx AsyncClient."""
    with patch("httpx.AsyncClient") as mock:
        client_instance = AsyncMock()
        mock.return_value.__aenter__.return_value = client_instance
        yield client_instance


# ============================================================================
# Service Fixtures
# ============================================================================

@pytest.fixture
def normalizer():
    """Create a UriNormalizer with two bases and one suffix."""
    from cachebot.services.uris import UriNormalizer
    return UriNormalizer(["https://a.com", "https://b.com"], ["index.html"])


@pytest.fixture
def parser(normalizer):
    """Create a CommandParser with default trigger and limit."""
    from cachebot.services.parser import CommandParser
    return CommandParser(normalizer)


@pytest.fixture
def cloudflare_client():
    """Create a CloudflareClient with test config."""
    from cachebot.services.cloudflare import CloudflareClient
    return CloudflareClient("cf_test", "zone123")


@pytest.fixture
def pending_store():
    """Create an empty PendingStore."""
    from cachebot.state.pending import PendingStore
    return PendingStore()


@pytest.fixture
def mock_executor():
    """Create a PurgeExecutor stand-in that always succeeds."""
    from cachebot.models.purge import PurgeOutcome

    executor = MagicMock()
    executor.execute = AsyncMock(return_value=PurgeOutcome.ok())
    return executor
