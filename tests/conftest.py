"""Fixtures compartilhadas (src/ entra no path via pythonpath do pytest)."""

from __future__ import annotations

import pytest

from config.settings import WhatsAppSettings, get_base_settings, get_whatsapp_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Cada teste relê o ambiente em vez de herdar o cache do processo."""
    get_base_settings.cache_clear()
    get_whatsapp_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_whatsapp_settings.cache_clear()


@pytest.fixture
def whatsapp_settings() -> WhatsAppSettings:
    return WhatsAppSettings(
        access_token="test-token",
        phone_number_id="1234567890",
        webhook_verify_token="verify-me",
        max_retries=0,
    )
