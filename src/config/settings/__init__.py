"""Settings do serviço, lidas do ambiente e cacheadas por processo."""

from __future__ import annotations

from config.settings.base import BaseSettings, Environment, get_base_settings
from config.settings.whatsapp import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    WhatsAppSettings,
    get_whatsapp_settings,
)

__all__ = [
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    "BaseSettings",
    "Environment",
    "WhatsAppSettings",
    "get_base_settings",
    "get_whatsapp_settings",
]
