"""Composition root: logging, checagem de configuração e registro de nodes.

Único ponto onde app/ conhece os adapters concretos de api/.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_whatsapp_settings

if TYPE_CHECKING:
    from app.coordinators.whatsapp.nodes import WhatsAppNode

logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Configuração inválida em ambiente estrito (staging/production)."""


def initialize_app() -> None:
    """Instala o logging JSON com o correlation_id da requisição corrente."""
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Problemas de base e credencial, prefixados pela origem."""
    sources = {"base": get_base_settings(), "whatsapp": get_whatsapp_settings()}
    return [
        f"{origin}: {error}"
        for origin, settings in sources.items()
        for error in settings.validate()
    ]


def validate_runtime_settings() -> None:
    """Checagem de startup.

    Em development só registra um warning; nos demais ambientes levanta
    ConfigurationError listando cada problema.
    """
    environment = get_base_settings().environment
    errors = collect_settings_errors()
    if not errors:
        logger.info("settings_validated", extra={"environment": environment})
        return

    logger.warning(
        "settings_validation_failed",
        extra={"environment": environment, "errors": errors},
    )
    if get_base_settings().is_strict:
        listing = "\n".join(f"- {error}" for error in errors)
        raise ConfigurationError(f"Invalid configuration for {environment}:\n{listing}")


@lru_cache(maxsize=1)
def get_node_registry() -> dict[str, WhatsAppNode]:
    """Nodes por nome no host (ex: "whatsAppFlowSend"), criados uma vez."""
    from app.bootstrap.whatsapp_factory import create_node_registry

    return create_node_registry()
