"""configure_logging: handler único no root com saída JSON.

Chamado uma vez pelo bootstrap (app/bootstrap/initialize_app).
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from config.logging.json_output import CorrelationIdFilter, create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "whatsapp_interactive"

# httpx loga a URL completa (com phone_number_id) em INFO
QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Instala o handler JSON no root logger, substituindo os existentes.

    Raises:
        ValueError: Nível fora de VALID_LOG_LEVELS

    Returns:
        O handler instalado
    """
    normalized = level.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {level!r} (expected one of {sorted(VALID_LOG_LEVELS)})"
        )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(create_json_formatter(service_name))
    handler.addFilter(CorrelationIdFilter(correlation_id_getter))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(normalized)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler


def log_fallback(logger: logging.Logger, component: str, reason: str | None = None) -> None:
    """Registra que um valor de fallback foi usado no lugar do esperado."""
    extra: dict[str, object] = {"component": component, "fallback_used": True}
    if reason is not None:
        extra["reason"] = reason
    logger.info("fallback_applied", extra=extra)
