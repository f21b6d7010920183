"""Logging estruturado em JSON (python-json-logger).

Módulos usam `logging.getLogger(__name__)` e eventos snake_case com
`extra={...}`; tokens, telefones e corpos de mensagem ficam fora dos logs.
"""

from config.logging.config import DEFAULT_SERVICE_NAME, configure_logging, log_fallback
from config.logging.json_output import CorrelationIdFilter, create_json_formatter

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "log_fallback",
]
