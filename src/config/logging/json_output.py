"""Saída JSON dos logs (python-json-logger).

Cada linha traz timestamp, level, logger, message, service e
correlation_id, mais o que o chamador passar em `extra`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pythonjsonlogger.json import JsonFormatter

if TYPE_CHECKING:
    from collections.abc import Callable

LOG_RECORD_FIELDS = ("levelname", "name", "message", "correlation_id")

RENAMED_FIELDS = {"levelname": "level", "name": "logger"}


class CorrelationIdFilter(logging.Filter):
    """Preenche record.correlation_id a partir do contexto da requisição.

    Um correlation_id passado explicitamente em `extra` tem precedência.
    """

    def __init__(self, correlation_id_getter: Callable[[], str] | None = None) -> None:
        super().__init__()
        self._getter = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._getter() if self._getter else ""
        return True


def create_json_formatter(service_name: str) -> JsonFormatter:
    """Formatter JSON com `service` fixo e timestamp ISO-8601.

    Exemplo:
        {"level": "INFO", "logger": "app.coordinators.whatsapp.nodes",
         "message": "interactive_message_sent", "correlation_id": "9f0c...",
         "service": "whatsapp_interactive", "timestamp": "2026-10-19T10:30:00+00:00"}
    """
    return JsonFormatter(
        " ".join(f"%({name})s" for name in LOG_RECORD_FIELDS),
        rename_fields=RENAMED_FIELDS,
        static_fields={"service": service_name},
        timestamp=True,
    )
