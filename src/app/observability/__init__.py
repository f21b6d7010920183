"""Observabilidade: correlation_id propagado para os logs.

Uso:
    from app.observability import correlation_scope

    with correlation_scope(request.headers.get("x-correlation-id")) as correlation_id:
        ...
"""

from app.observability.correlation import (
    CORRELATION_HEADERS,
    correlation_id_from_headers,
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

__all__ = [
    "CORRELATION_HEADERS",
    "correlation_id_from_headers",
    "correlation_scope",
    "generate_correlation_id",
    "get_correlation_id",
    "reset_correlation_id",
    "set_correlation_id",
]
