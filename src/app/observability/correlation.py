"""correlation_id por requisição, guardado em ContextVar.

O valor vem do header `x-correlation-id` (ou `x-request-id`) quando o
host envia um; caso contrário é gerado. O CorrelationIdFilter do logging
lê o valor via get_correlation_id.
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

CORRELATION_HEADERS = ("x-correlation-id", "x-request-id")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    return uuid.uuid4().hex


def get_correlation_id() -> str:
    """correlation_id atual ou "" fora de uma requisição."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; None ou vazio gera um novo.

    Returns:
        Token para reset_correlation_id()
    """
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def correlation_id_from_headers(headers: Mapping[str, str]) -> str | None:
    """Primeiro header de correlação não vazio (nomes em minúsculas)."""
    for name in CORRELATION_HEADERS:
        value = (headers.get(name) or "").strip()
        if value:
            return value
    return None


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Define o correlation_id durante o bloco e restaura o anterior ao sair.

    Sem valor explícito mantém o id já ativo (ex: definido pelo middleware)
    ou gera um novo.
    """
    token = set_correlation_id(correlation_id or _correlation_id.get())
    try:
        yield _correlation_id.get()
    finally:
        reset_correlation_id(token)
