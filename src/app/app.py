"""Entrypoint do serviço de mensagens interativas WhatsApp.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, Response

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.observability import CORRELATION_HEADERS, correlation_id_from_headers, correlation_scope
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

# logging JSON configurado no import do entrypoint
initialize_app()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Valida configurações no startup e registra o shutdown."""
    logger.info("app_starting", extra={"environment": get_base_settings().environment})
    validate_runtime_settings()

    yield

    logger.info("app_shutting_down")


async def correlation_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Toda requisição roda com correlation_id, devolvido no header de resposta."""
    with correlation_scope(correlation_id_from_headers(request.headers)) as correlation_id:
        response = await call_next(request)
    response.headers[CORRELATION_HEADERS[0]] = correlation_id
    return response


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    base = get_base_settings()
    fastapi_app = FastAPI(
        title="WhatsApp Interactive",
        description="Nodes de mensagens interativas e análise de WhatsApp Flows",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None if base.is_production else "/docs",
        redoc_url=None,
    )

    fastapi_app.include_router(create_api_router())
    fastapi_app.middleware("http")(correlation_middleware)

    logger.info("app_configured", extra={"docs_enabled": not base.is_production})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("dev_server_starting", extra={"port": 8080})
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
