"""Router principal da API.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.nodes.router import router as nodes_router
from api.routes.whatsapp.webhook import router as webhook_router

# (router, prefixo, tag)
_ROUTERS: tuple[tuple[APIRouter, str, str], ...] = (
    (health_router, "", "health"),
    (nodes_router, "", "nodes"),
    (webhook_router, "/webhook/whatsapp", "whatsapp"),
)


def create_api_router() -> APIRouter:
    """Cria router com health, nodes e webhook WhatsApp."""
    api_router = APIRouter()
    for router, prefix, tag in _ROUTERS:
        api_router.include_router(router, prefix=prefix, tags=[tag])
    return api_router
