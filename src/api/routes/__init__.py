"""Rotas HTTP: health, nodes (descritores e execução) e webhook WhatsApp."""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
