"""Agregador de rotas HTTP.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())

O endpoint MCP (/mcp) é um app ASGI registrado em app.app, não um router.
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()
    api_router.include_router(health_router, tags=["health"])
    return api_router
