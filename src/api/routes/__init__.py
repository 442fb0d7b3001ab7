"""Rotas HTTP auxiliares do modo streamable-http.

- routes/health/: liveness com contagem de sessões
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
