"""Endpoint de health check do modo HTTP."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel

from config.settings import SERVER_NAME, SERVER_VERSION

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = SERVER_VERSION
    active_sessions: int = 0


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe com contagem de sessões MCP ativas."""
    registry = getattr(request.app.state, "session_registry", None)
    return HealthResponse(
        status="healthy",
        service=SERVER_NAME,
        timestamp=datetime.now(UTC).isoformat(),
        active_sessions=len(registry) if registry is not None else 0,
    )
