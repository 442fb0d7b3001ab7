"""Contexto de rastreamento para logs (correlation_id e session_id).

O correlation_id identifica uma chamada de tool; o session_id identifica a
sessão MCP no transporte HTTP. Ambos usam ContextVar, portanto são
isolados por task asyncio.

Uso:
    token = set_correlation_id()
    try:
        ...  # processar chamada
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")
_session_id: ContextVar[str] = ContextVar("mcp_session_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = correlation_id or generate_correlation_id()
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())


def get_session_id() -> str:
    """Retorna o id da sessão MCP do contexto atual (vazio em stdio)."""
    return _session_id.get()


def set_session_id(session_id: str) -> Token[str]:
    return _session_id.set(session_id)


def reset_session_id(token: Token[str]) -> None:
    _session_id.reset(token)
