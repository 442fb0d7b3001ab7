"""Observabilidade — contexto de correlation_id e sessão para logs.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
"""

from app.observability.correlation import (
    generate_correlation_id,
    get_correlation_id,
    get_session_id,
    reset_correlation_id,
    reset_session_id,
    set_correlation_id,
    set_session_id,
)

__all__ = [
    "generate_correlation_id",
    "get_correlation_id",
    "get_session_id",
    "reset_correlation_id",
    "reset_session_id",
    "set_correlation_id",
    "set_session_id",
]
