"""Filters de logging para injeção de contexto.

Campos injetados:
- correlation_id: ID da chamada de tool em andamento
- session_id: ID da sessão MCP (vazio no transporte stdio)
- service: Nome do serviço

Nunca adicionar segredos (client_secret, token) ou PDFs nos logs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


def _empty() -> str:
    return ""


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id, session_id e service em cada record.

    Valores passados explicitamente via `extra` são preservados.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
        session_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or _empty
        self._get_session_id = session_id_getter or _empty

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; nunca descarta."""
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        existing_session = getattr(record, "session_id", None)
        record.session_id = existing_session if existing_session else self._get_session_id()
        record.service = self._service_name
        return True
