"""Configuração centralizada de logging.

Logging estruturado JSON com campos obrigatórios (correlation_id,
session_id, service, level, logger, message) e um único handler em stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "mcp_banco_inter"

# Bibliotecas ruidosas em DEBUG (headers e handshakes TLS)
_QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    session_id_getter: Callable[[], str] | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez na inicialização (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Retorna o correlation_id do contexto atual.
        session_id_getter: Retorna o id da sessão MCP do contexto atual.
        stream: Destino dos logs. Padrão: sys.stderr (nunca stdout).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(
        CorrelationIdFilter(service_name, correlation_id_getter, session_id_getter)
    )

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]

    quiet_level = max(logging.getLevelName(level_upper), logging.WARNING)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    O filter injeta automaticamente service, correlation_id e session_id.
    """
    return logging.getLogger(name)


def log_tool_call(
    logger: logging.Logger,
    tool: str,
    result: str,
    elapsed_ms: float | None = None,
    error_type: str | None = None,
) -> None:
    """Log observável de uma chamada de tool (sem argumentos nem payloads).

    Args:
        logger: Logger instance.
        tool: Nome da tool chamada (ex: "consultar_saldo").
        result: "ok" ou "error".
        elapsed_ms: Tempo decorrido em ms.
        error_type: Nome da classe de erro, quando result == "error".

    Exemplo:
        log_tool_call(logger, "listar_boletos", "ok", elapsed_ms=231.4)
    """
    extra: dict[str, object] = {
        "component": "tool_dispatcher",
        "tool": tool,
        "result": result,
    }
    if elapsed_ms is not None:
        extra["elapsed_ms"] = round(elapsed_ms, 2)
    if error_type:
        extra["error_type"] = error_type

    level = logging.INFO if result == "ok" else logging.WARNING
    logger.log(level, "tool_call_%s", result, extra=extra)
