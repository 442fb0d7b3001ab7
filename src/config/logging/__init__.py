"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="mcp_banco_inter")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("inter_saldo_ok", extra={"latency_ms": 42})

Os logs saem sempre em stderr: no transporte stdio o stdout é o canal do
protocolo MCP.
"""

from config.logging.config import configure_logging, get_logger, log_tool_call
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "log_tool_call",
]
