"""Settings do servidor MCP (transporte, storage e logging)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

McpTransport = Literal["stdio", "streamable-http"]

VALID_TRANSPORTS: frozenset[str] = frozenset({"stdio", "streamable-http"})

# Nome legado do modo HTTP, aceito em MCP_TRANSPORT.
TRANSPORT_ALIASES: dict[str, str] = {"sse": "streamable-http"}

SERVER_NAME: str = "mcp-banco-inter"
SERVER_VERSION: str = "1.0.0"


@dataclass(frozen=True)
class McpServerSettings:
    """Configurações do servidor MCP.

    Attributes:
        storage_path: Diretório onde PDFs baixados são gravados
        transport: stdio (processo único) ou streamable-http (multi-sessão);
            "sse" é aceito como alias de streamable-http
        host: Interface de escuta no modo HTTP
        port: Porta de escuta no modo HTTP
        json_response: Responde JSON puro em vez de SSE no modo HTTP
        log_level: Nível de log
    """

    storage_path: str = "./storage"
    transport: str = "stdio"
    host: str = "0.0.0.0"
    port: int = 3000
    json_response: bool = False
    log_level: str = "INFO"

    @property
    def resolved_transport(self) -> str:
        return TRANSPORT_ALIASES.get(self.transport, self.transport)

    @property
    def is_http(self) -> bool:
        return self.resolved_transport == "streamable-http"

    def validate(self) -> list[str]:
        errors: list[str] = []

        if self.resolved_transport not in VALID_TRANSPORTS:
            errors.append(
                f"Transporte inválido: {self.transport} "
                f"(válidos: {', '.join(sorted([*VALID_TRANSPORTS, *TRANSPORT_ALIASES]))})"
            )

        if not 0 < self.port < 65536:
            errors.append("MCP_PORT deve estar entre 1 e 65535")

        if not self.storage_path:
            errors.append("STORAGE_PATH não pode ser vazio")

        return errors


def _parse_port(value: str) -> int:
    # Porta não numérica vira 0 e é reportada por validate().
    try:
        return int(value)
    except ValueError:
        return 0


def _load_from_env() -> McpServerSettings:
    """Carrega McpServerSettings a partir de variáveis de ambiente."""
    return McpServerSettings(
        storage_path=os.path.abspath(os.getenv("STORAGE_PATH", "./storage")),
        transport=os.getenv("MCP_TRANSPORT", "stdio").strip().lower(),
        host=os.getenv("MCP_HOST", "0.0.0.0"),
        port=_parse_port(os.getenv("MCP_PORT", "3000")),
        json_response=os.getenv("MCP_JSON_RESPONSE", "").lower() in ("true", "1", "yes"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_server_settings() -> McpServerSettings:
    """Retorna instância cacheada de McpServerSettings."""
    return _load_from_env()
