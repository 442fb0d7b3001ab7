"""Exceções do mcp-banco-inter.

Toda falha por chamada (autenticação, API remota, armazenamento, tool
inexistente) é capturada na fronteira do dispatcher e devolvida como
envelope de erro. Apenas ConfigError é fatal (no startup).
"""

from __future__ import annotations

from typing import Any


class InterMcpError(RuntimeError):
    """Base para erros conhecidos do serviço."""


class ConfigError(InterMcpError):
    """Configuração obrigatória ausente ou inválida no startup."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


class _UpstreamError(InterMcpError):
    """Erro com status e corpo devolvidos pelo Banco Inter."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class AuthenticationError(_UpstreamError):
    """Endpoint OAuth rejeitou as credenciais (ou ficou inacessível)."""


class RemoteApiError(_UpstreamError):
    """Resposta não-2xx ou falha de rede em endpoint bancário."""


class UnknownToolError(InterMcpError):
    """Nome de tool fora da tabela de dispatch."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Tool not found: {name}")
        self.tool_name = name


class StorageError(InterMcpError):
    """Falha ao decodificar ou gravar PDF no diretório de storage."""
