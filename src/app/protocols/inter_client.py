"""Contrato do cliente bancário usado pelo dispatcher de tools.

Evita dependência direta de app na camada api (connectors).
"""

from __future__ import annotations

from typing import Any, Protocol


class InterClientProtocol(Protocol):
    """Operações remotas do Banco Inter expostas como tools."""

    async def get_saldo(self) -> dict[str, Any]: ...

    async def get_extrato(self, data_inicial: str, data_final: str) -> dict[str, Any]: ...

    async def get_extrato_pdf(self, data_inicial: str, data_final: str) -> bytes: ...

    async def list_cobrancas(self, params: dict[str, Any]) -> dict[str, Any]: ...

    async def emitir_cobranca(self, payload: dict[str, Any]) -> dict[str, Any]: ...

    async def get_cobranca(self, codigo_solicitacao: str) -> dict[str, Any]: ...

    async def get_cobranca_pdf(self, codigo_solicitacao: str) -> str: ...

    async def cancelar_cobranca(self, codigo_solicitacao: str, motivo: str) -> None: ...

    async def editar_cobranca(
        self,
        codigo_solicitacao: str,
        payload: dict[str, Any],
    ) -> Any: ...

    async def get_sumario_cobrancas(self, params: dict[str, Any]) -> Any: ...
