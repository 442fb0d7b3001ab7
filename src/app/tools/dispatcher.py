"""Dispatcher de tools bancárias.

Recebe (nome, argumentos), valida os argumentos no request tipado da tool,
chama o cliente do Inter e devolve um envelope uniforme. Nenhuma exceção
sai daqui: toda falha vira ToolResult(is_error=True) com "Erro: <mensagem>".
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from app.observability import reset_correlation_id, set_correlation_id
from app.tools.definitions import TOOL_DEFINITIONS
from app.tools.requests import (
    BaixarPdfBoletoRequest,
    BaixarPdfExtratoRequest,
    CancelarBoletoRequest,
    ConsultarBoletoRequest,
    ConsultarExtratoRequest,
    ConsultarSaldoRequest,
    EditarBoletoRequest,
    EmitirBoletoRequest,
    ListarBoletosRequest,
    SumarioBoletosRequest,
    format_validation_error,
)
from config.logging import log_tool_call
from utils.errors import InterMcpError, UnknownToolError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from mcp import types

    from app.infra.storage import PdfStorage
    from app.protocols import InterClientProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ToolResult:
    """Envelope de resposta de uma tool (um bloco de texto)."""

    text: str
    is_error: bool = False

    def as_dict(self) -> dict[str, Any]:
        return {
            "content": [{"type": "text", "text": self.text}],
            "isError": self.is_error,
        }


@dataclass(frozen=True, slots=True)
class _Route:
    request_model: type[BaseModel]
    handler: Callable[[Any], Awaitable[str]]


def _render_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


class InterToolDispatcher:
    """Tabela fixa de tools → métodos do cliente do Inter.

    Args:
        client: Cliente bancário (compartilhado entre sessões HTTP).
        storage: Destino dos PDFs de baixar_pdf_boleto/baixar_pdf_extrato.
    """

    def __init__(self, client: InterClientProtocol, storage: PdfStorage) -> None:
        self._client = client
        self._storage = storage
        self._routes: dict[str, _Route] = {
            "consultar_saldo": _Route(ConsultarSaldoRequest, self._consultar_saldo),
            "consultar_extrato": _Route(ConsultarExtratoRequest, self._consultar_extrato),
            "listar_boletos": _Route(ListarBoletosRequest, self._listar_boletos),
            "emitir_boleto": _Route(EmitirBoletoRequest, self._emitir_boleto),
            "consultar_boleto": _Route(ConsultarBoletoRequest, self._consultar_boleto),
            "baixar_pdf_boleto": _Route(BaixarPdfBoletoRequest, self._baixar_pdf_boleto),
            "cancelar_boleto": _Route(CancelarBoletoRequest, self._cancelar_boleto),
            "editar_boleto": _Route(EditarBoletoRequest, self._editar_boleto),
            "sumario_boletos": _Route(SumarioBoletosRequest, self._sumario_boletos),
            "baixar_pdf_extrato": _Route(BaixarPdfExtratoRequest, self._baixar_pdf_extrato),
        }

    def list_tools(self) -> list[types.Tool]:
        """Definições das tools, sempre na mesma ordem."""
        return list(TOOL_DEFINITIONS)

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> ToolResult:
        """Executa a tool `name` e devolve o envelope (nunca levanta)."""
        token = set_correlation_id()
        started_at = time.perf_counter()
        try:
            route = self._routes.get(name)
            if route is None:
                raise UnknownToolError(name)
            request = route.request_model.model_validate(arguments or {})
            text = await route.handler(request)
        except ValidationError as exc:
            message = f"Argumentos inválidos para {name}: {format_validation_error(exc)}"
            return self._failure(name, started_at, message, exc)
        except InterMcpError as exc:
            return self._failure(name, started_at, str(exc), exc)
        except Exception as exc:
            logger.exception("tool_unexpected_error", extra={"tool": name})
            return self._failure(name, started_at, f"{type(exc).__name__}: {exc}", exc)
        else:
            elapsed_ms = (time.perf_counter() - started_at) * 1000
            log_tool_call(logger, name, "ok", elapsed_ms=elapsed_ms)
            return ToolResult(text=text)
        finally:
            reset_correlation_id(token)

    def _failure(
        self,
        name: str,
        started_at: float,
        message: str,
        exc: BaseException,
    ) -> ToolResult:
        elapsed_ms = (time.perf_counter() - started_at) * 1000
        log_tool_call(logger, name, "error", elapsed_ms=elapsed_ms, error_type=type(exc).__name__)
        return ToolResult(text=f"Erro: {message}", is_error=True)

    # ──────────────────────────────────────────────────────────────────────
    # Handlers
    # ──────────────────────────────────────────────────────────────────────

    async def _consultar_saldo(self, request: ConsultarSaldoRequest) -> str:
        return _render_json(await self._client.get_saldo())

    async def _consultar_extrato(self, request: ConsultarExtratoRequest) -> str:
        extrato = await self._client.get_extrato(request.data_inicial, request.data_final)
        return _render_json(extrato)

    async def _listar_boletos(self, request: ListarBoletosRequest) -> str:
        return _render_json(await self._client.list_cobrancas(request.to_query()))

    async def _emitir_boleto(self, request: EmitirBoletoRequest) -> str:
        return _render_json(await self._client.emitir_cobranca(request.to_api()))

    async def _consultar_boleto(self, request: ConsultarBoletoRequest) -> str:
        return _render_json(await self._client.get_cobranca(request.codigo_solicitacao))

    async def _baixar_pdf_boleto(self, request: BaixarPdfBoletoRequest) -> str:
        # Valida o nome do arquivo antes de chamar o Inter.
        self._storage.boleto_path(request.codigo_solicitacao)
        pdf_base64 = await self._client.get_cobranca_pdf(request.codigo_solicitacao)
        path = await self._storage.save_boleto(request.codigo_solicitacao, pdf_base64)
        return f"PDF do boleto salvo em: {path}"

    async def _cancelar_boleto(self, request: CancelarBoletoRequest) -> str:
        await self._client.cancelar_cobranca(request.codigo_solicitacao, request.motivo)
        return f"Boleto {request.codigo_solicitacao} cancelado com sucesso."

    async def _editar_boleto(self, request: EditarBoletoRequest) -> str:
        await self._client.editar_cobranca(request.codigo_solicitacao, request.changes())
        return f"Boleto {request.codigo_solicitacao} alterado com sucesso."

    async def _sumario_boletos(self, request: SumarioBoletosRequest) -> str:
        return _render_json(await self._client.get_sumario_cobrancas(request.to_query()))

    async def _baixar_pdf_extrato(self, request: BaixarPdfExtratoRequest) -> str:
        self._storage.extrato_path(request.data_inicial, request.data_final)
        content = await self._client.get_extrato_pdf(request.data_inicial, request.data_final)
        path = await self._storage.save_extrato(request.data_inicial, request.data_final, content)
        return f"PDF do extrato salvo em: {path}"
