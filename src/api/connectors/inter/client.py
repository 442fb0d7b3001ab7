"""Cliente HTTP autenticado para a API PJ do Banco Inter.

Responsabilidades:
- mTLS com certificado e chave da aplicação
- OAuth2 client credentials com cache do token até 60s antes de expirar
- Um método por operação bancária, cada um com exatamente uma requisição
- Erros não-2xx viram RemoteApiError (sem retry)

O token é um campo da instância. Duas chamadas concorrentes com o token
vencido podem autenticar duas vezes; a última escrita vence.
"""

from __future__ import annotations

import json
import logging
import os
import ssl
import time
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx

from api.connectors.inter.auth import AccessToken
from api.connectors.inter.errors import describe_http_error, response_body
from utils.errors import AuthenticationError, ConfigError, RemoteApiError

if TYPE_CHECKING:
    from collections.abc import Callable

    from config.settings import InterSettings

logger = logging.getLogger(__name__)

_COMPONENT = "inter_client"

TOKEN_PATH = "/oauth/v2/token"
SALDO_PATH = "/banking/v2/saldo"
EXTRATO_PATH = "/banking/v2/extrato"
EXTRATO_PDF_PATH = "/banking/v2/extrato/exportar"
COBRANCAS_PATH = "/cobranca/v3/cobrancas"
SUMARIO_PATH = "/cobranca/v3/cobrancas/sumario"

CONTA_CORRENTE_HEADER = "x-conta-corrente"


def cobranca_path(codigo_solicitacao: str, action: str = "") -> str:
    """Path de uma cobrança; o código vira um único segmento escapado."""
    segment = quote(codigo_solicitacao, safe="")
    if segment in {".", ".."}:
        segment = segment.replace(".", "%2E")
    path = f"{COBRANCAS_PATH}/{segment}"
    return f"{path}/{action}" if action else path


def build_ssl_context(settings: InterSettings) -> ssl.SSLContext:
    """Cria o contexto TLS com o certificado do cliente (mTLS).

    Raises:
        ConfigError: Se certificado ou chave não puderem ser carregados.
    """
    for label, path in (("CERT_PATH", settings.cert_path), ("KEY_PATH", settings.key_path)):
        if not os.path.isfile(path):
            raise ConfigError(f"{label} não encontrado: {path}")

    context = ssl.create_default_context()
    if not settings.verify_ssl:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    try:
        context.load_cert_chain(certfile=settings.cert_path, keyfile=settings.key_path)
    except (ssl.SSLError, OSError) as exc:
        raise ConfigError(f"Certificado mTLS inválido: {exc}") from exc
    return context


class InterClient:
    """Cliente da API do Inter com autenticação transparente.

    Args:
        settings: Credenciais e parâmetros de conexão (imutáveis).
        http_client: AsyncClient já configurado (testes). Se None, cria um
            com mTLS, base_url do ambiente e timeout total.
        clock: Relógio em segundos usado na expiração do token.
    """

    def __init__(
        self,
        settings: InterSettings,
        *,
        http_client: httpx.AsyncClient | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._settings = settings
        self._clock = clock
        self._token: AccessToken | None = None

        if http_client is None:
            if not settings.verify_ssl:
                logger.warning(
                    "inter_tls_verification_disabled",
                    extra={"component": _COMPONENT, "base_url": settings.base_url},
                )
            http_client = httpx.AsyncClient(
                base_url=settings.base_url,
                verify=build_ssl_context(settings),
                timeout=settings.request_timeout_seconds,
            )
        self._http = http_client

        logger.info(
            "inter_client_initialized",
            extra={
                "component": _COMPONENT,
                "base_url": str(self._http.base_url),
                "sandbox": settings.is_sandbox,
            },
        )

    @property
    def settings(self) -> InterSettings:
        return self._settings

    async def aclose(self) -> None:
        """Fecha o pool de conexões HTTP."""
        await self._http.aclose()

    # ──────────────────────────────────────────────────────────────────────
    # Autenticação
    # ──────────────────────────────────────────────────────────────────────

    async def authenticate(self) -> str:
        """Retorna bearer token válido, renovando quando expirado.

        Raises:
            AuthenticationError: Se o endpoint OAuth rejeitar ou ficar inacessível.
        """
        now = self._clock()
        if self._token is not None and self._token.is_valid(now):
            return self._token.value

        form = {
            "client_id": self._settings.client_id,
            "client_secret": self._settings.client_secret,
            "grant_type": "client_credentials",
            "scope": self._settings.oauth_scope,
        }
        logger.info("inter_authenticating", extra={"component": _COMPONENT})
        try:
            response = await self._http.post(TOKEN_PATH, data=form)
        except httpx.HTTPError as exc:
            logger.error(
                "inter_auth_connection_error",
                extra={"component": _COMPONENT, "error_type": type(exc).__name__},
            )
            raise AuthenticationError(
                f"Falha de conexão ao autenticar no Inter: {type(exc).__name__}: {exc}"
            ) from exc

        if not response.is_success:
            body = response_body(response)
            logger.error(
                "inter_auth_rejected",
                extra={"component": _COMPONENT, "status_code": response.status_code},
            )
            raise AuthenticationError(
                describe_http_error("Autenticação", response.status_code, body),
                status_code=response.status_code,
                body=body,
            )

        try:
            token = AccessToken.from_response(response.json(), now)
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
            raise AuthenticationError(
                "Resposta de autenticação sem access_token válido",
                status_code=response.status_code,
                body=response.text,
            ) from exc

        self._token = token
        logger.info(
            "inter_token_refreshed",
            extra={"component": _COMPONENT, "expires_in_s": round(token.expires_at - now)},
        )
        return token.value

    async def _auth_headers(self) -> dict[str, str]:
        token = await self.authenticate()
        headers = {"Authorization": f"Bearer {token}"}
        if self._settings.conta_corrente:
            headers[CONTA_CORRENTE_HEADER] = self._settings.conta_corrente
        return headers

    # ──────────────────────────────────────────────────────────────────────
    # Execução
    # ──────────────────────────────────────────────────────────────────────

    async def _request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Executa uma requisição autenticada.

        Raises:
            AuthenticationError: Se não for possível obter token.
            RemoteApiError: Em falha de rede ou resposta não-2xx.
        """
        headers = await self._auth_headers()
        query = {k: v for k, v in (params or {}).items() if v is not None}
        started_at = time.perf_counter()
        try:
            response = await self._http.request(
                method,
                path,
                params=query or None,
                json=json_body,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            logger.warning(
                "inter_request_failed",
                extra={
                    "component": _COMPONENT,
                    "operation": operation,
                    "error_type": type(exc).__name__,
                },
            )
            raise RemoteApiError(
                f"{operation} falhou: {type(exc).__name__}: {exc}"
            ) from exc

        latency_ms = round((time.perf_counter() - started_at) * 1000, 2)
        if not response.is_success:
            body = response_body(response)
            logger.warning(
                "inter_http_error",
                extra={
                    "component": _COMPONENT,
                    "operation": operation,
                    "status_code": response.status_code,
                    "latency_ms": latency_ms,
                },
            )
            raise RemoteApiError(
                describe_http_error(operation, response.status_code, body),
                status_code=response.status_code,
                body=body,
            )

        logger.info(
            "inter_request_ok",
            extra={
                "component": _COMPONENT,
                "operation": operation,
                "status_code": response.status_code,
                "latency_ms": latency_ms,
            },
        )
        return response

    @staticmethod
    def _json(response: httpx.Response, operation: str) -> Any:
        """Decodifica JSON; corpo vazio retorna None."""
        if not response.content:
            return None
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise RemoteApiError(
                f"{operation}: resposta JSON inválida",
                status_code=response.status_code,
                body=response.text,
            ) from exc

    # ──────────────────────────────────────────────────────────────────────
    # Banking
    # ──────────────────────────────────────────────────────────────────────

    async def get_saldo(self) -> dict[str, Any]:
        response = await self._request("GET", SALDO_PATH, operation="Consulta de saldo")
        return self._json(response, "Consulta de saldo")

    async def get_extrato(self, data_inicial: str, data_final: str) -> dict[str, Any]:
        """Extrato no intervalo [data_inicial, data_final] (YYYY-MM-DD).

        As datas são validadas pelo Inter, não localmente.
        """
        response = await self._request(
            "GET",
            EXTRATO_PATH,
            operation="Consulta de extrato",
            params={"dataInicio": data_inicial, "dataFim": data_final},
        )
        return self._json(response, "Consulta de extrato")

    async def get_extrato_pdf(self, data_inicial: str, data_final: str) -> bytes:
        response = await self._request(
            "GET",
            EXTRATO_PDF_PATH,
            operation="Exportação de extrato",
            params={"dataInicio": data_inicial, "dataFim": data_final},
        )
        return response.content

    # ──────────────────────────────────────────────────────────────────────
    # Cobrança (boletos)
    # ──────────────────────────────────────────────────────────────────────

    async def list_cobrancas(self, params: dict[str, Any]) -> dict[str, Any]:
        """Lista paginada de cobranças; params são repassados sem alteração."""
        response = await self._request(
            "GET",
            COBRANCAS_PATH,
            operation="Listagem de cobranças",
            params=params,
        )
        return self._json(response, "Listagem de cobranças")

    async def emitir_cobranca(self, payload: dict[str, Any]) -> dict[str, Any]:
        response = await self._request(
            "POST",
            COBRANCAS_PATH,
            operation="Emissão de cobrança",
            json_body=payload,
        )
        return self._json(response, "Emissão de cobrança")

    async def get_cobranca(self, codigo_solicitacao: str) -> dict[str, Any]:
        response = await self._request(
            "GET",
            cobranca_path(codigo_solicitacao),
            operation="Consulta de cobrança",
        )
        return self._json(response, "Consulta de cobrança")

    async def get_cobranca_pdf(self, codigo_solicitacao: str) -> str:
        """Retorna o PDF do boleto em base64 (campo `pdf` da resposta)."""
        response = await self._request(
            "GET",
            cobranca_path(codigo_solicitacao, "pdf"),
            operation="PDF de cobrança",
        )
        data = self._json(response, "PDF de cobrança")
        pdf = data.get("pdf") if isinstance(data, dict) else None
        if not isinstance(pdf, str) or not pdf:
            raise RemoteApiError(
                "PDF de cobrança: resposta sem campo pdf",
                status_code=response.status_code,
                body=data,
            )
        return pdf

    async def cancelar_cobranca(self, codigo_solicitacao: str, motivo: str) -> None:
        await self._request(
            "POST",
            cobranca_path(codigo_solicitacao, "cancelar"),
            operation="Cancelamento de cobrança",
            json_body={"motivoCancelamento": motivo},
        )

    async def editar_cobranca(
        self,
        codigo_solicitacao: str,
        payload: dict[str, Any],
    ) -> Any:
        response = await self._request(
            "PATCH",
            cobranca_path(codigo_solicitacao),
            operation="Edição de cobrança",
            json_body=payload,
        )
        return self._json(response, "Edição de cobrança")

    async def get_sumario_cobrancas(self, params: dict[str, Any]) -> Any:
        response = await self._request(
            "GET",
            SUMARIO_PATH,
            operation="Sumário de cobranças",
            params=params,
        )
        return self._json(response, "Sumário de cobranças")
