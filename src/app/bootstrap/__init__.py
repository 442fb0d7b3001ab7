"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta as implementações concretas (InterClient, PdfStorage) ao
dispatcher de tools.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()  # ConfigError se faltar credencial
    client = create_inter_client()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from api.connectors.inter import InterClient
from app.infra.storage import PdfStorage
from app.observability import get_correlation_id, get_session_id
from app.tools import InterToolDispatcher
from config.logging import configure_logging
from config.settings import get_inter_settings, get_server_settings
from utils.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols import InterClientProtocol
    from config.settings import InterSettings, McpServerSettings

# Nome do serviço para logs
SERVICE_NAME = "mcp_banco_inter"

logger = logging.getLogger(__name__)


def load_environment() -> None:
    """Carrega .env (se existir) antes da primeira leitura de settings."""
    load_dotenv(override=False)
    get_inter_settings.cache_clear()
    get_server_settings.cache_clear()


def initialize_app(level: str | None = None) -> None:
    """Configura logging JSON estruturado (stderr) com correlation/session id."""
    configure_logging(
        level=level or get_server_settings().log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
        session_id_getter=get_session_id,
    )


def initialize_test_app() -> None:
    """Inicializa logging para testes (DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
        session_id_getter=get_session_id,
    )


def collect_settings_errors(
    inter: InterSettings | None = None,
    server: McpServerSettings | None = None,
) -> list[str]:
    """Lista problemas de configuração (vazia = OK)."""
    errors: list[str] = []
    errors.extend(f"inter: {error}" for error in (inter or get_inter_settings()).validate())
    errors.extend(f"server: {error}" for error in (server or get_server_settings()).validate())
    return errors


def validate_runtime_settings(
    inter: InterSettings | None = None,
    server: McpServerSettings | None = None,
) -> None:
    """Falha rápido se faltar configuração obrigatória.

    Raises:
        ConfigError: Com a lista completa de problemas em `errors`.
    """
    errors = collect_settings_errors(inter, server)
    if not errors:
        logger.info("settings_validated", extra={"component": "bootstrap", "result": "ok"})
        return

    logger.error(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "error_count": len(errors),
            "errors": errors,
        },
    )
    details = "\n".join(f"- {error}" for error in errors)
    raise ConfigError(f"Configuração inválida:\n{details}", errors=errors)


def create_inter_client(settings: InterSettings | None = None) -> InterClient:
    """Cria o InterClient somente a partir de settings válidas.

    Raises:
        ConfigError: Se faltar variável obrigatória ou o certificado for inválido.
    """
    inter = settings or get_inter_settings()
    errors = inter.validate()
    if errors:
        raise ConfigError("Configuração do Inter inválida: " + "; ".join(errors), errors=errors)
    return InterClient(inter)


def create_pdf_storage(settings: McpServerSettings | None = None) -> PdfStorage:
    """Cria o storage de PDFs (diretório criado aqui, uma única vez)."""
    return PdfStorage((settings or get_server_settings()).storage_path)


def create_dispatcher_factory(
    client: InterClientProtocol,
    storage: PdfStorage,
) -> Callable[[], InterToolDispatcher]:
    """Factory de dispatchers que compartilham cliente e storage."""

    def _factory() -> InterToolDispatcher:
        return InterToolDispatcher(client, storage)

    return _factory
