"""Entrypoint do servidor MCP do Banco Inter.

Uso (stdio, padrão):
    mcp-banco-inter

Uso (HTTP multi-sessão):
    MCP_TRANSPORT=streamable-http MCP_PORT=3000 mcp-banco-inter

Configuração ausente (CLIENT_ID, CLIENT_SECRET, CERT_PATH, KEY_PATH) é
fatal: o processo registra o erro e sai com status 1 antes de criar o
cliente.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import (
    create_dispatcher_factory,
    create_inter_client,
    create_pdf_storage,
    initialize_app,
    load_environment,
    validate_runtime_settings,
)
from app.transports import McpSessionRegistry, run_stdio
from config.settings import SERVER_NAME, SERVER_VERSION, get_server_settings
from utils.errors import ConfigError, StorageError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable

    from api.connectors.inter import InterClient
    from app.tools import InterToolDispatcher

logger = logging.getLogger(__name__)

MCP_ENDPOINT = "/mcp"


def create_http_app(registry: McpSessionRegistry, client: InterClient | None = None) -> FastAPI:
    """Cria o app FastAPI com /health e o endpoint MCP (/mcp).

    Args:
        registry: Registro de sessões MCP (um dispatcher por sessão).
        client: InterClient compartilhado, fechado no shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("app_starting", extra={"transport": "streamable-http"})
        app.state.session_registry = registry
        async with registry.run():
            yield
        logger.info("app_shutting_down", extra={"transport": "streamable-http"})
        if client is not None:
            await client.aclose()

    fastapi_app = FastAPI(
        title=SERVER_NAME,
        description="Servidor MCP para a API PJ do Banco Inter",
        version=SERVER_VERSION,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    fastapi_app.include_router(create_api_router())
    fastapi_app.add_route(MCP_ENDPOINT, registry, methods=["GET", "POST", "DELETE"])

    logger.info("app_configured", extra={"endpoint": MCP_ENDPOINT})
    return fastapi_app


async def _serve_stdio(
    client: InterClient,
    dispatcher_factory: Callable[[], InterToolDispatcher],
) -> None:
    try:
        await run_stdio(dispatcher_factory())
    finally:
        await client.aclose()


def main() -> None:
    """Lê a configuração, monta o cliente e inicia o transporte escolhido."""
    load_environment()
    initialize_app()

    try:
        validate_runtime_settings()
        storage = create_pdf_storage()
        client = create_inter_client()
    except (ConfigError, StorageError) as exc:
        errors = exc.errors if isinstance(exc, ConfigError) and exc.errors else [str(exc)]
        logger.critical("startup_aborted", extra={"component": "bootstrap", "errors": errors})
        sys.exit(1)

    settings = get_server_settings()
    dispatcher_factory = create_dispatcher_factory(client, storage)

    if settings.is_http:
        import uvicorn

        registry = McpSessionRegistry(dispatcher_factory, json_response=settings.json_response)
        logger.info(
            "mcp_http_listening",
            extra={"host": settings.host, "port": settings.port, "endpoint": MCP_ENDPOINT},
        )
        # log_config=None mantém o handler JSON configurado em initialize_app.
        uvicorn.run(
            create_http_app(registry, client),
            host=settings.host,
            port=settings.port,
            log_config=None,
        )
        return

    asyncio.run(_serve_stdio(client, dispatcher_factory))


if __name__ == "__main__":
    main()
