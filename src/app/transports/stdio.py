"""Transporte stdio: um dispatcher para toda a vida do processo."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mcp.server.stdio import stdio_server

from app.transports.mcp_server import build_mcp_server

if TYPE_CHECKING:
    from app.tools import InterToolDispatcher

logger = logging.getLogger(__name__)


async def run_stdio(dispatcher: InterToolDispatcher) -> None:
    """Serve o protocolo MCP em stdin/stdout até o cliente encerrar."""
    server = build_mcp_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("mcp_stdio_started", extra={"transport": "stdio"})
        await server.run(read_stream, write_stream, server.create_initialization_options())
    logger.info("mcp_stdio_stopped", extra={"transport": "stdio"})
