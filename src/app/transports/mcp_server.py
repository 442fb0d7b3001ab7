"""Binding do dispatcher ao servidor MCP (SDK `mcp`, API lowlevel)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from mcp import types
from mcp.server.lowlevel import Server

from config.settings import SERVER_NAME, SERVER_VERSION

if TYPE_CHECKING:
    from app.tools import InterToolDispatcher

logger = logging.getLogger(__name__)


class ToolCallFailed(Exception):
    """Envelope de erro do dispatcher.

    O SDK converte exceções do handler em CallToolResult(isError=True) com
    o texto da exceção, que aqui já é "Erro: <mensagem>".
    """


def build_mcp_server(dispatcher: InterToolDispatcher) -> Server:
    """Cria um Server MCP que delega list_tools/call_tool ao dispatcher."""
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return dispatcher.list_tools()

    # Validação de entrada fica nos requests tipados do dispatcher.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        result = await dispatcher.call_tool(name, arguments)
        if result.is_error:
            raise ToolCallFailed(result.text)
        return [types.TextContent(type="text", text=result.text)]

    return server
