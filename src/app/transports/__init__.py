"""Transportes MCP: stdio (processo único) e streamable HTTP (multi-sessão)."""

from app.transports.mcp_server import ToolCallFailed, build_mcp_server
from app.transports.sessions import McpSession, McpSessionRegistry
from app.transports.stdio import run_stdio

__all__ = [
    "McpSession",
    "McpSessionRegistry",
    "ToolCallFailed",
    "build_mcp_server",
    "run_stdio",
]
