"""Agregador de settings do mcp-banco-inter.

Re-exporta as settings de cada módulo. Organização por domínio para
isolamento de mudanças.
"""

from __future__ import annotations

# Banco Inter
from config.settings.inter import (
    INTER_DEFAULT_SCOPE,
    INTER_PRODUCTION_BASE_URL,
    INTER_SANDBOX_BASE_URL,
    InterSettings,
    get_inter_settings,
)

# Servidor MCP
from config.settings.server import (
    SERVER_NAME,
    SERVER_VERSION,
    VALID_TRANSPORTS,
    McpServerSettings,
    McpTransport,
    get_server_settings,
)

__all__ = [
    # Constants
    "INTER_DEFAULT_SCOPE",
    "INTER_PRODUCTION_BASE_URL",
    "INTER_SANDBOX_BASE_URL",
    "SERVER_NAME",
    "SERVER_VERSION",
    "VALID_TRANSPORTS",
    # Inter
    "InterSettings",
    # Server
    "McpServerSettings",
    "McpTransport",
    "get_inter_settings",
    "get_server_settings",
]
