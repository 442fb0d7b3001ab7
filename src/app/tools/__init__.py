"""Tools bancárias: definições, requests tipados e dispatcher."""

from app.tools.definitions import TOOL_DEFINITIONS, TOOL_NAMES
from app.tools.dispatcher import InterToolDispatcher, ToolResult

__all__ = [
    "TOOL_DEFINITIONS",
    "TOOL_NAMES",
    "InterToolDispatcher",
    "ToolResult",
]
