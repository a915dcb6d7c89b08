"""MCP tool layer exposing ContentGateway operations."""

from .handlers import ConfluenceTools
from .registry import SERVER_NAME, TOOL_DEFINITIONS, create_server
from .response import format_tool_response

__all__ = [
    "ConfluenceTools",
    "SERVER_NAME",
    "TOOL_DEFINITIONS",
    "create_server",
    "format_tool_response",
]
