"""Confluence client library for the MCP server.

This package provides a stateless gateway over the Confluence Data Center
REST API that returns uniform result envelopes instead of raising.
"""

from .config import ConnectionSettings, load_settings, validate_config
from .errors import (
    ConfluenceMCPError,
    ConfluenceError,
    ConfigurationError,
)
from .gateway import ContentGateway
from .result import ApiResult, handle_api_operation

__all__ = [
    "ApiResult",
    "ConfigurationError",
    "ConfluenceError",
    "ConfluenceMCPError",
    "ConnectionSettings",
    "ContentGateway",
    "handle_api_operation",
    "load_settings",
    "validate_config",
]
