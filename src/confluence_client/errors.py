"""Typed exception hierarchy for the Confluence MCP server.

Only configuration problems are raised as exceptions. Failures of remote
calls are never raised past the gateway; they are returned as failed
ApiResult envelopes instead (see result.py).
"""

from typing import List, Optional


class ConfluenceMCPError(Exception):
    """Base exception for all confluence-mcp errors.

    Use this to catch any application-level error from the server.
    """
    pass


class ConfluenceError(ConfluenceMCPError):
    """Base exception for all Confluence-related errors."""
    pass


class ConfigurationError(ConfluenceError):
    """Raised when required connection settings are missing at startup."""

    def __init__(self, message: str, missing: Optional[List[str]] = None):
        super().__init__(message)
        self.missing = list(missing) if missing else []

    @classmethod
    def for_missing(cls, missing: List[str]) -> "ConfigurationError":
        """Build an error listing missing environment variables."""
        return cls(
            f"Missing required environment variables: {', '.join(missing)}",
            missing=missing,
        )
