"""Command-line interface for the Confluence MCP server.

This package provides the `confluence-mcp` CLI tool that loads connection
settings and serves the Confluence tools over an MCP transport.
"""

from .models import ExitCode, Transport

__all__ = [
    'ExitCode',
    'Transport',
]
