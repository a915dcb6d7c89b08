"""Data models for CLI operations."""

from enum import Enum, IntEnum


class ExitCode(IntEnum):
    """Exit codes for the confluence-mcp command.

    - SUCCESS (0): Server ran and shut down cleanly
    - GENERAL_ERROR (1): Unexpected failure while starting or serving
    - CONFIG_ERROR (2): Required configuration is missing

    Example:
        >>> exit_code = ExitCode.CONFIG_ERROR
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    CONFIG_ERROR = 2


class Transport(str, Enum):
    """MCP transports the server can run on."""
    STDIO = "stdio"
    HTTP = "http"
    SSE = "sse"
