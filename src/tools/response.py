"""Conversion of ApiResult envelopes into MCP tool responses."""

import json

from fastmcp.exceptions import ToolError

from src.confluence_client.result import ApiResult


def format_tool_response(result: ApiResult) -> str:
    """Render a gateway result for the MCP caller.

    Successful results become the remote payload as indented JSON text.
    Failed results raise ToolError, which FastMCP returns to the caller as
    an error response carrying the envelope's message.

    Raises:
        ToolError: If the result is a failure
    """
    if not result.success:
        raise ToolError(result.error or "Unknown error")

    data = result.data if result.data is not None else {"success": True}
    return json.dumps(data, indent=2, ensure_ascii=False)
