"""FastMCP server assembly for the Confluence tools.

Tool names are the externally visible contract and must stay stable.
"""

import logging
from typing import List, NamedTuple

from fastmcp import FastMCP

from src.confluence_client.gateway import ContentGateway

from .handlers import ConfluenceTools
from .schemas import INSTANCE_TYPE

logger = logging.getLogger(__name__)

SERVER_NAME = "atlassian-confluence-mcp"


class ToolDefinition(NamedTuple):
    """External tool name, handler method name and description."""
    name: str
    handler: str
    description: str


TOOL_DEFINITIONS: List[ToolDefinition] = [
    ToolDefinition("confluence_getContent", "get_content",
                   f"Get Confluence content by ID from the {INSTANCE_TYPE}"),
    ToolDefinition("confluence_searchContent", "search_content",
                   f"Search for content in {INSTANCE_TYPE} using CQL"),
    ToolDefinition("confluence_createContent", "create_content",
                   f"Create new content in {INSTANCE_TYPE}"),
    ToolDefinition("confluence_updateContent", "update_content",
                   f"Update existing content in {INSTANCE_TYPE}"),
    ToolDefinition("confluence_searchSpace", "search_spaces",
                   f"Search for spaces in {INSTANCE_TYPE}"),
    ToolDefinition("confluence_deletePage", "delete_content",
                   f"Delete a page in {INSTANCE_TYPE}"),
    ToolDefinition("confluence_getPageChildren", "get_page_children",
                   f"Get child pages of a page in {INSTANCE_TYPE}"),
    ToolDefinition("confluence_getLabels", "get_labels",
                   f"Get labels of a page in {INSTANCE_TYPE}"),
    ToolDefinition("confluence_addLabel", "add_label",
                   f"Add a label to a page in {INSTANCE_TYPE}"),
    ToolDefinition("confluence_getComments", "get_comments",
                   f"Get comments of a page in {INSTANCE_TYPE}"),
    ToolDefinition("confluence_addComment", "add_comment",
                   f"Add a comment to a page in {INSTANCE_TYPE}"),
    ToolDefinition("confluence_getAttachments", "get_attachments",
                   f"Get attachments of a page in {INSTANCE_TYPE}"),
    ToolDefinition("confluence_deleteAttachment", "delete_attachment",
                   f"Delete an attachment from a page in {INSTANCE_TYPE}"),
]


def create_server(gateway: ContentGateway, name: str = SERVER_NAME) -> FastMCP:
    """Create a FastMCP server exposing every Confluence tool.

    Args:
        gateway: Gateway shared by all tool handlers
        name: Server name announced to MCP clients

    Returns:
        FastMCP server ready to run
    """
    server = FastMCP(name)
    tools = ConfluenceTools(gateway)

    for definition in TOOL_DEFINITIONS:
        handler = getattr(tools, definition.handler)
        server.tool(handler, name=definition.name, description=definition.description)

    logger.debug(f"Registered {len(TOOL_DEFINITIONS)} tools on {name}")
    return server
