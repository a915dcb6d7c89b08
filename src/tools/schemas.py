"""Parameter schemas for the Confluence MCP tools.

FastMCP builds each tool's input schema from the handler signature, so the
annotated types below carry the validation contract and the descriptions
shown to the calling agent.
"""

from typing import Annotated, Optional

from pydantic import Field

INSTANCE_TYPE = "Confluence Data Center edition instance"

ContentId = Annotated[str, Field(description="Confluence Data Center content ID")]
Expand = Annotated[
    Optional[str],
    Field(description="Comma-separated list of properties to expand"),
]
Limit = Annotated[
    Optional[int],
    Field(description="Maximum number of results to return"),
]
Start = Annotated[Optional[int], Field(description="Start index for pagination")]

Cql = Annotated[
    str,
    Field(description="Confluence Query Language (CQL) search string for Confluence Data Center"),
]
Title = Annotated[str, Field(description="Title of the content")]
SpaceKey = Annotated[str, Field(description="Space key where content will be created")]
ContentType = Annotated[str, Field(description="Content type (page, blogpost, etc)")]
StorageContent = Annotated[
    str,
    Field(description='Content body in Confluence Data Center "storage" format (confluence XML)'),
]
ParentId = Annotated[
    Optional[str],
    Field(description="ID of the parent page (if creating a child page)"),
]

NewTitle = Annotated[Optional[str], Field(description="New title of the content")]
NewContent = Annotated[
    Optional[str],
    Field(description="New content body in Confluence Data Center storage format (XML-based)"),
]
Version = Annotated[int, Field(description="New version number (must be incremented)")]
VersionComment = Annotated[Optional[str], Field(description="Comment for this version")]

SearchText = Annotated[
    str,
    Field(description="Text to search for in Confluence Data Center space names or descriptions"),
]
DeleteStatus = Annotated[
    Optional[str],
    Field(description="Set to 'trashed' to permanently delete already-trashed content"),
]

LabelPrefixFilter = Annotated[
    Optional[str],
    Field(description="Filter labels by prefix: 'global', 'my', or 'team'"),
]
LabelName = Annotated[str, Field(description="Name of the label to add")]
LabelPrefix = Annotated[
    str,
    Field(description="Label prefix: 'global' (default), 'my', or 'team'"),
]

CommentExpand = Annotated[
    Optional[str],
    Field(description="Comma-separated list of properties to expand (default: body.view)"),
]
CommentDepth = Annotated[
    Optional[str],
    Field(description="Comment depth: leave empty for root only, or 'all' for all levels"),
]
CommentBody = Annotated[
    str,
    Field(description="Comment body in Confluence storage format (XML). Example: '<p>This is a comment</p>'"),
]
ParentCommentId = Annotated[
    Optional[str],
    Field(description="ID of a parent comment to reply to (for threaded comments)"),
]

Filename = Annotated[Optional[str], Field(description="Filter by exact filename")]
MediaType = Annotated[
    Optional[str],
    Field(description="Filter by media type (e.g., 'image/png')"),
]
AttachmentId = Annotated[str, Field(description="ID of the attachment to delete")]
