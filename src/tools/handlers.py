"""MCP tool handlers for Confluence operations.

Each handler forwards its parameters to the ContentGateway (or to the
create/update bindings), then formats the resulting envelope for the MCP
caller. Handlers are bound methods so one server instance shares a single
gateway.
"""

import logging

from src.confluence_client.gateway import ContentGateway
from src.confluence_client.result import ApiResult

from . import bindings
from .response import format_tool_response
from .schemas import (
    AttachmentId,
    CommentBody,
    CommentDepth,
    CommentExpand,
    ContentId,
    ContentType,
    Cql,
    DeleteStatus,
    Expand,
    Filename,
    LabelName,
    LabelPrefix,
    LabelPrefixFilter,
    Limit,
    MediaType,
    NewContent,
    NewTitle,
    ParentCommentId,
    ParentId,
    SearchText,
    SpaceKey,
    Start,
    StorageContent,
    Title,
    Version,
    VersionComment,
)

logger = logging.getLogger(__name__)


def _respond(tool_name: str, result: ApiResult) -> str:
    if result.success:
        logger.info(f"{tool_name} succeeded")
    else:
        logger.info(f"{tool_name} failed: {result.error}")
    return format_tool_response(result)


class ConfluenceTools:
    """Tool handlers bound to one ContentGateway.

    Example:
        >>> tools = ConfluenceTools(ContentGateway(token="t", host="wiki.example.com"))
        >>> text = tools.get_content("123456")
    """

    def __init__(self, gateway: ContentGateway):
        self.gateway = gateway

    def get_content(self, content_id: ContentId, expand: Expand = None) -> str:
        """Get Confluence content by ID."""
        logger.info(f"confluence_getContent called with: content_id={content_id!r}, expand={expand!r}")
        return _respond("confluence_getContent", self.gateway.get_content(content_id, expand))

    def search_content(
        self,
        cql: Cql,
        limit: Limit = None,
        start: Start = None,
        expand: Expand = None,
    ) -> str:
        """Search for content using CQL."""
        logger.info(f"confluence_searchContent called with: cql={cql!r}")
        return _respond(
            "confluence_searchContent",
            self.gateway.search_content(cql, limit, start, expand),
        )

    def create_content(
        self,
        title: Title,
        space_key: SpaceKey,
        content: StorageContent,
        type: ContentType = "page",
        parent_id: ParentId = None,
    ) -> str:
        """Create new content."""
        logger.info(
            f"confluence_createContent called with: title={title!r}, "
            f"space_key={space_key!r}, type={type!r}, parent_id={parent_id!r}"
        )
        result = bindings.create_content(
            self.gateway,
            title=title,
            space_key=space_key,
            content=content,
            type=type,
            parent_id=parent_id,
        )
        return _respond("confluence_createContent", result)

    def update_content(
        self,
        content_id: ContentId,
        version: Version,
        title: NewTitle = None,
        content: NewContent = None,
        version_comment: VersionComment = None,
    ) -> str:
        """Update existing content, keeping fields that are not supplied."""
        logger.info(f"confluence_updateContent called with: content_id={content_id!r}, version={version}")
        result = bindings.update_content(
            self.gateway,
            content_id=content_id,
            version=version,
            title=title,
            content=content,
            version_comment=version_comment,
        )
        return _respond("confluence_updateContent", result)

    def search_spaces(
        self,
        search_text: SearchText,
        limit: Limit = None,
        start: Start = None,
        expand: Expand = None,
    ) -> str:
        """Search for spaces by title."""
        logger.info(f"confluence_searchSpace called with: search_text={search_text!r}")
        return _respond(
            "confluence_searchSpace",
            self.gateway.search_spaces(search_text, limit, start, expand),
        )

    def delete_content(self, content_id: ContentId, status: DeleteStatus = None) -> str:
        """Delete a page."""
        logger.info(f"confluence_deletePage called with: content_id={content_id!r}, status={status!r}")
        return _respond("confluence_deletePage", self.gateway.delete_content(content_id, status))

    def get_page_children(
        self,
        content_id: ContentId,
        limit: Limit = None,
        start: Start = None,
        expand: Expand = None,
    ) -> str:
        """Get child pages of a page."""
        logger.info(f"confluence_getPageChildren called with: content_id={content_id!r}")
        return _respond(
            "confluence_getPageChildren",
            self.gateway.get_page_children(content_id, limit, start, expand),
        )

    def get_labels(
        self,
        content_id: ContentId,
        prefix: LabelPrefixFilter = None,
        limit: Limit = None,
        start: Start = None,
    ) -> str:
        """Get labels of a page."""
        logger.info(f"confluence_getLabels called with: content_id={content_id!r}, prefix={prefix!r}")
        return _respond(
            "confluence_getLabels",
            self.gateway.get_labels(content_id, prefix, limit, start),
        )

    def add_label(
        self,
        content_id: ContentId,
        label_name: LabelName,
        prefix: LabelPrefix = "global",
    ) -> str:
        """Add a label to a page."""
        logger.info(f"confluence_addLabel called with: content_id={content_id!r}, label_name={label_name!r}")
        return _respond(
            "confluence_addLabel",
            self.gateway.add_label(content_id, label_name, prefix),
        )

    def get_comments(
        self,
        content_id: ContentId,
        limit: Limit = None,
        start: Start = None,
        expand: CommentExpand = None,
        depth: CommentDepth = None,
    ) -> str:
        """Get comments of a page."""
        logger.info(f"confluence_getComments called with: content_id={content_id!r}, depth={depth!r}")
        return _respond(
            "confluence_getComments",
            self.gateway.get_comments(content_id, limit, start, expand, depth),
        )

    def add_comment(
        self,
        content_id: ContentId,
        body: CommentBody,
        parent_comment_id: ParentCommentId = None,
    ) -> str:
        """Add a comment to a page."""
        logger.info(
            f"confluence_addComment called with: content_id={content_id!r}, "
            f"parent_comment_id={parent_comment_id!r}"
        )
        return _respond(
            "confluence_addComment",
            self.gateway.add_comment(content_id, body, parent_comment_id),
        )

    def get_attachments(
        self,
        content_id: ContentId,
        filename: Filename = None,
        media_type: MediaType = None,
        limit: Limit = None,
        start: Start = None,
        expand: Expand = None,
    ) -> str:
        """Get attachments of a page."""
        logger.info(f"confluence_getAttachments called with: content_id={content_id!r}")
        return _respond(
            "confluence_getAttachments",
            self.gateway.get_attachments(content_id, filename, media_type, limit, start, expand),
        )

    def delete_attachment(self, content_id: ContentId, attachment_id: AttachmentId) -> str:
        """Delete an attachment from a page."""
        logger.info(
            f"confluence_deleteAttachment called with: content_id={content_id!r}, "
            f"attachment_id={attachment_id!r}"
        )
        return _respond(
            "confluence_deleteAttachment",
            self.gateway.delete_attachment(content_id, attachment_id),
        )
