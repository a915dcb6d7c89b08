"""Payload building for the create and update tools.

These are the only tools that do more than forward parameters: create
applies the caller-facing defaults, and update merges caller-supplied
fields with the stored item before writing.
"""

import logging
from typing import Optional

from src.confluence_client.gateway import ContentGateway
from src.confluence_client.result import ApiResult
from src.models.confluence_content import (
    ConfluenceContent,
    ContentRef,
    ContentVersion,
    StorageBody,
)

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "page"


def create_content(
    gateway: ContentGateway,
    title: str,
    space_key: str,
    content: str,
    type: Optional[str] = None,
    parent_id: Optional[str] = None,
) -> ApiResult:
    """Create a page (or other content type) with a storage-format body.

    Args:
        gateway: Gateway to issue the request through
        title: Title of the new content
        space_key: Key of the space to create it in
        content: Body in storage format
        type: Content type, defaults to "page"
        parent_id: Optional parent page ID, set as the only ancestor

    Returns:
        ApiResult from the create call
    """
    item = ConfluenceContent(
        type=type or DEFAULT_CONTENT_TYPE,
        title=title,
        space_key=space_key,
        body=StorageBody(content),
        ancestors=[ContentRef(id=parent_id)] if parent_id else None,
    )
    return gateway.create_content(item)


def update_content(
    gateway: ContentGateway,
    content_id: str,
    version: int,
    title: Optional[str] = None,
    content: Optional[str] = None,
    version_comment: Optional[str] = None,
) -> ApiResult:
    """Update content, keeping stored fields the caller did not supply.

    The stored item is fetched first. Type and space always come from it,
    with the space object forwarded exactly as fetched. The title comes from
    it unless the caller supplies one. The body is only
    sent when new content is given, so omitting it leaves the body as is.
    The version number is never read from the stored item: the caller must
    pass the next one.

    Args:
        gateway: Gateway to issue the requests through
        content_id: ID of the content to update
        version: New version number
        title: Optional new title
        content: Optional new body in storage format
        version_comment: Optional version message

    Returns:
        ApiResult from the update call, or a failure naming content_id if the
        stored item could not be fetched (no write is attempted then)
    """
    current = gateway.get_content(content_id)

    if not current.success or not current.data:
        logger.warning(f"Cannot update {content_id}: fetch of current content failed")
        return ApiResult.fail(
            f"Failed to retrieve content with ID {content_id}: "
            f"{current.error or 'Unknown error'}"
        )

    # A 200 response that is not JSON (e.g. an SSO login page) comes back as text
    if not isinstance(current.data, dict):
        logger.warning(f"Cannot update {content_id}: current content is not a JSON object")
        return ApiResult.fail(
            f"Failed to retrieve content with ID {content_id}: "
            f"unexpected non-JSON response"
        )

    stored = current.data

    item = ConfluenceContent(
        id=content_id,
        type=stored.get("type"),
        title=title or stored.get("title"),
        space=stored.get("space"),
        version=ContentVersion(number=version, message=version_comment),
        body=StorageBody(content) if content else None,
    )
    return gateway.update_content(content_id, item)
