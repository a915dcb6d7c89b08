"""Confluence content data model.

Content items (pages, blog posts, comments) as sent to the Confluence REST
API. Only the storage representation is ever constructed here; payloads
returned by the API are passed through as plain dicts.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

STORAGE_REPRESENTATION = "storage"


@dataclass
class StorageBody:
    """Content body in Confluence storage format (XHTML)."""
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "storage": {
                "value": self.value,
                "representation": STORAGE_REPRESENTATION,
            }
        }


@dataclass
class ContentVersion:
    """Version to write; the number is always supplied by the caller."""
    number: int
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        version: Dict[str, Any] = {"number": self.number}
        if self.message is not None:
            version["message"] = self.message
        return version


@dataclass
class ContentRef:
    """Reference to another content item (ancestor or comment container)."""
    id: str
    type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        ref: Dict[str, Any] = {"id": self.id}
        if self.type is not None:
            ref["type"] = self.type
        return ref


@dataclass
class ConfluenceContent:
    """Confluence content item payload for create and update operations.

    The first ancestor is treated as the direct parent. Comments carry a
    container (the page they belong to) instead of a space.

    Attributes:
        type: Content type discriminator ("page", "blogpost", "comment", ...)
        title: Content title (comments have none)
        space_key: Key of the owning space (e.g., "TEAM")
        space: Space object as returned by the API; sent verbatim and takes
               precedence over space_key
        body: Optional body in storage format
        version: Optional version to write (required by updates)
        ancestors: Optional parent references, direct parent first
        container: Optional container reference (comments only)
        id: Content ID (absent before creation)

    Example:
        >>> page = ConfluenceContent(type="page", title="Notes", space_key="TEAM",
        ...                          body=StorageBody("<p>Hi</p>"))
        >>> page.to_dict()["body"]["storage"]["representation"]
        'storage'
    """
    type: str
    title: Optional[str] = None
    space_key: Optional[str] = None
    body: Optional[StorageBody] = None
    version: Optional[ContentVersion] = None
    ancestors: Optional[List[ContentRef]] = None
    container: Optional[ContentRef] = None
    id: Optional[str] = None
    space: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the REST payload shape, omitting absent fields."""
        payload: Dict[str, Any] = {}
        if self.id is not None:
            payload["id"] = self.id
        payload["type"] = self.type
        if self.title is not None:
            payload["title"] = self.title
        if self.space is not None:
            payload["space"] = self.space
        elif self.space_key is not None:
            payload["space"] = {"key": self.space_key}
        if self.container is not None:
            payload["container"] = self.container.to_dict()
        if self.body is not None:
            payload["body"] = self.body.to_dict()
        if self.version is not None:
            payload["version"] = self.version.to_dict()
        if self.ancestors:
            payload["ancestors"] = [ancestor.to_dict() for ancestor in self.ancestors]
        return payload


def build_comment(
    content_id: str,
    body: str,
    parent_comment_id: Optional[str] = None,
) -> ConfluenceContent:
    """Build a comment on a page, optionally as a reply to another comment."""
    ancestors = [ContentRef(id=parent_comment_id)] if parent_comment_id else None
    return ConfluenceContent(
        type="comment",
        container=ContentRef(id=content_id, type="page"),
        body=StorageBody(body),
        ancestors=ancestors,
    )
