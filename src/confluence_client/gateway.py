"""Gateway over the Confluence Data Center REST API.

This module wraps the atlassian-python-api Confluence client. Each public
method normalizes its inputs, issues exactly one REST request, and returns
an ApiResult envelope. No method raises once the gateway is constructed.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from atlassian import Confluence

from src.models.confluence_content import ConfluenceContent, build_comment

from .config import ConnectionSettings, validate_config
from .errors import ConfigurationError
from .result import ApiResult, handle_api_operation

logger = logging.getLogger(__name__)

API_VERSION = "1.0"
CONTENT_PATH = "rest/api/content"
SEARCH_PATH = "rest/api/search"

STORAGE_EXPAND = "body.storage"
COMMENT_EXPAND = "body.view"
DEFAULT_LABEL_PREFIX = "global"

ContentPayload = Union[ConfluenceContent, Dict[str, Any]]


def normalize_expand(expand: Optional[str]) -> str:
    """Ensure the storage body is always part of the expand list.

    Example:
        >>> normalize_expand(None)
        'body.storage'
        >>> normalize_expand("version")
        'version,body.storage'
        >>> normalize_expand("body.storage,version")
        'body.storage,version'
    """
    if not expand:
        return STORAGE_EXPAND
    if STORAGE_EXPAND in expand:
        return expand
    return f"{expand},{STORAGE_EXPAND}"


def escape_cql_string(text: str) -> str:
    """Escape backslashes and double quotes for a double-quoted CQL literal."""
    return text.replace('\\', '\\\\').replace('"', '\\"')


def build_space_search_cql(search_text: str) -> str:
    """Build the CQL used to find spaces whose title matches the text."""
    return f'type=space AND title ~ "{escape_cql_string(search_text)}"'


def _query_params(**params: Any) -> Dict[str, str]:
    """Drop absent parameters and convert the rest to their wire form."""
    return {key: str(value) for key, value in params.items() if value is not None}


def _payload(content: ContentPayload) -> Dict[str, Any]:
    if isinstance(content, ConfluenceContent):
        return content.to_dict()
    return content


class ContentGateway:
    """Stateless facade over a Confluence Data Center instance.

    The base URL and bearer token are fixed at construction time. The
    underlying client is created lazily on the first request.

    Example:
        >>> gateway = ContentGateway(token="secret", host="confluence.example.com")
        >>> result = gateway.get_content("123456")
        >>> result.success
        True
    """

    def __init__(
        self,
        token: str,
        host: Optional[str] = None,
        base_path: Optional[str] = None,
    ):
        """Initialize the gateway.

        Args:
            token: Personal access token sent as a bearer token
            host: Hostname of the instance (e.g., "confluence.example.com")
            base_path: Full base URL (e.g., "https://host.com/wiki/").
                       Takes precedence over host when given.

        Raises:
            ConfigurationError: If neither host nor base_path is given
        """
        if base_path:
            self.base_url = base_path
        elif host:
            self.base_url = f"https://{host}"
        else:
            raise ConfigurationError("Either host or base path must be provided")

        self._token = token
        self._client: Optional[Confluence] = None

    @classmethod
    def from_settings(cls, settings: ConnectionSettings) -> "ContentGateway":
        return cls(token=settings.token, host=settings.host, base_path=settings.base_path)

    @staticmethod
    def validate_config(environ: Optional[Mapping[str, str]] = None) -> List[str]:
        """Return the names of missing required settings (see config.validate_config)."""
        return validate_config(environ)

    def _get_client(self) -> Confluence:
        if self._client is None:
            logger.debug(f"Creating Confluence client for {self.base_url}")
            self._client = Confluence(
                url=self.base_url,
                token=self._token,
                api_version=API_VERSION,
            )
        return self._client

    def get_content(self, content_id: str, expand: Optional[str] = None) -> ApiResult:
        """Fetch a content item by ID.

        The storage body is always expanded, whatever the caller asked for.

        Args:
            content_id: The Confluence content ID
            expand: Optional comma-separated list of properties to expand

        Returns:
            ApiResult with the content item on success
        """
        params = _query_params(expand=normalize_expand(expand))
        logger.debug(f"get_content({content_id}) expand={params['expand']}")
        return handle_api_operation(
            lambda: self._get_client().get(f"{CONTENT_PATH}/{content_id}", params=params),
            "Error getting content",
        )

    def search_content(
        self,
        cql: str,
        limit: Optional[int] = None,
        start: Optional[int] = None,
        expand: Optional[str] = None,
    ) -> ApiResult:
        """Search content with a raw CQL query.

        The CQL is passed through as given; it is not validated or escaped.

        Args:
            cql: Confluence Query Language string (e.g., "type=page AND space=DEV")
            limit: Maximum number of results to return
            start: Start index for pagination
            expand: Optional comma-separated list of properties to expand

        Returns:
            ApiResult with the search response (results plus pagination metadata)
        """
        return self._search(cql, limit, start, expand, "Error searching for content")

    def create_content(self, content: ContentPayload) -> ApiResult:
        """Create a content item from the given payload, unchanged."""
        payload = _payload(content)
        logger.debug(f"create_content(type={payload.get('type')}, title={payload.get('title')})")
        return handle_api_operation(
            lambda: self._get_client().post(CONTENT_PATH, data=payload),
            "Error creating content",
        )

    def update_content(self, content_id: str, content: ContentPayload) -> ApiResult:
        """Replace a content item with the given payload.

        No merge with the stored item happens here; callers send the full
        payload including the next version number.
        """
        payload = _payload(content)
        logger.debug(f"update_content({content_id})")
        return handle_api_operation(
            lambda: self._get_client().put(f"{CONTENT_PATH}/{content_id}", data=payload),
            "Error updating content",
        )

    def delete_content(self, content_id: str, status: Optional[str] = None) -> ApiResult:
        """Delete a content item.

        Args:
            content_id: The Confluence content ID
            status: Pass "trashed" to purge content that is already in the trash

        Returns:
            ApiResult (data is usually absent on success)
        """
        params = _query_params(status=status)
        logger.debug(f"delete_content({content_id}) status={status}")
        return handle_api_operation(
            lambda: self._get_client().delete(f"{CONTENT_PATH}/{content_id}", params=params),
            "Error deleting content",
        )

    def get_page_children(
        self,
        content_id: str,
        limit: Optional[int] = None,
        start: Optional[int] = None,
        expand: Optional[str] = None,
    ) -> ApiResult:
        """List the child pages of a page."""
        params = _query_params(expand=expand, limit=limit, start=start)
        return handle_api_operation(
            lambda: self._get_client().get(f"{CONTENT_PATH}/{content_id}/child/page", params=params),
            "Error getting page children",
        )

    def get_labels(
        self,
        content_id: str,
        prefix: Optional[str] = None,
        limit: Optional[int] = None,
        start: Optional[int] = None,
    ) -> ApiResult:
        """List labels of a content item, optionally filtered by prefix."""
        params = _query_params(prefix=prefix, limit=limit, start=start)
        return handle_api_operation(
            lambda: self._get_client().get(f"{CONTENT_PATH}/{content_id}/label", params=params),
            "Error getting labels",
        )

    def add_label(
        self,
        content_id: str,
        label_name: str,
        prefix: Optional[str] = None,
    ) -> ApiResult:
        """Add a label to a content item.

        Args:
            content_id: The Confluence content ID
            label_name: Name of the label
            prefix: Label prefix ("global", "my", "team"); defaults to "global"

        Returns:
            ApiResult with the updated label list
        """
        label = {
            "name": label_name,
            "prefix": DEFAULT_LABEL_PREFIX if prefix is None else prefix,
        }
        logger.debug(f"add_label({content_id}) {label['prefix']}:{label_name}")
        return handle_api_operation(
            lambda: self._get_client().post(f"{CONTENT_PATH}/{content_id}/label", data=label),
            "Error adding label",
        )

    def get_comments(
        self,
        content_id: str,
        limit: Optional[int] = None,
        start: Optional[int] = None,
        expand: Optional[str] = None,
        depth: Optional[str] = None,
    ) -> ApiResult:
        """List comments of a content item.

        Args:
            content_id: The Confluence content ID
            limit: Maximum number of results to return
            start: Start index for pagination
            expand: Properties to expand (defaults to the rendered "body.view")
            depth: "" or None for root comments only, "all" for every level

        Returns:
            ApiResult with the comment list
        """
        params = _query_params(
            expand=expand or COMMENT_EXPAND,
            depth=depth,
            limit=limit,
            start=start,
        )
        return handle_api_operation(
            lambda: self._get_client().get(f"{CONTENT_PATH}/{content_id}/child/comment", params=params),
            "Error getting comments",
        )

    def add_comment(
        self,
        content_id: str,
        body: str,
        parent_comment_id: Optional[str] = None,
    ) -> ApiResult:
        """Add a comment to a page, or a threaded reply to another comment.

        Comments are created through the generic content endpoint.

        Args:
            content_id: ID of the page to comment on
            body: Comment body in storage format (e.g., "<p>Looks good</p>")
            parent_comment_id: Optional ID of the comment being replied to

        Returns:
            ApiResult with the created comment
        """
        payload = build_comment(content_id, body, parent_comment_id).to_dict()
        logger.debug(f"add_comment({content_id}) parent={parent_comment_id}")
        return handle_api_operation(
            lambda: self._get_client().post(CONTENT_PATH, data=payload),
            "Error adding comment",
        )

    def get_attachments(
        self,
        content_id: str,
        filename: Optional[str] = None,
        media_type: Optional[str] = None,
        limit: Optional[int] = None,
        start: Optional[int] = None,
        expand: Optional[str] = None,
    ) -> ApiResult:
        """List attachments of a page, optionally filtered by filename or media type."""
        params = _query_params(
            expand=expand,
            filename=filename,
            mediaType=media_type,
            limit=limit,
            start=start,
        )
        return handle_api_operation(
            lambda: self._get_client().get(f"{CONTENT_PATH}/{content_id}/child/attachment", params=params),
            "Error getting attachments",
        )

    def delete_attachment(self, content_id: str, attachment_id: str) -> ApiResult:
        logger.debug(f"delete_attachment({content_id}, {attachment_id})")
        return handle_api_operation(
            lambda: self._get_client().delete(
                f"{CONTENT_PATH}/{content_id}/child/attachment/{attachment_id}"
            ),
            "Error deleting attachment",
        )

    def search_spaces(
        self,
        search_text: str,
        limit: Optional[int] = None,
        start: Optional[int] = None,
        expand: Optional[str] = None,
    ) -> ApiResult:
        """Search spaces whose title matches the given text.

        There is no dedicated space search endpoint in use; a CQL query of
        the form ``type=space AND title ~ "<text>"`` goes through the
        regular search endpoint. Quotes in the text are escaped.

        Args:
            search_text: Text to match against space titles
            limit: Maximum number of results to return
            start: Start index for pagination
            expand: Optional comma-separated list of properties to expand

        Returns:
            ApiResult with the search response
        """
        cql = build_space_search_cql(search_text)
        return self._search(cql, limit, start, expand, "Error searching for spaces")

    def _search(
        self,
        cql: str,
        limit: Optional[int],
        start: Optional[int],
        expand: Optional[str],
        error_message: str,
    ) -> ApiResult:
        params = _query_params(cql=cql, expand=expand, limit=limit, start=start)
        logger.debug(f"search: {cql[:80]}")
        return handle_api_operation(
            lambda: self._get_client().get(SEARCH_PATH, params=params),
            error_message,
        )
