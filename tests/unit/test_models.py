"""Unit tests for models module."""

from src.models.confluence_content import (
    ConfluenceContent,
    ContentRef,
    ContentVersion,
    StorageBody,
    build_comment,
)


class TestStorageBody:
    """Test cases for StorageBody."""

    def test_representation_is_always_storage(self):
        assert StorageBody("<p>x</p>").to_dict() == {
            "storage": {"value": "<p>x</p>", "representation": "storage"}
        }


class TestContentVersion:
    """Test cases for ContentVersion."""

    def test_message_omitted_when_absent(self):
        assert ContentVersion(number=3).to_dict() == {"number": 3}

    def test_message_included(self):
        assert ContentVersion(number=3, message="fix typo").to_dict() == {
            "number": 3,
            "message": "fix typo",
        }


class TestConfluenceContent:
    """Test cases for ConfluenceContent dataclass."""

    def test_minimal_page(self):
        """Absent optional fields are left out of the payload."""
        page = ConfluenceContent(type="page", title="Notes", space_key="TEAM")

        assert page.to_dict() == {"type": "page", "title": "Notes", "space": {"key": "TEAM"}}

    def test_full_page(self):
        page = ConfluenceContent(
            id="123",
            type="page",
            title="Notes",
            space_key="TEAM",
            body=StorageBody("<p>Hello</p>"),
            version=ContentVersion(number=2, message="update"),
            ancestors=[ContentRef(id="100")],
        )

        assert page.to_dict() == {
            "id": "123",
            "type": "page",
            "title": "Notes",
            "space": {"key": "TEAM"},
            "body": {"storage": {"value": "<p>Hello</p>", "representation": "storage"}},
            "version": {"number": 2, "message": "update"},
            "ancestors": [{"id": "100"}],
        }

    def test_empty_ancestors_omitted(self):
        page = ConfluenceContent(type="page", title="T", space_key="X", ancestors=[])

        assert "ancestors" not in page.to_dict()


class TestBuildComment:
    """Test cases for build_comment."""

    def test_top_level_comment(self):
        comment = build_comment("555", "<p>Nice</p>")

        assert comment.to_dict() == {
            "type": "comment",
            "container": {"id": "555", "type": "page"},
            "body": {"storage": {"value": "<p>Nice</p>", "representation": "storage"}},
        }

    def test_reply_threads_under_parent(self):
        comment = build_comment("555", "<p>Agreed</p>", parent_comment_id="777")

        assert comment.to_dict()["ancestors"] == [{"id": "777"}]
