"""Data models for Confluence content payloads."""

from src.models.confluence_content import (
    ConfluenceContent,
    ContentRef,
    ContentVersion,
    StorageBody,
    build_comment,
)

__all__ = ['ConfluenceContent', 'ContentRef', 'ContentVersion', 'StorageBody', 'build_comment']
