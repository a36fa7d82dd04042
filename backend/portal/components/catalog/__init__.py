"""Listing page state and creatable content types."""

from portal.components.catalog.creatable import creatable_content_types, folder_allows
from portal.components.catalog.page_mode import (
    PageMode,
    resolve_asset_page_mode,
    resolve_content_page_mode,
)

__all__ = [
    "PageMode",
    "creatable_content_types",
    "folder_allows",
    "resolve_asset_page_mode",
    "resolve_content_page_mode",
]
