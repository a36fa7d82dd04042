"""Listing page state.

The content listing is always in exactly one of four states; the asset
listing only ever uses LOADING and LIST.
"""

from collections.abc import Sequence
from enum import Enum


class PageMode(str, Enum):
    """Rendering state of a listing page."""

    LOADING = "loading"
    NOT_READY = "notready"
    CREATE = "create"
    LIST = "list"


def resolve_content_page_mode(
    content_types: Sequence | None,
    items: Sequence | None,
    folders: Sequence | None,
) -> PageMode:
    """State of the content listing for the data loaded so far.

    ``None`` marks a collection that has not been loaded yet.
    """
    if content_types is None or items is None or folders is None:
        return PageMode.LOADING
    if not content_types:
        return PageMode.NOT_READY
    if not items:
        return PageMode.CREATE
    return PageMode.LIST


def resolve_asset_page_mode(items: Sequence | None, folders: Sequence | None) -> PageMode:
    if items is None or folders is None:
        return PageMode.LOADING
    return PageMode.LIST
