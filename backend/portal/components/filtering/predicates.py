"""Filter predicate evaluation for content and asset listings.

Every predicate is pure: the same item, criteria and instant always give
the same answer. Criteria combine with logical AND and evaluation stops
at the first failing constraint.
"""

from collections.abc import Iterable
from datetime import datetime

from portal.components.filtering.dates import in_bucket, local_date, reference_date
from portal.components.filtering.models import (
    AssetFilterCriteria,
    AssetItemView,
    ContentFilterCriteria,
    ContentItemView,
    ContentStatusFilter,
)


def matches_search(term: str, *fields: str | None) -> bool:
    """Case-insensitive substring match against any of ``fields``."""
    needle = term.casefold()
    return any(value and needle in value.casefold() for value in fields)


def matches_content_status(item: ContentItemView, status: ContentStatusFilter) -> bool:
    if status is ContentStatusFilter.scheduled:
        return item.is_scheduled
    if status is ContentStatusFilter.draft:
        return item.status == "draft" and not item.is_scheduled
    return item.status == "published"


def is_listable(
    item: ContentItemView,
    hidden_type_ids: set[str],
    show_hidden: bool = False,
) -> bool:
    """Visibility before any filter: module-managed items never list, hidden types only on request."""
    if item.managed_by_module:
        return False
    if not show_hidden and item.content_type_id in hidden_type_ids:
        return False
    return True


def matches_content(
    item: ContentItemView,
    criteria: ContentFilterCriteria,
    now: datetime,
    tz,
) -> bool:
    """Whether a content item passes every active constraint in ``criteria``."""
    if criteria.folder and item.folder_id != criteria.folder:
        return False
    if criteria.content_type and item.content_type_id != criteria.content_type:
        return False
    if criteria.user and item.modified_user_id != criteria.user:
        return False
    if criteria.status is not None and not matches_content_status(item, criteria.status):
        return False
    if criteria.date is not None:
        if not in_bucket(local_date(item.modified_date, tz), criteria.date, reference_date(now, tz)):
            return False
    if criteria.search and not matches_search(
        criteria.search, item.title, item.modified_user_name, item.folder_name
    ):
        return False
    return True


def matches_asset(item: AssetItemView, criteria: AssetFilterCriteria) -> bool:
    """Whether an asset passes every active constraint in ``criteria``."""
    if criteria.folder and item.folder_id != criteria.folder:
        return False
    if criteria.type and item.type != criteria.type:
        return False
    if criteria.status is not None and item.status != criteria.status.value:
        return False
    if criteria.search and not matches_search(
        criteria.search, item.name, item.modified_user_name, item.folder_name
    ):
        return False
    return True


def visible_content(
    items: Iterable[ContentItemView],
    hidden_type_ids: set[str],
    show_hidden: bool = False,
) -> list[ContentItemView]:
    return [item for item in items if is_listable(item, hidden_type_ids, show_hidden)]


def filter_content(
    items: Iterable[ContentItemView],
    criteria: ContentFilterCriteria,
    now: datetime,
    tz,
) -> list[ContentItemView]:
    return [item for item in items if matches_content(item, criteria, now, tz)]


def filter_assets(items: Iterable[AssetItemView], criteria: AssetFilterCriteria) -> list[AssetItemView]:
    return [item for item in items if matches_asset(item, criteria)]
