"""Facet extraction: the filter options available for an item list.

Facets are always derived from the complete visible list. Each facet list
is deduplicated by id and keeps the order in which ids were first seen.
"""

from collections.abc import Iterable
from datetime import datetime

from portal.components.filtering.dates import buckets_for, local_date, reference_date
from portal.components.filtering.models import (
    AssetFacets,
    AssetItemView,
    ContentFacets,
    ContentItemView,
    DateBucket,
    FacetOption,
)
from portal.utils.phrases import t


class _FacetCollector:
    """Ordered, id-deduplicated option list."""

    def __init__(self):
        self._options: dict[str, FacetOption] = {}

    def add(self, option_id: str, name: str) -> None:
        if option_id not in self._options:
            self._options[option_id] = FacetOption(id=option_id, name=name)

    def options(self) -> list[FacetOption]:
        return list(self._options.values())


def extract_content_facets(
    items: Iterable[ContentItemView],
    now: datetime,
    tz,
    language: str = "en",
) -> ContentFacets:
    """Folder, content type, author and date facets for content.

    ``items`` must already be restricted to the listable items (see
    ``predicates.is_listable``). Date buckets are present-only.
    """
    folders = _FacetCollector()
    content_types = _FacetCollector()
    authors = _FacetCollector()
    found_dates: set[DateBucket] = set()
    today = reference_date(now, tz)

    for item in items:
        if item.folder_id:
            folders.add(item.folder_id, item.folder_name or t("content_page_unknown_folder", language))
        content_types.add(item.content_type_id, item.content_type_name)
        authors.add(item.modified_user_id, item.modified_user_name)
        found_dates.update(buckets_for(local_date(item.modified_date, tz), today))

    dates = [
        FacetOption(id=bucket.value, name=t(bucket.value, language)) for bucket in DateBucket if bucket in found_dates
    ]

    return ContentFacets(
        folders=folders.options(),
        content_types=content_types.options(),
        authors=authors.options(),
        dates=dates,
    )


def extract_asset_facets(items: Iterable[AssetItemView], language: str = "en") -> AssetFacets:
    """Folder and type facets for assets. Type names are shown upper-cased."""
    folders = _FacetCollector()
    types = _FacetCollector()

    for item in items:
        if item.folder_id:
            folders.add(item.folder_id, item.folder_name or t("asset_home_unknown_folder", language))
        types.add(item.type, item.type.upper())

    return AssetFacets(folders=folders.options(), types=types.options())
