"""Item filter engine.

Components:
- models.py: item views, filter criteria, facet options
- dates.py: calendar-aligned date buckets
- predicates.py: filter predicate evaluation
- facets.py: facet extraction

Usage:
    from portal.components.filtering import (
        ContentFilterCriteria,
        extract_content_facets,
        filter_content,
        visible_content,
    )

    visible = visible_content(items, hidden_type_ids, show_hidden=False)
    facets = extract_content_facets(visible, now, tz)
    listed = filter_content(visible, ContentFilterCriteria(status="draft"), now, tz)
"""

from portal.components.filtering.dates import buckets_for, in_bucket, resolve_timezone
from portal.components.filtering.facets import extract_asset_facets, extract_content_facets
from portal.components.filtering.models import (
    AssetFacets,
    AssetFilterCriteria,
    AssetItemView,
    AssetStatusFilter,
    ContentFacets,
    ContentFilterCriteria,
    ContentItemView,
    ContentStatusFilter,
    DateBucket,
    FacetOption,
)
from portal.components.filtering.predicates import (
    filter_assets,
    filter_content,
    is_listable,
    matches_asset,
    matches_content,
    visible_content,
)

__all__ = [
    # Models
    "AssetFacets",
    "AssetFilterCriteria",
    "AssetItemView",
    "AssetStatusFilter",
    "ContentFacets",
    "ContentFilterCriteria",
    "ContentItemView",
    "ContentStatusFilter",
    "DateBucket",
    "FacetOption",
    # Dates
    "buckets_for",
    "in_bucket",
    "resolve_timezone",
    # Predicates
    "filter_assets",
    "filter_content",
    "is_listable",
    "matches_asset",
    "matches_content",
    "visible_content",
    # Facets
    "extract_asset_facets",
    "extract_content_facets",
]
