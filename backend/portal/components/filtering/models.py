"""Filtering data models.

Defines the item views the filter engine works on, the active filter
criteria, and the facet option lists it derives.
"""

from dataclasses import dataclass, field
from enum import Enum


class ContentStatusFilter(str, Enum):
    """Status filter values for content. ``scheduled`` refines ``draft``."""

    draft = "draft"
    scheduled = "scheduled"
    published = "published"


class AssetStatusFilter(str, Enum):
    """Status filter values for assets."""

    enabled = "enabled"
    disabled = "disabled"


class DateBucket(str, Enum):
    """Calendar-aligned modification date windows, in display order."""

    today = "today"
    yesterday = "yesterday"
    this_month = "this_month"
    last_month = "last_month"
    this_year = "this_year"
    last_year = "last_year"


@dataclass
class ContentItemView:
    """Content item as listed: the record joined with type and folder names."""

    content_id: str
    content_type_id: str
    content_type_name: str
    title: str
    status: str  # "draft" | "published"
    modified_date: int  # epoch ms
    modified_user_id: str
    modified_user_name: str
    folder_id: str | None = None
    folder_name: str | None = None
    scheduled_publish_date: int | None = None
    managed_by_module: bool = False

    @property
    def is_scheduled(self) -> bool:
        return self.status == "draft" and self.scheduled_publish_date is not None


@dataclass
class AssetItemView:
    """Asset as listed, with its folder name resolved."""

    asset_id: str
    name: str
    type: str
    status: str  # "enabled" | "disabled"
    modified_date: int  # epoch ms
    modified_user_name: str
    folder_id: str | None = None
    folder_name: str | None = None


@dataclass(frozen=True)
class ContentFilterCriteria:
    """Active content filters. Empty/None means no constraint."""

    folder: str = ""
    content_type: str = ""
    user: str = ""
    status: ContentStatusFilter | None = None
    date: DateBucket | None = None
    search: str = ""

    def __post_init__(self):
        # Plain strings are accepted; anything outside the enums is rejected
        if self.status is not None and not isinstance(self.status, ContentStatusFilter):
            object.__setattr__(self, "status", ContentStatusFilter(self.status))
        if self.date is not None and not isinstance(self.date, DateBucket):
            object.__setattr__(self, "date", DateBucket(self.date))


@dataclass(frozen=True)
class AssetFilterCriteria:
    """Active asset filters. Empty/None means no constraint."""

    folder: str = ""
    type: str = ""
    status: AssetStatusFilter | None = None
    search: str = ""

    def __post_init__(self):
        if self.status is not None and not isinstance(self.status, AssetStatusFilter):
            object.__setattr__(self, "status", AssetStatusFilter(self.status))


@dataclass(frozen=True)
class FacetOption:
    """One selectable filter option."""

    id: str
    name: str


@dataclass
class ContentFacets:
    folders: list[FacetOption] = field(default_factory=list)
    content_types: list[FacetOption] = field(default_factory=list)
    authors: list[FacetOption] = field(default_factory=list)
    dates: list[FacetOption] = field(default_factory=list)


@dataclass
class AssetFacets:
    folders: list[FacetOption] = field(default_factory=list)
    types: list[FacetOption] = field(default_factory=list)
