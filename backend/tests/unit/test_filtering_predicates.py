"""Tests for the content/asset filter predicates.

Test cases:
- Empty criteria keep every visible item
- Visibility: module-managed and hidden content types
- Status: draft / scheduled / published partition
- Calendar date buckets
- Search over title, author and folder name
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest
from factories import NOW, ms

from portal.components.filtering import (
    AssetFilterCriteria,
    AssetItemView,
    ContentFilterCriteria,
    ContentItemView,
    ContentStatusFilter,
    DateBucket,
    filter_assets,
    filter_content,
    in_bucket,
    is_listable,
    visible_content,
)
from portal.components.filtering.dates import local_date, reference_date, resolve_timezone

UTC = timezone.utc


def content_item(content_id: str, **overrides) -> ContentItemView:
    values = {
        "content_id": content_id,
        "content_type_id": "article",
        "content_type_name": "Article",
        "title": f"Title {content_id}",
        "status": "draft",
        "modified_date": ms(2024, 3, 1),
        "modified_user_id": "user_alice",
        "modified_user_name": "Alice",
    }
    values.update(overrides)
    return ContentItemView(**values)


def asset_item(asset_id: str, **overrides) -> AssetItemView:
    values = {
        "asset_id": asset_id,
        "name": f"{asset_id}.png",
        "type": "png",
        "status": "enabled",
        "modified_date": ms(2024, 3, 1),
        "modified_user_name": "Alice",
    }
    values.update(overrides)
    return AssetItemView(**values)


def ids(items) -> list[str]:
    return [getattr(item, "content_id", None) or item.asset_id for item in items]


@pytest.fixture
def items() -> list[ContentItemView]:
    return [
        content_item("c1", folder_id="f1", folder_name="News"),
        content_item("c2", status="published", content_type_id="page", content_type_name="Page"),
        content_item("c3", scheduled_publish_date=ms(2024, 4, 1), modified_user_id="user_bob", modified_user_name="Bob"),
        content_item("c4", folder_id="f2", folder_name="Blog", status="published"),
    ]


class TestEmptyCriteria:
    def test_empty_criteria_keep_everything(self, items):
        """No active filter returns the list unchanged, order included."""
        assert filter_content(items, ContentFilterCriteria(), NOW, UTC) == items

    def test_empty_asset_criteria_keep_everything(self):
        assets = [asset_item("a1"), asset_item("a2", type="pdf")]
        assert filter_assets(assets, AssetFilterCriteria()) == assets


class TestVisibility:
    def test_module_managed_never_listed(self):
        """Module-managed content is excluded even with show_hidden."""
        item = content_item("c1", managed_by_module=True)
        assert is_listable(item, set(), show_hidden=False) is False
        assert is_listable(item, set(), show_hidden=True) is False

    def test_hidden_type_only_on_request(self):
        item = content_item("c1", content_type_id="secret")
        assert is_listable(item, {"secret"}, show_hidden=False) is False
        assert is_listable(item, {"secret"}, show_hidden=True) is True

    def test_visible_content_keeps_order(self, items):
        hidden = {"page"}
        assert ids(visible_content(items, hidden)) == ["c1", "c3", "c4"]


class TestStatusFilter:
    def test_scheduled_is_draft_with_publish_date(self, items):
        result = filter_content(items, ContentFilterCriteria(status=ContentStatusFilter.scheduled), NOW, UTC)
        assert ids(result) == ["c3"]

    def test_draft_excludes_scheduled(self, items):
        result = filter_content(items, ContentFilterCriteria(status="draft"), NOW, UTC)
        assert ids(result) == ["c1"]

    def test_published(self, items):
        result = filter_content(items, ContentFilterCriteria(status="published"), NOW, UTC)
        assert ids(result) == ["c2", "c4"]

    def test_status_partition(self, items):
        """draft, scheduled and published split the list without overlap."""
        seen = []
        for status in ContentStatusFilter:
            seen.extend(ids(filter_content(items, ContentFilterCriteria(status=status), NOW, UTC)))
        assert sorted(seen) == sorted(ids(items))

    def test_unknown_status_rejected(self):
        with pytest.raises(ValueError):
            ContentFilterCriteria(status="archived")

    def test_scheduled_combines_with_other_filters(self, items):
        """Status does not short-circuit the remaining constraints."""
        criteria = ContentFilterCriteria(status="scheduled", user="user_alice")
        assert filter_content(items, criteria, NOW, UTC) == []


class TestFieldFilters:
    def test_folder(self, items):
        assert ids(filter_content(items, ContentFilterCriteria(folder="f1"), NOW, UTC)) == ["c1"]

    def test_content_type(self, items):
        assert ids(filter_content(items, ContentFilterCriteria(content_type="page"), NOW, UTC)) == ["c2"]

    def test_user(self, items):
        assert ids(filter_content(items, ContentFilterCriteria(user="user_bob"), NOW, UTC)) == ["c3"]

    def test_filters_and_together(self, items):
        criteria = ContentFilterCriteria(folder="f2", status="published")
        assert ids(filter_content(items, criteria, NOW, UTC)) == ["c4"]
        criteria = ContentFilterCriteria(folder="f2", status="draft")
        assert filter_content(items, criteria, NOW, UTC) == []


class TestSearch:
    def test_search_title_case_insensitive(self, items):
        assert ids(filter_content(items, ContentFilterCriteria(search="TITLE C2"), NOW, UTC)) == ["c2"]

    def test_search_author(self, items):
        assert ids(filter_content(items, ContentFilterCriteria(search="bob"), NOW, UTC)) == ["c3"]

    def test_search_folder_name(self, items):
        assert ids(filter_content(items, ContentFilterCriteria(search="blog"), NOW, UTC)) == ["c4"]

    def test_asset_search(self):
        assets = [asset_item("logo", folder_name="Brand"), asset_item("hero", modified_user_name="Bob")]
        assert ids(filter_assets(assets, AssetFilterCriteria(search="brand"))) == ["logo"]
        assert ids(filter_assets(assets, AssetFilterCriteria(search="BOB"))) == ["hero"]


class TestDateBuckets:
    def test_yesterday_is_calendar_aligned(self):
        """At 2024-03-15T12:00, 03-14T08:00 is yesterday but 03-13T23:00 is not."""
        items = [
            content_item("recent", modified_date=ms(2024, 3, 14, 8)),
            content_item("older", modified_date=ms(2024, 3, 13, 23)),
        ]
        result = filter_content(items, ContentFilterCriteria(date=DateBucket.yesterday), NOW, UTC)
        assert ids(result) == ["recent"]

    def test_today(self):
        items = [content_item("morning", modified_date=ms(2024, 3, 15, 0, 5))]
        assert ids(filter_content(items, ContentFilterCriteria(date="today"), NOW, UTC)) == ["morning"]

    @pytest.mark.parametrize(
        ("day", "bucket", "expected"),
        [
            ((2024, 3, 1), DateBucket.this_month, True),
            ((2024, 2, 29), DateBucket.this_month, False),
            ((2024, 2, 29), DateBucket.last_month, True),
            ((2024, 1, 31), DateBucket.last_month, False),
            ((2024, 1, 31), DateBucket.this_year, True),
            ((2023, 12, 31), DateBucket.last_year, True),
            ((2022, 12, 31), DateBucket.last_year, False),
        ],
    )
    def test_bucket_boundaries(self, day, bucket, expected):
        today = reference_date(NOW, UTC)
        assert in_bucket(datetime(*day).date(), bucket, today) is expected

    def test_last_month_in_january(self):
        january = datetime(2024, 1, 10).date()
        assert in_bucket(datetime(2023, 12, 5).date(), DateBucket.last_month, january) is True

    def test_buckets_follow_display_timezone(self):
        """23:30 UTC on the 14th is already the 15th in Tokyo."""
        tokyo = ZoneInfo("Asia/Tokyo")
        item = content_item("late", modified_date=ms(2024, 3, 14, 23, 30))
        assert local_date(item.modified_date, tokyo) == datetime(2024, 3, 15).date()
        assert ids(filter_content([item], ContentFilterCriteria(date="today"), NOW, tokyo)) == ["late"]
        assert ids(filter_content([item], ContentFilterCriteria(date="yesterday"), NOW, UTC)) == ["late"]

    def test_resolve_timezone(self):
        assert resolve_timezone("UTC") is timezone.utc
        assert resolve_timezone("") is timezone.utc
        assert resolve_timezone("Europe/Berlin") == ZoneInfo("Europe/Berlin")


class TestAssetFilters:
    def test_type_and_status(self):
        assets = [
            asset_item("a1"),
            asset_item("a2", type="pdf"),
            asset_item("a3", status="disabled"),
        ]
        assert ids(filter_assets(assets, AssetFilterCriteria(type="png"))) == ["a1", "a3"]
        assert ids(filter_assets(assets, AssetFilterCriteria(status="disabled"))) == ["a3"]
        assert ids(filter_assets(assets, AssetFilterCriteria(type="png", status="enabled"))) == ["a1"]

    def test_folder(self):
        assets = [asset_item("a1", folder_id="f1"), asset_item("a2")]
        assert ids(filter_assets(assets, AssetFilterCriteria(folder="f1"))) == ["a1"]
