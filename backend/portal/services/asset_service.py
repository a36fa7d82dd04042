"""Asset listing."""

from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from portal.components.catalog import PageMode, resolve_asset_page_mode
from portal.components.filtering import (
    AssetFacets,
    AssetFilterCriteria,
    AssetItemView,
    extract_asset_facets,
    filter_assets,
)
from portal.db.models import Asset
from portal.repositories import asset_folder_repository, asset_repository


@dataclass
class AssetListing:
    mode: PageMode
    items: list[AssetItemView] = field(default_factory=list)
    facets: AssetFacets = field(default_factory=AssetFacets)


def to_item_view(asset: Asset, folder_names: dict[str, str]) -> AssetItemView:
    return AssetItemView(
        asset_id=asset.id,
        name=asset.name,
        type=asset.type,
        status=asset.status,
        modified_date=asset.modified_date,
        modified_user_name=asset.modified_user_name or "",
        folder_id=asset.asset_folder_id,
        folder_name=folder_names.get(asset.asset_folder_id) if asset.asset_folder_id else None,
    )


def list_assets(db: Session, space_id: str, criteria: AssetFilterCriteria) -> AssetListing:
    """Filtered assets of a space with facets from the unfiltered list.

    Folder names come from the asset folders of the space, never from
    content folders.
    """
    folders = asset_folder_repository.list_for_space(db, space_id)
    folder_names = {folder.id: folder.name for folder in folders}
    items = [to_item_view(asset, folder_names) for asset in asset_repository.list_for_space(db, space_id)]

    return AssetListing(
        mode=resolve_asset_page_mode(items, folders),
        items=filter_assets(items, criteria),
        facets=extract_asset_facets(items),
    )
