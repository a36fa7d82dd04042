"""Asset API endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from portal.api.deps import get_db, require_space_role
from portal.components.filtering import AssetFilterCriteria, AssetStatusFilter
from portal.models.schemas import AssetFacetsResponse, AssetItemResponse, AssetListResponse
from portal.services import asset_service

router = APIRouter(dependencies=[Depends(require_space_role)])


@router.get("", response_model=AssetListResponse)
async def list_assets(
    space_id: str,
    folder: str = Query(default=""),
    type: str = Query(default=""),
    status: AssetStatusFilter | None = Query(default=None),
    search: str = Query(default=""),
    db: Session = Depends(get_db),
) -> AssetListResponse:
    """List the assets of a space.

    Args:
        space_id: The space ID
        folder: Only assets in this folder
        type: Only assets of this type (e.g. "png")
        status: enabled or disabled
        search: Case-insensitive match on name, author or folder name

    Returns:
        Page mode, filtered assets and facets
    """
    criteria = AssetFilterCriteria(folder=folder, type=type, status=status, search=search)
    listing = asset_service.list_assets(db, space_id, criteria)

    return AssetListResponse(
        mode=listing.mode,
        items=[AssetItemResponse.from_view(item) for item in listing.items],
        facets=AssetFacetsResponse.from_facets(listing.facets),
    )
