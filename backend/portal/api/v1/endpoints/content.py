"""Content API endpoints.

Listing applies the same visibility rules and filters as the content page
and returns the facets and creatable content types along with the items.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from portal.api.deps import get_app_context, get_current_user, get_db, require_space_role
from portal.components.filtering import ContentFilterCriteria, ContentStatusFilter, DateBucket
from portal.context import AppContext
from portal.db.models import User
from portal.models.schemas import (
    ContentFacetsResponse,
    ContentItemResponse,
    ContentListResponse,
    ContentResponse,
    CreateContentRequest,
)
from portal.services import content_service
from portal.services.content_service import ContentCreationError

router = APIRouter(dependencies=[Depends(require_space_role)])


@router.get("", response_model=ContentListResponse)
async def list_content(
    space_id: str,
    folder: str = Query(default=""),
    contentType: str = Query(default=""),
    user: str = Query(default=""),
    status: ContentStatusFilter | None = Query(default=None),
    date: DateBucket | None = Query(default=None),
    search: str = Query(default=""),
    showHidden: bool = Query(default=False),
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_app_context),
) -> ContentListResponse:
    """List the content of a space.

    Args:
        space_id: The space ID
        folder: Only content in this folder
        contentType: Only content of this type
        user: Only content last modified by this user
        status: draft, scheduled or published
        date: Modification date bucket
        search: Case-insensitive match on title, author or folder name
        showHidden: Include content of hidden content types

    Returns:
        Page mode, filtered items, facets and creatable content types
    """
    criteria = ContentFilterCriteria(
        folder=folder,
        content_type=contentType,
        user=user,
        status=status,
        date=date,
        search=search,
    )
    listing = content_service.list_content(db, space_id, criteria, show_hidden=showHidden, tz=context.timezone)

    return ContentListResponse(
        mode=listing.mode,
        items=[ContentItemResponse.from_view(item) for item in listing.items],
        facets=ContentFacetsResponse.from_facets(listing.facets),
        creatableContentTypes=listing.creatable_content_types,
    )


@router.post("", response_model=ContentResponse)
async def create_content(
    space_id: str,
    request: CreateContentRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ContentResponse:
    """Create a draft content item.

    Args:
        space_id: The space ID
        request: Content type and optional folder

    Returns:
        The created content

    Raises:
        HTTPException: If the content type or folder is missing or not allowed
    """
    try:
        content = content_service.create_content(
            db,
            space_id,
            request.contentTypeId,
            user_id=current_user.id,
            user_name=current_user.name,
            folder_id=request.folderId,
        )
    except ContentCreationError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

    return ContentResponse.from_model(content)
