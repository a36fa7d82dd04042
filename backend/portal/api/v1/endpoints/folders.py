"""Content folder API endpoints.

Folders group content items within a space. Deleting a folder either
detaches its content (default) or deletes it (``?cascade=true``).
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from portal.api.deps import get_db, require_space_role
from portal.components.folders import FolderDeleteMode
from portal.models.schemas import CreateFolderRequest, DeleteFolderResponse, FolderResponse
from portal.services import folder_service

router = APIRouter(dependencies=[Depends(require_space_role)])


@router.get("", response_model=list[FolderResponse])
async def list_folders(space_id: str, db: Session = Depends(get_db)) -> list[FolderResponse]:
    """List the folders of a space.

    Returns:
        Folders in creation order
    """
    return [FolderResponse.from_model(folder) for folder in folder_service.list_folders(db, space_id)]


@router.post("", response_model=FolderResponse)
async def create_folder(
    space_id: str,
    request: CreateFolderRequest,
    db: Session = Depends(get_db),
) -> FolderResponse:
    """Create a folder.

    Args:
        space_id: The space ID
        request: Folder name and allowed content types

    Returns:
        The created folder
    """
    folder = folder_service.create_folder(db, space_id, request.name, request.contentTypes)
    return FolderResponse.from_model(folder)


@router.delete("/{folder_id}", response_model=DeleteFolderResponse)
async def delete_folder(
    space_id: str,
    folder_id: str,
    cascade: str | None = Query(default=None),
    db: Session = Depends(get_db),
) -> DeleteFolderResponse:
    """Delete a folder.

    Args:
        space_id: The space ID
        folder_id: The folder ID
        cascade: "true" deletes the folder's content, anything else detaches it

    Returns:
        Empty object

    Raises:
        HTTPException: If folder not found
    """
    mode = FolderDeleteMode.from_cascade_flag(cascade == "true")

    plan = folder_service.delete_folder(db, space_id, folder_id, mode)
    if plan is None:
        raise HTTPException(status_code=404, detail="Folder not found")

    return DeleteFolderResponse()
