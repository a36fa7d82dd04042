"""Content type API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from portal.api.deps import get_db, require_space_role
from portal.models.schemas import ContentTypeResponse
from portal.services import content_service

router = APIRouter(dependencies=[Depends(require_space_role)])


@router.get("", response_model=list[ContentTypeResponse])
async def list_content_types(space_id: str, db: Session = Depends(get_db)) -> list[ContentTypeResponse]:
    """List the content types of a space, hidden and disabled ones included."""
    return [ContentTypeResponse.from_model(ct) for ct in content_service.list_content_types(db, space_id)]
