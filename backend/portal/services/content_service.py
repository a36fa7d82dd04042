"""Content listing and creation.

The listing reproduces what the content page shows: visibility rules
first (module-managed and hidden types), facets from the visible list,
then the active filters.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from portal.components.catalog import (
    PageMode,
    creatable_content_types,
    folder_allows,
    resolve_content_page_mode,
)
from portal.components.filtering import (
    ContentFacets,
    ContentFilterCriteria,
    ContentItemView,
    extract_content_facets,
    filter_content,
    visible_content,
)
from portal.db.models import Content, ContentType, Folder
from portal.repositories import content_repository, content_type_repository, folder_repository
from portal.utils import get_logger

logger = get_logger(__name__)


class ContentCreationError(ValueError):
    """Content cannot be created with the requested type/folder."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


@dataclass
class ContentListing:
    """Everything the content listing needs for one render."""

    mode: PageMode
    items: list[ContentItemView] = field(default_factory=list)
    facets: ContentFacets = field(default_factory=ContentFacets)
    creatable_content_types: list[str] = field(default_factory=list)


def to_item_view(
    content: Content,
    content_types: dict[str, ContentType],
    folder_names: dict[str, str],
) -> ContentItemView:
    """Join a content record with its content type and folder names."""
    content_type = content_types.get(content.content_type_id)
    return ContentItemView(
        content_id=content.id,
        content_type_id=content.content_type_id,
        content_type_name=content_type.name if content_type else content.content_type_id,
        title=content.title or "",
        status=content.status,
        modified_date=content.modified_date,
        modified_user_id=content.modified_user_id,
        modified_user_name=content.modified_user_name or "",
        folder_id=content.folder_id,
        folder_name=folder_names.get(content.folder_id) if content.folder_id else None,
        scheduled_publish_date=content.scheduled_publish_date,
        managed_by_module=bool(content.managed_by_module),
    )


def list_content(
    db: Session,
    space_id: str,
    criteria: ContentFilterCriteria,
    show_hidden: bool = False,
    now: datetime | None = None,
    tz=timezone.utc,
) -> ContentListing:
    """Filtered content of a space with facets and creatable types.

    Args:
        db: Database session
        space_id: Space to list
        criteria: Active filters
        show_hidden: Include content of hidden content types
        now: Evaluation instant for date buckets (defaults to current time)
        tz: Timezone date buckets are evaluated in

    Returns:
        The listing
    """
    now = now or datetime.now(timezone.utc)

    content_types = content_type_repository.list_for_space(db, space_id)
    folders = folder_repository.list_for_space(db, space_id)
    records = content_repository.list_for_space(db, space_id)

    types_by_id = {content_type.id: content_type for content_type in content_types}
    folder_names = {folder.id: folder.name for folder in folders}
    hidden_type_ids = {content_type.id for content_type in content_types if content_type.hidden}

    all_items = [to_item_view(record, types_by_id, folder_names) for record in records]
    visible = visible_content(all_items, hidden_type_ids, show_hidden)

    listing = ContentListing(
        mode=resolve_content_page_mode(content_types, all_items, folders),
        items=filter_content(visible, criteria, now, tz),
        facets=extract_content_facets(visible, now, tz),
        creatable_content_types=creatable_content_types(
            content_types,
            folders,
            folder_filter=criteria.folder,
            content_type_filter=criteria.content_type,
            show_hidden=show_hidden,
        ),
    )
    logger.debug(f"Listed {len(listing.items)}/{len(all_items)} content items in space {space_id}")
    return listing


def list_content_types(db: Session, space_id: str) -> list[ContentType]:
    return content_type_repository.list_for_space(db, space_id)


def create_content(
    db: Session,
    space_id: str,
    content_type_id: str,
    user_id: str,
    user_name: str,
    folder_id: str | None = None,
) -> Content:
    """Create a draft content item.

    Raises:
        ContentCreationError: 404 if the content type or folder does not
            exist in the space, 400 if the type is disabled or not allowed
            in the folder
    """
    content_type = content_type_repository.find_one(db, space_id, content_type_id)
    if content_type is None:
        raise ContentCreationError("Content type not found", status_code=404)
    if not content_type.enabled:
        raise ContentCreationError("Content type is disabled")

    folder: Folder | None = None
    if folder_id:
        folder = folder_repository.find_one(db, space_id, folder_id)
        if folder is None:
            raise ContentCreationError("Folder not found", status_code=404)
        if not folder_allows(folder, content_type_id):
            raise ContentCreationError("Content type is not allowed in this folder")

    content = content_repository.create_draft(
        db,
        space_id=space_id,
        content_type_id=content_type_id,
        user_id=user_id,
        user_name=user_name,
        folder_id=folder.id if folder else None,
    )
    logger.info(f"Created content {content.id} ({content_type_id}) in space {space_id}")
    return content
