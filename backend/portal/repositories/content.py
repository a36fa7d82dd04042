"""Content repository for database operations."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from portal.db.models import Content
from portal.repositories.base import SpaceScopedRepository
from portal.utils import generate_id, get_timestamp_ms


class ContentRepository(SpaceScopedRepository[Content]):
    """Repository for Content entity operations."""

    def __init__(self):
        super().__init__(Content)

    def list_for_space(self, db: Session, space_id: str) -> list[Content]:
        """All content of a space, most recently modified first."""
        stmt = (
            select(Content)
            .where(Content.space_id == space_id)
            .order_by(Content.modified_date.desc(), Content.id)
        )
        return list(db.execute(stmt).scalars().all())

    def list_in_folder(self, db: Session, space_id: str, folder_id: str) -> list[Content]:
        stmt = select(Content).where(Content.space_id == space_id, Content.folder_id == folder_id)
        return list(db.execute(stmt).scalars().all())

    def create_draft(
        self,
        db: Session,
        space_id: str,
        content_type_id: str,
        user_id: str,
        user_name: str,
        folder_id: str | None = None,
        title: str = "",
    ) -> Content:
        """Create a new draft content item.

        Returns:
            Created content
        """
        content_data = {
            "id": generate_id("content"),
            "space_id": space_id,
            "content_type_id": content_type_id,
            "folder_id": folder_id,
            "title": title,
            "status": "draft",
            "managed_by_module": False,
            "modified_date": get_timestamp_ms(),
            "modified_user_id": user_id,
            "modified_user_name": user_name,
        }
        return self.create(db, content_data)

    def delete_many_in_folder(self, db: Session, space_id: str, folder_id: str) -> int:
        """Delete every content item of the space that references the folder (no commit)."""
        return self.delete_where(db, Content.space_id == space_id, Content.folder_id == folder_id)

    def unset_folder(self, db: Session, space_id: str, folder_id: str) -> int:
        """Clear the folder reference on every content item of the space pointing at it (no commit)."""
        return self.update_where(
            db,
            {"folder_id": None},
            Content.space_id == space_id,
            Content.folder_id == folder_id,
        )


content_repository = ContentRepository()
