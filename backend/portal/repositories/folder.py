"""Folder repository for database operations."""

from sqlalchemy.orm import Session

from portal.db.models import Folder
from portal.repositories.base import SpaceScopedRepository
from portal.utils import generate_id, get_timestamp_ms


class FolderRepository(SpaceScopedRepository[Folder]):
    """Repository for Folder entity operations."""

    def __init__(self):
        super().__init__(Folder)

    def create_folder(
        self,
        db: Session,
        space_id: str,
        name: str,
        content_types: list[str] | None = None,
    ) -> Folder:
        """Create a folder in a space.

        Args:
            db: Database session
            space_id: Owning space
            name: Display name
            content_types: Allowed content type ids (empty = all)

        Returns:
            Created folder
        """
        folder_data = {
            "id": generate_id("folder"),
            "space_id": space_id,
            "name": name,
            "content_types": list(content_types or []),
            "created_at": get_timestamp_ms(),
        }
        return self.create(db, folder_data)

    def delete_many(self, db: Session, space_id: str, folder_id: str) -> int:
        """Remove the folder record keyed by space + folder id (no commit)."""
        return self.delete_where(db, Folder.space_id == space_id, Folder.id == folder_id)


folder_repository = FolderRepository()
