"""Space and membership repository for database operations."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from portal.db.models import Space, SpaceMember
from portal.repositories.base import BaseRepository


class SpaceRepository(BaseRepository[Space]):
    """Repository for Space entity operations."""

    def __init__(self):
        super().__init__(Space)

    def get_member_role(self, db: Session, space_id: str, user_id: str) -> str | None:
        """Role of a user within a space.

        Returns:
            The role name, or None if the user is not a member
        """
        stmt = select(SpaceMember.role).where(
            SpaceMember.space_id == space_id,
            SpaceMember.user_id == user_id,
        )
        return db.execute(stmt).scalar_one_or_none()


space_repository = SpaceRepository()
