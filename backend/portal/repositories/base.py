"""Base repository classes with common operations.

``BaseRepository`` provides generic CRUD; ``SpaceScopedRepository`` adds
queries that are always restricted to one space, the tenant boundary of
every portal entity.

Bulk mutations (``delete_where``, ``update_where``) do not commit: callers
that combine several of them own the transaction.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from portal.db.models import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with common CRUD operations."""

    def __init__(self, model: type[ModelType]):
        """Initialize repository with model class.

        Args:
            model: SQLAlchemy model class
        """
        self.model = model

    def get_by_id(self, db: Session, id: str) -> ModelType | None:
        """Get entity by primary key, or None if not found."""
        return db.get(self.model, id)

    def create(self, db: Session, obj_in: dict[str, Any]) -> ModelType:
        """Create a new entity.

        Args:
            db: Database session
            obj_in: Entity data as dict

        Returns:
            Created entity
        """
        db_obj = self.model(**obj_in)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def exists(self, db: Session, id: str) -> bool:
        return db.get(self.model, id) is not None

    def delete_where(self, db: Session, *criteria) -> int:
        """Delete every row matching ``criteria`` without committing.

        Returns:
            Number of rows deleted
        """
        result = db.execute(delete(self.model).where(*criteria))
        return result.rowcount or 0

    def update_where(self, db: Session, values: dict[str, Any], *criteria) -> int:
        """Update every row matching ``criteria`` without committing.

        Returns:
            Number of rows updated
        """
        result = db.execute(update(self.model).where(*criteria).values(**values))
        return result.rowcount or 0


class SpaceScopedRepository(BaseRepository[ModelType]):
    """Repository for entities owned by a space (``space_id`` column)."""

    def find_one(self, db: Session, space_id: str, id: str) -> ModelType | None:
        """Get an entity by ID, only if it belongs to ``space_id``."""
        stmt = select(self.model).where(self.model.space_id == space_id, self.model.id == id)
        return db.execute(stmt).scalar_one_or_none()

    def list_for_space(self, db: Session, space_id: str) -> list[ModelType]:
        """All entities of a space in insertion order."""
        stmt = select(self.model).where(self.model.space_id == space_id).order_by(self.model.created_at)
        return list(db.execute(stmt).scalars().all())
