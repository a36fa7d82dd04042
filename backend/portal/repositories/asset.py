"""Asset repository for database operations."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from portal.db.models import Asset
from portal.repositories.base import SpaceScopedRepository


class AssetRepository(SpaceScopedRepository[Asset]):
    """Repository for Asset entity operations."""

    def __init__(self):
        super().__init__(Asset)

    def list_for_space(self, db: Session, space_id: str) -> list[Asset]:
        """All assets of a space, most recently modified first."""
        stmt = (
            select(Asset)
            .where(Asset.space_id == space_id)
            .order_by(Asset.modified_date.desc(), Asset.id)
        )
        return list(db.execute(stmt).scalars().all())


asset_repository = AssetRepository()
