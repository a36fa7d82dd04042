"""Content type repository for database operations."""

from portal.db.models import ContentType
from portal.repositories.base import SpaceScopedRepository


class ContentTypeRepository(SpaceScopedRepository[ContentType]):
    """Repository for ContentType entity operations."""

    def __init__(self):
        super().__init__(ContentType)


content_type_repository = ContentTypeRepository()
