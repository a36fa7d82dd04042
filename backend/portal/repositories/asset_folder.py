"""Asset folder repository for database operations."""

from portal.db.models import AssetFolder
from portal.repositories.base import SpaceScopedRepository


class AssetFolderRepository(SpaceScopedRepository[AssetFolder]):
    """Repository for AssetFolder entity operations."""

    def __init__(self):
        super().__init__(AssetFolder)


asset_folder_repository = AssetFolderRepository()
