"""Repository layer for database access.

Repositories abstract database operations for each entity. Everything a
space owns is accessed through a space-scoped repository.

Usage:
    from portal.repositories import folder_repository, content_repository

    folder = folder_repository.find_one(db, space_id, folder_id)
    content_repository.unset_folder(db, space_id, folder_id)
"""

from portal.repositories.asset import AssetRepository, asset_repository
from portal.repositories.asset_folder import AssetFolderRepository, asset_folder_repository
from portal.repositories.content import ContentRepository, content_repository
from portal.repositories.content_type import ContentTypeRepository, content_type_repository
from portal.repositories.folder import FolderRepository, folder_repository
from portal.repositories.space import SpaceRepository, space_repository
from portal.repositories.user import UserRepository, user_repository

__all__ = [
    "AssetRepository",
    "asset_repository",
    "AssetFolderRepository",
    "asset_folder_repository",
    "ContentRepository",
    "content_repository",
    "ContentTypeRepository",
    "content_type_repository",
    "FolderRepository",
    "folder_repository",
    "SpaceRepository",
    "space_repository",
    "UserRepository",
    "user_repository",
]
