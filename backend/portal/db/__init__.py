"""Database module for the portal backend.

Components:
- models: SQLAlchemy ORM entities (spaces, folders, content types, content, assets)
- session: engine/session factories built from settings
"""

from portal.db.models import (
    Asset,
    AssetFolder,
    Base,
    Content,
    ContentType,
    Folder,
    Space,
    SpaceMember,
    User,
)
from portal.db.session import (
    check_connection,
    close_db,
    create_db_engine,
    create_session_factory,
    init_db,
    session_scope,
)

__all__ = [
    # Connection
    "create_db_engine",
    "create_session_factory",
    "session_scope",
    "init_db",
    "close_db",
    "check_connection",
    # Models
    "Base",
    "User",
    "Space",
    "SpaceMember",
    "Folder",
    "ContentType",
    "Content",
    "Asset",
    "AssetFolder",
]
