"""SQLAlchemy ORM models for the content portal.

Entity Hierarchy:
    User <-> SpaceMember <-> Space -> Folder
                                   -> ContentType
                                   -> Content  (optional folder reference)
                                   -> AssetFolder
                                   -> Asset    (optional asset folder reference)

Folder references on content and assets are plain columns rather than
foreign keys: what happens to them when a folder goes away is decided by
the folder deletion policy, not by the database.
"""

from sqlalchemy import (
    JSON,
    BigInteger,
    Boolean,
    Column,
    Enum,
    ForeignKey,
    Index,
    String,
)
from sqlalchemy.orm import DeclarativeBase, relationship


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class User(Base):
    """User account."""

    __tablename__ = "users"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True, unique=True)
    # "admin" users may configure any space
    role = Column(Enum("user", "admin", name="user_role"), default="user", nullable=False)
    created_at = Column(BigInteger, nullable=False)

    memberships = relationship("SpaceMember", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, name={self.name})>"


class Space(Base):
    """Space - tenant boundary owning folders, content types, content and assets."""

    __tablename__ = "spaces"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False)
    created_at = Column(BigInteger, nullable=False)

    members = relationship("SpaceMember", back_populates="space", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<Space(id={self.id}, name={self.name})>"


class SpaceMember(Base):
    """Role of a user within a space ("owner", "editor", "reader", ...)."""

    __tablename__ = "space_members"

    space_id = Column(String(64), ForeignKey("spaces.id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(String(64), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    role = Column(String(32), nullable=False, default="reader")

    space = relationship("Space", back_populates="members")
    user = relationship("User", back_populates="memberships")

    __table_args__ = (Index("idx_space_members_user_id", "user_id"),)


class Folder(Base):
    """Folder - named grouping of content within a space."""

    __tablename__ = "folders"

    id = Column(String(64), primary_key=True)
    space_id = Column(String(64), ForeignKey("spaces.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)
    # Allowed content type ids; empty list means every type is allowed
    content_types = Column(JSON, nullable=False, default=list)
    created_at = Column(BigInteger, nullable=False)

    __table_args__ = (Index("idx_folders_space_id", "space_id"),)

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, space_id={self.space_id}, name={self.name})>"


class AssetFolder(Base):
    """AssetFolder - named grouping of assets within a space.

    Kept apart from content folders: deleting a content folder never touches
    assets.
    """

    __tablename__ = "asset_folders"

    id = Column(String(64), primary_key=True)
    space_id = Column(String(64), ForeignKey("spaces.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)
    created_at = Column(BigInteger, nullable=False)

    __table_args__ = (Index("idx_asset_folders_space_id", "space_id"),)

    def __repr__(self) -> str:
        return f"<AssetFolder(id={self.id}, space_id={self.space_id}, name={self.name})>"


class ContentType(Base):
    """ContentType - schema definition for content items."""

    __tablename__ = "content_types"

    id = Column(String(64), primary_key=True)
    space_id = Column(String(64), ForeignKey("spaces.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)
    hidden = Column(Boolean, nullable=False, default=False)
    enabled = Column(Boolean, nullable=False, default=True)
    created_at = Column(BigInteger, nullable=False)

    __table_args__ = (Index("idx_content_types_space_id", "space_id"),)

    def __repr__(self) -> str:
        return f"<ContentType(id={self.id}, name={self.name})>"


class Content(Base):
    """Content - structured record governed by a content type."""

    __tablename__ = "content"

    id = Column(String(64), primary_key=True)
    space_id = Column(String(64), ForeignKey("spaces.id", ondelete="CASCADE"), nullable=False)
    content_type_id = Column(String(64), nullable=False)
    folder_id = Column(String(64), nullable=True)
    title = Column(String(512), nullable=False, default="")
    status = Column(Enum("draft", "published", name="content_status"), default="draft", nullable=False)
    scheduled_publish_date = Column(BigInteger, nullable=True)
    managed_by_module = Column(Boolean, nullable=False, default=False)
    modified_date = Column(BigInteger, nullable=False)
    modified_user_id = Column(String(64), nullable=False)
    modified_user_name = Column(String(255), nullable=False, default="")

    __table_args__ = (
        Index("idx_content_space_id", "space_id"),
        Index("idx_content_space_folder", "space_id", "folder_id"),
    )

    def __repr__(self) -> str:
        return f"<Content(id={self.id}, status={self.status})>"


class Asset(Base):
    """Asset - uploaded file."""

    __tablename__ = "assets"

    id = Column(String(64), primary_key=True)
    space_id = Column(String(64), ForeignKey("spaces.id", ondelete="CASCADE"), nullable=False)
    asset_folder_id = Column(String(64), nullable=True)
    name = Column(String(255), nullable=False)
    type = Column(String(32), nullable=False)
    status = Column(Enum("enabled", "disabled", name="asset_status"), default="enabled", nullable=False)
    modified_date = Column(BigInteger, nullable=False)
    modified_user_name = Column(String(255), nullable=False, default="")

    __table_args__ = (Index("idx_assets_space_folder", "space_id", "asset_folder_id"),)

    def __repr__(self) -> str:
        return f"<Asset(id={self.id}, name={self.name})>"
