"""Seed helpers shared by the test suites.

All timestamps are epoch milliseconds; ``ms()`` builds them from UTC
wall-clock values.
"""

from datetime import datetime, timezone

from sqlalchemy.orm import Session

from portal.db.models import Asset, AssetFolder, Content, ContentType, Folder, Space, SpaceMember, User
from portal.settings import Settings

SPACE_ID = "space_test"
USER_ID = "user_alice"

# Fixed evaluation instant for date bucket tests: 2024-03-15 12:00 UTC
NOW = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


def ms(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> int:
    """Epoch milliseconds of a UTC wall-clock time."""
    return int(datetime(year, month, day, hour, minute, tzinfo=timezone.utc).timestamp() * 1000)


def make_settings(**overrides) -> Settings:
    """Test settings that ignore .env.local"""
    values = {"environment": "test", "database_type": "sqlite", "debug": False}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def add_user(db: Session, user_id: str = USER_ID, name: str = "Alice") -> User:
    user = User(id=user_id, name=name, email=f"{user_id}@example.com", created_at=ms(2024, 1, 1))
    db.add(user)
    db.commit()
    return user


def add_space(db: Session, space_id: str = SPACE_ID, name: str = "Test Space") -> Space:
    space = Space(id=space_id, name=name, created_at=ms(2024, 1, 1))
    db.add(space)
    db.commit()
    return space


def add_member(db: Session, space_id: str = SPACE_ID, user_id: str = USER_ID, role: str = "editor") -> None:
    db.add(SpaceMember(space_id=space_id, user_id=user_id, role=role))
    db.commit()


def add_content_type(
    db: Session,
    content_type_id: str,
    name: str | None = None,
    space_id: str = SPACE_ID,
    hidden: bool = False,
    enabled: bool = True,
    created_at: int | None = None,
) -> ContentType:
    content_type = ContentType(
        id=content_type_id,
        space_id=space_id,
        name=name or content_type_id.title(),
        hidden=hidden,
        enabled=enabled,
        created_at=created_at or ms(2024, 1, 1),
    )
    db.add(content_type)
    db.commit()
    return content_type


def add_folder(
    db: Session,
    folder_id: str,
    name: str | None = None,
    space_id: str = SPACE_ID,
    content_types: list[str] | None = None,
    created_at: int | None = None,
) -> Folder:
    folder = Folder(
        id=folder_id,
        space_id=space_id,
        name=name or folder_id,
        content_types=content_types or [],
        created_at=created_at or ms(2024, 1, 1),
    )
    db.add(folder)
    db.commit()
    return folder


def add_content(
    db: Session,
    content_id: str,
    content_type_id: str = "article",
    folder_id: str | None = None,
    space_id: str = SPACE_ID,
    title: str = "",
    status: str = "draft",
    scheduled_publish_date: int | None = None,
    managed_by_module: bool = False,
    modified_date: int | None = None,
    modified_user_id: str = USER_ID,
    modified_user_name: str = "Alice",
) -> Content:
    content = Content(
        id=content_id,
        space_id=space_id,
        content_type_id=content_type_id,
        folder_id=folder_id,
        title=title or content_id,
        status=status,
        scheduled_publish_date=scheduled_publish_date,
        managed_by_module=managed_by_module,
        modified_date=modified_date or ms(2024, 3, 1),
        modified_user_id=modified_user_id,
        modified_user_name=modified_user_name,
    )
    db.add(content)
    db.commit()
    return content


def add_asset_folder(
    db: Session,
    folder_id: str,
    name: str | None = None,
    space_id: str = SPACE_ID,
    created_at: int | None = None,
) -> AssetFolder:
    folder = AssetFolder(id=folder_id, space_id=space_id, name=name or folder_id, created_at=created_at or ms(2024, 1, 1))
    db.add(folder)
    db.commit()
    return folder


def add_asset(
    db: Session,
    asset_id: str,
    name: str,
    type: str = "png",
    folder_id: str | None = None,
    space_id: str = SPACE_ID,
    status: str = "enabled",
    modified_date: int | None = None,
    modified_user_name: str = "Alice",
) -> Asset:
    asset = Asset(
        id=asset_id,
        space_id=space_id,
        asset_folder_id=folder_id,
        name=name,
        type=type,
        status=status,
        modified_date=modified_date or ms(2024, 3, 1),
        modified_user_name=modified_user_name,
    )
    db.add(asset)
    db.commit()
    return asset


