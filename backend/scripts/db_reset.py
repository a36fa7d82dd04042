#!/usr/bin/env python3
"""Database reset script.

Resets the development database: drops all data, recreates the tables and
optionally seeds a demo space.

Usage:
    cd backend
    python scripts/db_reset.py [--seed]
"""

import argparse
import sys

from portal.db import close_db, create_db_engine, create_session_factory, session_scope
from portal.db.models import Base, Content, ContentType, Folder, Space, SpaceMember, User
from portal.settings import settings
from portal.utils import generate_id, get_logger, get_timestamp_ms

logger = get_logger(__name__)


def seed_demo_space(session_factory) -> None:
    """Create a demo user and space with one folder, one content type and one draft."""
    now = get_timestamp_ms()
    with session_scope(session_factory) as db:
        db.add(User(id="user_demo", name="Demo User", email="demo@example.com", created_at=now))
        db.add(Space(id="space_demo", name="Demo Space", created_at=now))
        db.add(SpaceMember(space_id="space_demo", user_id="user_demo", role="owner"))
        db.add(ContentType(id="article", space_id="space_demo", name="Article", created_at=now))
        db.add(Folder(id="folder_news", space_id="space_demo", name="News", content_types=[], created_at=now))
        db.add(
            Content(
                id=generate_id("content"),
                space_id="space_demo",
                content_type_id="article",
                folder_id="folder_news",
                title="Hello portal",
                status="draft",
                modified_date=now,
                modified_user_id="user_demo",
                modified_user_name="Demo User",
            )
        )
    logger.info("Seeded demo space 'space_demo' (X-User-Id: user_demo)")


def reset_database(seed: bool = False) -> None:
    if settings.environment not in ["local-dev", "test"]:
        logger.error("Database reset is only allowed in local-dev or test environment")
        logger.error(f"Current environment: {settings.environment}")
        sys.exit(1)

    db_type = settings.database_type
    logger.info(f"Database type: {db_type}")

    if db_type == "sqlite":
        sqlite_path = settings.get_sqlite_path()
        if str(sqlite_path) != ":memory:" and sqlite_path.exists():
            sqlite_path.unlink()
            logger.info(f"Deleted SQLite database: {sqlite_path}")

    engine = create_db_engine(settings)
    try:
        if db_type != "sqlite":
            logger.info("Dropping all MySQL tables...")
            Base.metadata.drop_all(bind=engine)

        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created")

        if seed:
            seed_demo_space(create_session_factory(engine))
    finally:
        close_db(engine)

    logger.info("Database reset completed")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Reset the portal database")
    parser.add_argument("--seed", action="store_true", help="Create a demo space after the reset")
    args = parser.parse_args()
    reset_database(seed=args.seed)
