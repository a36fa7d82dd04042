"""Database engine and session management.

Engines are built from a ``Settings`` instance by the application context
at startup; nothing is connected at import time.

Usage:
    engine = create_db_engine(settings)
    SessionLocal = create_session_factory(engine)

    with session_scope(SessionLocal) as db:
        db.execute(select(Folder))
"""

from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from portal.settings import Settings
from portal.utils import get_logger

logger = get_logger(__name__)


def build_database_url(settings: Settings) -> str:
    """Build database connection URL from settings.

    Returns:
        Database connection URL in SQLAlchemy format
    """
    url = settings.get_database_url_auto()

    if url.startswith("mysql://"):
        url = url.replace("mysql://", "mysql+pymysql://", 1)

    return url


def create_db_engine(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine for the configured database."""
    database_url = build_database_url(settings)
    is_sqlite = database_url.startswith("sqlite")

    engine_kwargs: dict = {
        "echo": settings.debug and settings.environment == "local-dev",
    }

    if is_sqlite:
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url:
            # One shared connection, otherwise every session sees an empty database
            engine_kwargs["poolclass"] = StaticPool
        logger.info(f"Using SQLite database: {database_url}")
    else:
        engine_kwargs.update(
            {
                "pool_size": settings.mysql_pool_size,
                "max_overflow": settings.mysql_max_overflow,
                "pool_pre_ping": settings.mysql_pool_pre_ping,
                "pool_recycle": 3600,
            }
        )
        logger.info(f"Using MySQL database: {database_url.split('@')[1] if '@' in database_url else 'unknown'}")

    engine = create_engine(database_url, **engine_kwargs)

    if not is_sqlite:

        @event.listens_for(engine, "connect")
        def set_connection_timeout(dbapi_connection, connection_record):
            """Set connection timeout for MySQL."""
            cursor = dbapi_connection.cursor()
            cursor.execute("SET SESSION wait_timeout = 28800")  # 8 hours
            cursor.close()

    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def session_scope(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """Transactional scope: commit on success, roll back and re-raise on error.

    Usage:
        with session_scope(SessionLocal) as db:
            db.add(obj)
    """
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def check_connection(engine: Engine) -> bool:
    """Check if database connection is working."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            return True
    except Exception as e:
        logger.error(f"Database connection check failed: {e}")
        return False


def init_db(engine: Engine) -> None:
    """Create tables if they do not exist."""
    from portal.db.models import Base

    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables initialized")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise


def close_db(engine: Engine) -> None:
    """Dispose of pooled connections."""
    engine.dispose()
    logger.info("Database connections closed")
