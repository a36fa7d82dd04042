"""Application context.

Everything process-wide (settings, database engine, session factory,
runtime config and the client that reads it back over HTTP, display
timezone) is built once at startup and handed to
request handlers through ``app.state.context``.
"""

from dataclasses import dataclass
from datetime import tzinfo

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from portal.components.filtering import resolve_timezone
from portal.db.session import close_db, create_db_engine, create_session_factory, init_db
from portal.services.runtime_config import RuntimeConfig, RuntimeConfigClient
from portal.settings import Settings
from portal.utils import get_logger

logger = get_logger(__name__)


@dataclass
class AppContext:
    settings: Settings
    engine: Engine
    session_factory: sessionmaker
    runtime_config: RuntimeConfig
    runtime_config_client: RuntimeConfigClient
    timezone: tzinfo

    def close(self) -> None:
        close_db(self.engine)


def create_app_context(settings: Settings) -> AppContext:
    """Build the context: engine, tables, runtime config.

    Raises:
        zoneinfo.ZoneInfoNotFoundError: If ``display_timezone`` is unknown
    """
    engine = create_db_engine(settings)
    init_db(engine)

    context = AppContext(
        settings=settings,
        engine=engine,
        session_factory=create_session_factory(engine),
        runtime_config=RuntimeConfig.from_settings(settings),
        runtime_config_client=RuntimeConfigClient.from_settings(settings),
        timezone=resolve_timezone(settings.display_timezone),
    )
    logger.info(
        f"App context ready (environment={settings.environment}, "
        f"folder_delete_mode={context.runtime_config.folder_delete_mode.value})"
    )
    return context
