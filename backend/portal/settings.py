"""
Application Settings Management

All configuration for the portal backend: server, database, folder deletion
behaviour, runtime-config client and logging.

IMPORTANT:
- Secrets must come from environment variables, never from source
- Local development can use a .env.local file at the project root
- Production uses system environment variables
- Settings are validated when this module is imported: an invalid value
  (e.g. FOLDER_DELETE_MODE=ARCHIVE) stops the process at startup instead of
  surfacing later in a request
"""

from pathlib import Path
from typing import Literal, get_args

from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# backend/portal/settings.py -> backend/portal/ -> backend/ -> project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

ENV_FILE = PROJECT_ROOT / ".env.local"

FolderDeleteModeName = Literal["DETACH", "CASCADE", "PROMPT"]
FOLDER_DELETE_MODES = get_args(FolderDeleteModeName)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ==================== Environment ====================
    # "local-dev" | "test" | "production"
    environment: str = "local-dev"

    # ==================== Server ====================
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = True

    # ==================== Frontend (CORS) ====================
    frontend_host: str = "localhost"
    frontend_port: int = 3000

    # ==================== Database ====================
    # "sqlite" for local development, "mysql" for production
    database_type: str = "sqlite"

    # Explicit URL overrides the generated one
    database_url: str = ""

    mysql_host: str = "localhost"
    mysql_port: int = 3306
    mysql_user: str = "portal"
    mysql_password: str = "portal_dev"
    mysql_database: str = "portal"
    mysql_pool_size: int = 10
    mysql_max_overflow: int = 20
    mysql_pool_pre_ping: bool = True

    # ==================== Folders ====================
    # Read from the FOLDER_DELETE_MODE environment variable
    folder_delete_mode: FolderDeleteModeName = "DETACH"

    # Calendar buckets (today, last_month, ...) are evaluated in this zone
    display_timezone: str = "UTC"

    # ==================== Runtime config client ====================
    runtime_config_url: str = "http://127.0.0.1:8000/api/runtime-config"
    runtime_config_timeout: float = 5.0

    # ==================== Paths ====================
    workspace_name: str = "portal-workspace"
    logs_subdir: str = "logs"

    # ==================== Logging ====================
    log_max_bytes: int = 20 * 1024 * 1024  # 20MB
    log_backup_count: int = 5

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("folder_delete_mode", mode="before")
    @classmethod
    def normalize_folder_delete_mode(cls, value):
        """Accept lower-case values and treat an empty variable as unset.

        Raises:
            ValueError: Naming the variable and its allowed values
        """
        if value is None or (isinstance(value, str) and not value.strip()):
            return "DETACH"
        mode = (value if isinstance(value, str) else str(value)).strip().upper()
        if mode not in FOLDER_DELETE_MODES:
            raise ValueError(
                f"FOLDER_DELETE_MODE must be one of {', '.join(FOLDER_DELETE_MODES)} (got {value!r})"
            )
        return mode

    @computed_field  # type: ignore[misc]
    @property
    def cors_origins(self) -> list[str]:
        """CORS origins generated from the frontend host and port."""
        frontend_url = f"http://{self.frontend_host}:{self.frontend_port}"
        return [
            frontend_url,
            f"http://127.0.0.1:{self.frontend_port}",
            f"http://localhost:{self.frontend_port}",
        ]

    def validate_configuration(self) -> None:
        """
        Check for configuration conflicts.

        Raises:
            ValueError: If configuration is invalid
        """
        if self.port == self.frontend_port:
            raise ValueError(
                f"Port conflict: Backend port {self.port} conflicts with "
                f"frontend port {self.frontend_port}"
            )

    # ==================== Path helpers ====================

    @classmethod
    def get_project_root(cls) -> Path:
        return PROJECT_ROOT

    def is_local_dev(self) -> bool:
        """Check if running in local development mode."""
        return self.environment == "local-dev"

    def get_workspace_root(self) -> Path:
        """
        Workspace root directory.

        - local-dev: {project_root}/portal-workspace/
        - test/production: /app/
        """
        if self.is_local_dev():
            return self.get_project_root() / self.workspace_name
        return Path("/app")

    def get_logs_root(self) -> Path:
        return self.get_workspace_root() / self.logs_subdir

    def get_database_dir(self) -> Path:
        return self.get_workspace_root() / "databases"

    def get_sqlite_path(self) -> Path:
        """SQLite database file for the current environment.

        - test: :memory:
        - local-dev: {workspace}/databases/portal_dev.db
        - production: {workspace}/databases/portal.db
        """
        if self.environment == "test":
            return Path(":memory:")
        db_dir = self.get_database_dir()
        db_dir.mkdir(parents=True, exist_ok=True)
        if self.environment == "local-dev":
            return db_dir / "portal_dev.db"
        return db_dir / "portal.db"

    def get_database_url_auto(self) -> str:
        """Build the database URL from ``database_type`` unless one is given."""
        if self.database_url:
            return self.database_url

        if self.database_type == "sqlite":
            sqlite_path = self.get_sqlite_path()
            if str(sqlite_path) == ":memory:":
                return "sqlite:///:memory:"
            return f"sqlite:///{sqlite_path}"

        return (
            f"mysql+pymysql://{self.mysql_user}:{self.mysql_password}"
            f"@{self.mysql_host}:{self.mysql_port}/{self.mysql_database}?charset=utf8mb4"
        )


settings = Settings()
