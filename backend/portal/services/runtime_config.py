"""Runtime configuration exposed to portal clients.

Server side, the configuration is derived from settings (the
``FOLDER_DELETE_MODE`` environment variable). Client side,
``RuntimeConfigClient`` fetches it over HTTP once and keeps the result on
the instance; a failed fetch is logged and answered with the defaults,
which are not cached so the next call retries.
"""

import httpx
from pydantic import BaseModel, ValidationError

from portal.components.folders import FolderDeleteMode
from portal.settings import Settings
from portal.utils import get_logger

logger = get_logger(__name__)


class RuntimeConfig(BaseModel):
    """Configuration values the portal frontend needs at runtime."""

    folder_delete_mode: FolderDeleteMode = FolderDeleteMode.DETACH

    # Wire format keeps the environment variable name
    def to_wire(self) -> dict:
        return {"FOLDER_DELETE_MODE": self.folder_delete_mode.value}

    @classmethod
    def from_wire(cls, data: dict) -> "RuntimeConfig":
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
        return cls(folder_delete_mode=data.get("FOLDER_DELETE_MODE") or FolderDeleteMode.DETACH)

    @classmethod
    def from_settings(cls, settings: Settings) -> "RuntimeConfig":
        return cls(folder_delete_mode=settings.folder_delete_mode)


DEFAULT_RUNTIME_CONFIG = RuntimeConfig()


class RuntimeConfigClient:
    """Fetches and caches ``GET /api/runtime-config``.

    Usage:
        client = RuntimeConfigClient.from_settings(settings)
        config = await client.get()
        if config.folder_delete_mode is FolderDeleteMode.CASCADE:
            ...
    """

    def __init__(
        self,
        url: str,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport
        self._cached: RuntimeConfig | None = None

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "RuntimeConfigClient":
        """Client for the URL and timeout configured in ``settings``."""
        return cls(settings.runtime_config_url, timeout=settings.runtime_config_timeout, transport=transport)

    @property
    def cached(self) -> RuntimeConfig | None:
        return self._cached

    async def get(self) -> RuntimeConfig:
        """Return the runtime config, fetching it on first use.

        Never raises: network, HTTP and parse errors are logged and the
        defaults are returned.
        """
        if self._cached is not None:
            return self._cached

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                response = await client.get(self.url, headers={"Cache-Control": "no-store"})
                response.raise_for_status()
                config = RuntimeConfig.from_wire(response.json())
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            logger.error(f"Failed to load runtime config from {self.url}: {e}")
            return DEFAULT_RUNTIME_CONFIG.model_copy()

        self._cached = config
        return config

    def reset(self) -> None:
        """Forget the cached config."""
        self._cached = None
