"""Service layer: business operations over repositories and components."""

from portal.services import asset_service, content_service, folder_service
from portal.services.runtime_config import (
    DEFAULT_RUNTIME_CONFIG,
    RuntimeConfig,
    RuntimeConfigClient,
)

__all__ = [
    "asset_service",
    "content_service",
    "folder_service",
    "DEFAULT_RUNTIME_CONFIG",
    "RuntimeConfig",
    "RuntimeConfigClient",
]
