#!/usr/bin/env python3
"""Runtime config check script.

Fetches /api/runtime-config from a running portal the way clients do
(``RUNTIME_CONFIG_URL``, ``RUNTIME_CONFIG_TIMEOUT``) and prints the result.
A failed fetch prints the DETACH default and exits with status 1.

Usage:
    cd backend
    python scripts/check_runtime_config.py
"""

import asyncio
import sys

from portal.services import RuntimeConfigClient
from portal.settings import settings
from portal.utils import get_logger

logger = get_logger(__name__)


async def check_runtime_config() -> bool:
    client = RuntimeConfigClient.from_settings(settings)
    config = await client.get()

    logger.info(f"{client.url} -> {config.to_wire()}")
    return client.cached is not None


if __name__ == "__main__":
    sys.exit(0 if asyncio.run(check_runtime_config()) else 1)
