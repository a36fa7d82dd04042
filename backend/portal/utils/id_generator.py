"""Record ids and timestamps.

Ids look like ``folder_m1a2b3c4d5e6``: the entity prefix, the creation
time in base36, then six random characters.
"""

import secrets
import string
import time

_ALPHABET = string.digits + string.ascii_lowercase


def get_timestamp_ms() -> int:
    """Current time as epoch milliseconds."""
    return time.time_ns() // 1_000_000


def generate_id(prefix: str) -> str:
    """New id for an entity of kind ``prefix`` ("folder", "content", ...)."""
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(6))
    return f"{prefix}_{_base36(get_timestamp_ms())}{suffix}"


def _base36(value: int) -> str:
    digits = ""
    while True:
        value, remainder = divmod(value, 36)
        digits = _ALPHABET[remainder] + digits
        if not value:
            return digits
