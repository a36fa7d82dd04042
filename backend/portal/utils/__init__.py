from .id_generator import generate_id, get_timestamp_ms
from .logging import get_logger, setup_logging
from .phrases import t

__all__ = [
    "generate_id",
    "get_timestamp_ms",
    "get_logger",
    "setup_logging",
    "t",
]
