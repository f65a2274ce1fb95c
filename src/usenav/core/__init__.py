"""Core module exports."""

from usenav.core.errors import (
    ConfigError,
    ErrorCode,
    UseNavError,
)
from usenav.core.logging import (
    clear_query_id,
    configure_logging,
    get_logger,
    get_query_id,
    set_query_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "UseNavError",
    # Logging
    "clear_query_id",
    "configure_logging",
    "get_logger",
    "get_query_id",
    "set_query_id",
]
