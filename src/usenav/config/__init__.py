"""Config module exports."""

from usenav.config.loader import load_config
from usenav.config.models import (
    LoggingConfig,
    LogOutputConfig,
    ResolutionConfig,
    SymbolCacheConfig,
    UseNavConfig,
)

__all__ = [
    "load_config",
    "LoggingConfig",
    "LogOutputConfig",
    "ResolutionConfig",
    "SymbolCacheConfig",
    "UseNavConfig",
]
