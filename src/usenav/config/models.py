"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (USENAV__SECTION__KEY)
3. Repo YAML (.usenav/config.yaml)
4. Global YAML (~/.config/usenav/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    USENAV__<SECTION>__<KEY>=<VALUE>

Examples:
    USENAV__LOGGING__LEVEL=DEBUG
    USENAV__RESOLUTION__MAX_FILE_SIZE_KB=512
    USENAV__RESOLUTION__SYMBOL_CACHE__ENABLED=true
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        USENAV__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. Queries run per keystroke, so DEBUG is noisy.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class SymbolCacheConfig(BaseModel):
    """Symbol cache configuration.

    Env vars:
        USENAV__RESOLUTION__SYMBOL_CACHE__ENABLED: Enable the cache
        USENAV__RESOLUTION__SYMBOL_CACHE__MAX_ENTRIES: Cached files kept
    """

    enabled: bool = Field(
        default=False,
        description="Cache extracted symbols per file. Entries are re-validated "
        "against mtime and size on every lookup.",
    )
    max_entries: int = Field(
        default=256,
        description="Maximum cached files. Least recently used entries are evicted.",
    )

    @field_validator("max_entries")
    @classmethod
    def validate_max_entries(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_entries must be >= 1, got {v}")
        return v


class ResolutionConfig(BaseModel):
    """Resolution configuration.

    Env vars:
        USENAV__RESOLUTION__MAX_FILE_SIZE_KB: Skip target files larger than this
    """

    max_file_size_kb: int = Field(
        default=1024,
        description="Target files larger than this (KB) are treated as unreadable. "
        "Every query re-reads its target file.",
    )
    symbol_cache: SymbolCacheConfig = Field(default_factory=SymbolCacheConfig)

    @field_validator("max_file_size_kb")
    @classmethod
    def validate_max_file_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_file_size_kb must be >= 1, got {v}")
        return v


class UseNavConfig(BaseModel):
    """Root configuration for usenav.

    All settings can be configured via:
    1. Environment variables: USENAV__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    resolution: ResolutionConfig = Field(default_factory=ResolutionConfig)
