"""Configuration constants.

On-disk layout conventions of the legacy `use()` module loader. These are
NOT user-configurable: they describe the project layout being navigated.

For configurable values, see models.py (LoggingConfig, ResolutionConfig).
"""

# =============================================================================
# Specifier Conventions
# =============================================================================

ALIAS_SEGMENT = "App"
"""Legacy alias written as the first segment of a specifier (any casing)."""

SOURCE_DIR = "app"
"""Real source-root directory the alias stands for."""

LOADER_NAME = "use"
"""Name of the legacy loader function: ``const X = use('App/...')``."""

# =============================================================================
# Directory Layout
# =============================================================================

MODELS_DIR = "Models"
"""Models directory under SOURCE_DIR (flat or self-named subdirectories)."""

PRIMARY_EXTENSION = ".js"
SECONDARY_EXTENSION = ".ts"
SOURCE_EXTENSIONS: tuple[str, ...] = (PRIMARY_EXTENSION, SECONDARY_EXTENSION)
"""Supported source extensions, in lookup order."""

# =============================================================================
# Repository Config Location
# =============================================================================

CONFIG_DIR_NAME = ".usenav"
CONFIG_FILE_NAME = "config.yaml"
