"""
structdoc Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from structdoc.configs.logging import get_logger, setup_logging

# Constants
from structdoc.configs.constants import (
    DEFAULT_OUTPUT,
    DEFAULT_SHOW_EXPORTED,
    DEFAULT_TITLE,
    GO_EXTENSION,
    MAX_FILE_SIZE,
    PROJECT_CONFIG_NAME,
    PROJECT_IGNORE_NAME,
    RECOGNIZED_TAG_KEYS,
)

# Ignore patterns
from structdoc.configs.ignore_patterns import DEFAULT_IGNORE_PATTERNS, load_ignore_patterns

# YAML config
from structdoc.configs.yaml_config import (
    DEFAULT_CONFIG_YAML,
    create_default_config,
    get_config_path,
    load_yaml_config,
)

# Note: runtime.py is NOT imported here; it depends on structdoc.ast.models.
# Import it directly: from structdoc.configs.runtime import ...

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Constants
    "DEFAULT_OUTPUT",
    "DEFAULT_SHOW_EXPORTED",
    "DEFAULT_TITLE",
    "GO_EXTENSION",
    "MAX_FILE_SIZE",
    "PROJECT_CONFIG_NAME",
    "PROJECT_IGNORE_NAME",
    "RECOGNIZED_TAG_KEYS",
    # Ignore patterns
    "DEFAULT_IGNORE_PATTERNS",
    "load_ignore_patterns",
    # YAML config
    "DEFAULT_CONFIG_YAML",
    "create_default_config",
    "get_config_path",
    "load_yaml_config",
]
