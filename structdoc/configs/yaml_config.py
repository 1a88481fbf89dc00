"""
structdoc YAML Configuration

Loading and defaults for the per-project .structdoc.yaml file.
"""

from pathlib import Path
from typing import Optional

import yaml

from structdoc.configs.constants import PROJECT_CONFIG_NAME
from structdoc.configs.logging import get_logger
from structdoc.exceptions import ConfigurationError, WriteError

logger = get_logger("configs.yaml")

# --- Default Config Template ---

DEFAULT_CONFIG_YAML = """\
# structdoc Configuration
# Place this file as .structdoc.yaml next to your Go sources.

# Documentation title
title: "Go Structs Documentation"

# Struct tag whose value replaces the field name (json, yaml, db, label, ...)
# field_tag: json

# Show the Exported column
show_exported: true

# Output Markdown file
output: docs.md

# Extra directory or file patterns to skip
ignore:
  # - internal/generated
  # - "*_mock.go"
"""


def get_config_path(source_path: str) -> Optional[Path]:
    """Find .structdoc.yaml for a source path (directory or single file)."""
    root = Path(source_path)
    if root.is_file():
        root = root.parent
    candidate = root / PROJECT_CONFIG_NAME
    if candidate.is_file():
        return candidate
    return None


def load_yaml_config(config_path: Optional[Path]) -> dict:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML file, or None for no file

    Returns:
        Configuration dictionary (empty if no file)

    Raises:
        ConfigurationError: If the file is unreadable, not valid YAML,
            or not a mapping at the top level
    """
    if config_path is None:
        return {}

    try:
        content = Path(config_path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            "Cannot read config file", {"path": str(config_path), "error": str(e)}
        ) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            "Invalid YAML in config file", {"path": str(config_path), "error": str(e)}
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Config file must contain a mapping", {"path": str(config_path)}
        )

    logger.debug(f"Loaded config from {config_path}: {sorted(data)}")
    return data


def create_default_config(source_path: str) -> Path:
    """
    Write DEFAULT_CONFIG_YAML into a source directory.

    Returns:
        Path of the written file

    Raises:
        ConfigurationError: If the file already exists
        WriteError: If the file cannot be written
    """
    config_path = Path(source_path) / PROJECT_CONFIG_NAME
    if config_path.exists():
        raise ConfigurationError("Config file already exists", {"path": str(config_path)})

    try:
        config_path.write_text(DEFAULT_CONFIG_YAML)
    except OSError as e:
        raise WriteError(f"Failed to write config: {e}", str(config_path)) from e
    return config_path
