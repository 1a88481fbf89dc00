"""
structdoc Runtime Configuration

Configuration merging logic. Combines defaults, the YAML project config,
environment variables, and command-line values into one DocOptions.
"""

import os
from pathlib import Path
from typing import Any, Optional

from structdoc.ast.models import DocOptions
from structdoc.configs.constants import (
    DEFAULT_OUTPUT,
    DEFAULT_SHOW_EXPORTED,
    DEFAULT_TITLE,
    RECOGNIZED_TAG_KEYS,
)
from structdoc.configs.yaml_config import get_config_path, load_yaml_config
from structdoc.exceptions import ConfigurationError

# --- Default Runtime Configuration ---

DEFAULT_CONFIG = {
    "title": DEFAULT_TITLE,
    "field_tag": None,
    "show_exported": DEFAULT_SHOW_EXPORTED,
    "output": DEFAULT_OUTPUT,
    "ignore": [],
}

# Environment variable -> config key
ENV_OVERRIDES = {
    "STRUCTDOC_TITLE": "title",
    "STRUCTDOC_FIELD_TAG": "field_tag",
}


def get_full_config(
    source_path: str,
    config_path: Optional[str] = None,
    overrides: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    """
    Get the merged configuration for one run.

    Priority (lowest to highest):
    1. DEFAULT_CONFIG
    2. YAML config (explicit config_path, else .structdoc.yaml beside the sources)
    3. STRUCTDOC_* environment variables
    4. overrides (command-line values; None entries are ignored)

    Returns:
        Merged configuration dictionary

    Raises:
        ConfigurationError: If the YAML file is invalid, or ignore/output
            have the wrong type
    """
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path) if config_path else get_config_path(source_path)
    yaml_config = load_yaml_config(path)
    for key in DEFAULT_CONFIG:
        if key in yaml_config:
            config[key] = yaml_config[key]

    for env_var, key in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            config[key] = value

    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value

    config["ignore"] = _pattern_list(config.get("ignore"))

    output = config.get("output")
    if not isinstance(output, str) or not output:
        raise ConfigurationError("output must be a file path", {"value": repr(output)})

    return config


def _pattern_list(value: Any) -> list[str]:
    """Normalize the ignore setting: a single pattern or a list of patterns."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(p, str) for p in value):
        return list(value)
    raise ConfigurationError(
        "ignore must be a pattern or a list of patterns", {"value": repr(value)}
    )


def build_options(config: dict[str, Any]) -> DocOptions:
    """
    Validate a merged config and freeze it into DocOptions.

    Raises:
        ConfigurationError: If field_tag is not a recognized tag key, or
            a value has the wrong type
    """
    field_tag = config.get("field_tag") or None
    if field_tag is not None and field_tag not in RECOGNIZED_TAG_KEYS:
        raise ConfigurationError(
            f"Unsupported field tag: {field_tag}",
            {"supported": ", ".join(RECOGNIZED_TAG_KEYS)},
        )

    show_exported = config.get("show_exported", DEFAULT_SHOW_EXPORTED)
    if not isinstance(show_exported, bool):
        raise ConfigurationError(
            "show_exported must be true or false", {"value": repr(show_exported)}
        )

    title = config.get("title")
    if title is None:
        title = DEFAULT_TITLE

    return DocOptions(
        field_name_tag=field_tag,
        title=str(title),
        show_exported=show_exported,
    )
