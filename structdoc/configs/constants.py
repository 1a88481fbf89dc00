"""
structdoc Constants

Static configuration values: output defaults, recognized struct tag
conventions, and source file filtering.
"""

# --- Output Defaults ---

DEFAULT_TITLE = "Go Structs Documentation"
DEFAULT_OUTPUT = "docs.md"
DEFAULT_SHOW_EXPORTED = True

# --- Struct Tags ---
# Closed set of tag keys the tag parser understands. Only these can
# supply a field's display name.

RECOGNIZED_TAG_KEYS = (
    "json",
    "xml",
    "yaml",
    "toml",
    "db",
    "bson",
    "mapstructure",
    "form",
    "label",
)

# --- Source Files ---

GO_EXTENSION = ".go"

# Go files larger than this are skipped by the walker (bytes)
MAX_FILE_SIZE = 2 * 1024 * 1024

# Project config file looked up in the source directory
PROJECT_CONFIG_NAME = ".structdoc.yaml"

# Project ignore file looked up in the source directory
PROJECT_IGNORE_NAME = ".structdocignore"
